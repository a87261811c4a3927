# -----------------------------------------------------------------------------
# connectivity - Dual Licensed Software
# Copyright (c) 2025 Adem Can
#
# This file is part of connectivity.
#
# connectivity is available under a dual-license:
#   1. AGPLv3 (Affero General Public License v3)
#      - See LICENSE.txt and LICENSE-AGPL.txt
#      - Online: https://www.gnu.org/licenses/agpl-3.0.html
#
#   2. Commercial License
#      - For proprietary or revenue-generating use,
#        including SaaS, embedding in closed-source software,
#        or avoiding AGPL obligations.
#      - See LICENSE.txt and COMMERCIAL-LICENSE.txt
#      - Contact: ademfcan@gmail.com
#
# By using this file, you agree to the terms of one of the two licenses above.
# -----------------------------------------------------------------------------


"""
Layered configuration for the connectivity CLI.

Each source is a flat mapping of GlobalConfig field names to raw values.
Sources are consulted from highest to lowest priority and a field is
taken from the first source that sets it; pydantic then validates the
merged mapping and fills whatever no source provided.
"""

import os
from pathlib import Path
from typing import NamedTuple

import tomli
from loguru import logger
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from rich.markup import escape

from connectivity.core.exceptions import ConfigurationError


class ConfigSource(NamedTuple):
    name: str
    values: dict


class ConfigLoader:
    """Merges CLI arguments, TOML files and environment variables into one model."""

    @staticmethod
    def get_full_config(
        config_model: type[BaseModel],
        input_args: dict,
        local_config_path: Path,
        env_app_prefix: str,
        global_config_path: Path,
        custom_config_path: Path | None = None,
    ):
        """
        Build `config_model` from every source.

        Priority: input args > custom config > local config > environment > global config.

        Returns:
            (model, names of the sources that contributed, whether any default was used)
        """
        sources = [ConfigSource("Input Args", input_args)]
        if custom_config_path is not None:
            sources.append(
                ConfigSource("Custom Config", ConfigLoader.load_toml(custom_config_path))
            )
        sources += [
            ConfigSource("Local Config", ConfigLoader.load_toml(local_config_path)),
            ConfigSource("Environment Variables", ConfigLoader.load_env(env_app_prefix)),
            ConfigSource("Global Config", ConfigLoader.load_toml(global_config_path)),
        ]

        merged, used_sources, missing = ConfigLoader.merge(
            sources, set(config_model.model_fields)
        )
        model = ConfigLoader.validate(config_model, merged)

        return model, used_sources, bool(missing)

    @staticmethod
    def merge(sources: list[ConfigSource], fields: set[str]) -> tuple[dict, list[str], set[str]]:
        """First source to set a field wins. Keys that are not fields are ignored."""
        merged = {}
        used_sources = []

        for source in sources:
            logger.debug(f"Config source {source.name}: {source.values}")
            taken = {k: v for k, v in source.values.items() if k in fields and k not in merged}
            if taken:
                merged.update(taken)
                used_sources.append(source.name)

        return merged, used_sources, fields - merged.keys()

    @staticmethod
    def validate(config_model: type[BaseModel], data: dict) -> BaseModel:
        try:
            return TypeAdapter(config_model).validate_python(data)
        except PydanticValidationError as e:
            raise ConfigurationError("Invalid configuration", str(e)) from e

    @staticmethod
    def load_toml(path: Path) -> dict:
        """Read a TOML file. A missing or unparsable file contributes nothing."""
        if not path.exists():
            logger.debug(f"{path} does not exist")
            return {}

        try:
            with open(path, "rb") as f:
                return tomli.load(f)
        except tomli.TOMLDecodeError as e:
            logger.warning(escape(f"Ignoring {path}, it is not valid TOML: {e}"))
            return {}

    @staticmethod
    def load_env(app_prefix: str) -> dict:
        """Variables named `<prefix><field>` in any case, keyed by lowercased field name."""
        prefix = app_prefix.lower()
        return {
            k[len(prefix) :].lower(): v
            for k, v in os.environ.items()
            if k.lower().startswith(prefix)
        }
