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


from pathlib import Path
from unittest.mock import mock_open, patch

import pytest
from pydantic import BaseModel

from connectivity.context import GlobalConfig
from connectivity.core.config.config_loader import ConfigLoader, ConfigSource
from connectivity.core.exceptions import ConfigurationError

# -----------------------------------------------------------------------------
# Test Models
# -----------------------------------------------------------------------------


class SampleConfig(BaseModel):
    val: str | None = None
    number: int = 0
    flag: bool = False


# -----------------------------------------------------------------------------
# ConfigLoader Tests
# -----------------------------------------------------------------------------


def test_load_toml_exists():
    """Test loading a valid TOML file."""
    toml_content = b'val = "test"\nnumber = 42'
    with patch("builtins.open", mock_open(read_data=toml_content)):
        with patch("pathlib.Path.exists", return_value=True):
            data = ConfigLoader.load_toml(Path("config.toml"))
            assert data == {"val": "test", "number": 42}


def test_load_toml_not_exists():
    """Test loading a non-existent file returns empty dict."""
    with patch("pathlib.Path.exists", return_value=False):
        data = ConfigLoader.load_toml(Path("missing.toml"))
        assert data == {}


def test_load_toml_invalid():
    """Test loading an invalid TOML file handles exception."""
    with patch("builtins.open", mock_open(read_data=b"invalid toml content")):
        with patch("pathlib.Path.exists", return_value=True):
            data = ConfigLoader.load_toml(Path("bad.toml"))
            assert data == {}


def test_load_env():
    """Test loading environment variables with prefix; keys are lowercased."""
    with patch.dict(
        "os.environ",
        {"APP_VAL": "env_val", "APP_NUMBER": "10", "OTHER": "ignore"},
        clear=True,
    ):
        data = ConfigLoader.load_env("APP_")
        assert data == {"val": "env_val", "number": "10"}


def _run_config(args, custom=False, env=None):
    sources = {
        "local.toml": {"val": "local"},
        "global.toml": {"val": "global", "number": 3},
        "custom.toml": {"val": "custom"},
    }
    with (
        patch.object(ConfigLoader, "load_toml") as mock_load_toml,
        patch.object(ConfigLoader, "load_env") as mock_load_env,
    ):
        mock_load_env.return_value = env if env is not None else {"val": "env"}
        mock_load_toml.side_effect = lambda path: sources.get(str(path), {})

        return ConfigLoader.get_full_config(
            SampleConfig,
            args,
            Path("local.toml"),
            "APP_",
            Path("global.toml"),
            Path("custom.toml") if custom else None,
        )


def test_precedence_order():
    """Args > Custom > Local > Env > Global."""
    config, sources, _ = _run_config({"val": "args"}, custom=True)
    assert config.val == "args"
    assert sources[0] == "Input Args"

    config, sources, _ = _run_config({}, custom=True)
    assert config.val == "custom"
    assert sources[0] == "Custom Config"

    config, _, _ = _run_config({})
    assert config.val == "local"


def test_lower_priority_sources_fill_missing_keys():
    config, sources, used_defaults = _run_config({"flag": True})

    assert config.flag is True
    assert config.val == "local"
    assert config.number == 3
    assert sources == ["Input Args", "Local Config", "Global Config"]
    assert used_defaults is False


def test_defaults_used_when_no_source_has_key():
    config, _, used_defaults = _run_config({"val": "x", "number": 1})
    assert config.flag is False
    assert used_defaults is True


def test_env_strings_are_coerced():
    with (
        patch.object(ConfigLoader, "load_toml", return_value={}),
        patch.object(
            ConfigLoader,
            "load_env",
            return_value={"trace": "true", "algorithm": "wqu"},
        ),
    ):
        config, _, _ = ConfigLoader.get_full_config(
            GlobalConfig, {}, Path("l.toml"), "connectivity_", Path("g.toml")
        )

    assert config.trace is True
    assert config.algorithm == "wqu"


def test_invalid_value_raises_configuration_error():
    with (
        patch.object(ConfigLoader, "load_toml", return_value={}),
        patch.object(ConfigLoader, "load_env", return_value={}),
    ):
        with pytest.raises(ConfigurationError):
            ConfigLoader.get_full_config(
                GlobalConfig,
                {"out_of_range": "ignore"},
                Path("l.toml"),
                "connectivity_",
                Path("g.toml"),
            )


def test_merge_takes_each_field_from_first_source_setting_it():
    sources = [
        ConfigSource("Input Args", {"val": "args"}),
        ConfigSource("Local Config", {"val": "local", "unknown": 1}),
        ConfigSource("Global Config", {"number": 7}),
    ]

    merged, used, missing = ConfigLoader.merge(sources, {"val", "number", "flag"})

    assert merged == {"val": "args", "number": 7}
    assert used == ["Input Args", "Global Config"]
    assert missing == {"flag"}
