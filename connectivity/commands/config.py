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


import os
from pathlib import Path

import tomli
import typer
from platformdirs import user_config_dir
from rich import print
from rich.console import Console
from rich.table import Table

from connectivity.context import GlobalConfig

console = Console()

CONFIG_FILENAME = "connectivityconfig.toml"
ENV_PREFIX = "connectivity_"
SCOPES = ("local", "global", "env")


def _get_config_schema() -> dict:
    """Get the schema of available config options from GlobalConfig."""
    schema = {}

    for field_name, field_info in GlobalConfig.model_fields.items():
        description = field_info.description or "No description available"
        schema[field_name] = {"description": description, "default": field_info.default}

    return schema


def _truncate_text(text: str, max_length: int = 50) -> str:
    """Truncate text with ellipsis if it exceeds max_length."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def _check_key_exists(key: str) -> None:
    """Check if a config key exists. If not, show available options and exit."""
    schema = _get_config_schema()

    if key not in schema:
        console.print(f"[red]Error:[/red] Unknown configuration key '{key}'\n")
        console.print("[bold]Available configuration options:[/bold]\n")

        table = Table(show_header=True, header_style="bold cyan", show_lines=True)
        table.add_column("Key", style="cyan")
        table.add_column("Description", style="yellow")
        table.add_column("Default", style="green")

        for config_key, info in sorted(schema.items()):
            description = _truncate_text(info["description"], 60)
            table.add_row(config_key, description, str(info["default"]))

        console.print(table)
        raise typer.Exit(1)


def _parse_value(value: str):
    """Store booleans as TOML booleans, everything else as strings."""
    if value.lower() in {"true", "false"}:
        return value.lower() == "true"
    return value


def _config_path(scope: str) -> Path:
    if scope == "global":
        return Path(user_config_dir("connectivity")) / CONFIG_FILENAME
    return Path(CONFIG_FILENAME)


def _read_config(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            return tomli.load(f)
    except tomli.TOMLDecodeError as e:
        print(f"[yellow]Failed to parse {path}: {e}[/yellow]")
        return {}


def _set_config(key: str, value: str, scope: str) -> None:
    """Set a configuration value in the specified scope."""
    _check_key_exists(key)

    if scope == "env":
        env_var = f"{ENV_PREFIX}{key}"
        console.print("[green]To set this as an environment variable:[/green]")
        console.print(f"  Windows (PowerShell): $env:{env_var}='{value}'")
        console.print(f"  Windows (CMD): set {env_var}={value}")
        console.print(f"  Linux/macOS: export {env_var}='{value}'")
        return

    config_path = _config_path(scope)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    config_data = _read_config(config_path)
    config_data[key] = _parse_value(value)

    with open(config_path, "w", encoding="utf-8") as f:
        # flat key-value pairs only
        for k, v in config_data.items():
            if isinstance(v, bool):
                f.write(f"{k} = {str(v).lower()}\n")
            elif isinstance(v, (int, float)):
                f.write(f"{k} = {v}\n")
            else:
                f.write(f'{k} = "{v}"\n')

    print(f"[green]Set {key} = {value} ({scope})[/green]")
    print(f"Config file: {config_path.absolute()}")


def _get_config(key: str | None, scope: str | None) -> None:
    """Get configuration value(s) from the specified scope or all scopes."""
    sources = []

    if scope is None or scope == "local":
        local_config = _read_config(_config_path("local"))
        if local_config:
            sources.append(("Local", _config_path("local"), local_config))

    if scope is None or scope == "env":
        env_config = {
            k[len(ENV_PREFIX) :].lower(): v
            for k, v in os.environ.items()
            if k.lower().startswith(ENV_PREFIX)
        }
        if env_config:
            sources.append(("Environment", None, env_config))

    if scope is None or scope == "global":
        global_config = _read_config(_config_path("global"))
        if global_config:
            sources.append(("Global", _config_path("global"), global_config))

    if key:
        _check_key_exists(key)

        table = Table(title=f"Configuration: {key}", show_lines=True)
        table.add_column("Source", style="cyan")
        table.add_column("Value", style="green")
        table.add_column("Location", style="dim")

        for source_name, source_path, config_data in sources:
            if key in config_data:
                location = str(source_path) if source_path else "Environment Variables"
                table.add_row(source_name, str(config_data[key]), location)

        if table.row_count:
            console.print(table)
        else:
            default = _get_config_schema()[key]["default"]
            print(f"[yellow]Key '{key}' not set, default is {default}[/yellow]")
        return

    schema = _get_config_schema()
    table = Table(title="Configuration Options", show_lines=True)
    table.add_column("Key", style="cyan")
    table.add_column("Description", style="yellow")
    table.add_column("Value/Default", style="green")
    table.add_column("Source", style="magenta")

    for k in sorted(schema):
        description = _truncate_text(schema[k]["description"], 60)
        for source_name, _, config_data in sources:
            if k in config_data:
                table.add_row(k, description, str(config_data[k]), source_name)
                break
        else:
            table.add_row(k, description, str(schema[k]["default"]), "(default)")

    console.print(table)


def main(
    key: str | None = typer.Argument(None, help="Configuration key to get or set."),
    value: str | None = typer.Argument(
        None, help="Value to set (omit to get current value)."
    ),
    scope: str | None = typer.Option(
        None,
        "--scope",
        help="Select which scope to read or modify, setting defaults to local",
    ),
) -> None:
    """
    Manage global and local connectivity configurations.

    Priority order: program arguments > custom config > local config > environment variables > global config

    Examples:

        # Show all configuration

        connectivity config

        # Use Weighted Quick Union by default in this directory

        connectivity config algorithm wqu

        # Always print the pair trace

        connectivity config trace true --scope global
    """
    if scope is not None and scope not in SCOPES:
        print(f"[red]Error:[/red] Unknown scope '{scope}', use one of {', '.join(SCOPES)}")
        raise typer.Exit(1)

    if value is not None:
        if key is None:
            print("[red]Error:[/red] Key is required when setting a value")
            raise typer.Exit(1)
        _set_config(key, value, scope or "local")
    else:
        _get_config(key, scope)
