#!/usr/bin/env python3
"""Plugin configuration CLI tool."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load environment variables FIRST (before importing project modules)
load_dotenv('.env')

from rich.console import Console
from rich.table import Table

from pluginfw.config.plugin_config import ExactVersion, PluginConfig, VersionRange
from pluginfw.config.reader import ConfigReadError, loads
from pluginfw.constants import LOG_LEVEL, PLUGIN_CONFIG_FILE

logger = logging.getLogger(__name__)
console = Console()


def load_configs(path: Path) -> List[PluginConfig]:
    """Read and parse a plugin configuration file.

    Raises:
        ConfigReadError: If the file is missing, unreadable or malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigReadError(f"Cannot read {path}: {e}") from e
    return loads(text)


def describe_requirement(config: PluginConfig) -> str:
    """Human-readable version requirement."""
    requirement = config.requirement
    if isinstance(requirement, ExactVersion):
        return f"={requirement.version}"
    if isinstance(requirement, VersionRange):
        return f"[{requirement.min_version}, {requirement.max_version}]"
    return "(inconsistent)"


def cmd_validate(args) -> int:
    """Validate every plugin in a configuration file."""
    try:
        configs = load_configs(Path(args.file))
    except ConfigReadError as e:
        logger.error(str(e))
        print(f"Error: {e}")
        return 1

    if not configs:
        print(f"No plugins configured in {args.file}.")
        return 1

    invalid = [c for c in configs if not c.is_valid()]
    for config in invalid:
        print(f"  invalid: {config.file_path or '(empty path)'}")

    if invalid:
        print(f"Found {len(invalid)} invalid plugin config(s) out of {len(configs)}.")
        return 1

    print(f"All checks passed. {len(configs)} plugin config(s) valid.")
    return 0


def cmd_list(args) -> int:
    """List plugins in a configuration file."""
    try:
        configs = load_configs(Path(args.file))
    except ConfigReadError as e:
        logger.error(str(e))
        print(f"Error: {e}")
        return 1

    if not configs:
        print("No plugins found.")
        return 0

    table = Table(title=f"Plugins in {args.file}")
    table.add_column("File Path")
    table.add_column("Version")
    table.add_column("Instances")
    table.add_column("Valid")

    for config in configs:
        table.add_row(
            config.file_path,
            describe_requirement(config),
            ", ".join(config.instance_names()),
            "Yes" if config.is_valid() else "No",
        )

    console.print(table)
    return 0


def main(argv=None) -> int:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = argparse.ArgumentParser(description="Plugin Configuration Manager")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate a plugin config file")
    validate_parser.add_argument("file", nargs="?", default=str(PLUGIN_CONFIG_FILE), help="Path to config JSON")

    # list
    list_parser = subparsers.add_parser("list", help="List configured plugins")
    list_parser.add_argument("file", nargs="?", default=str(PLUGIN_CONFIG_FILE), help="Path to config JSON")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "validate": cmd_validate,
        "list": cmd_list,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
