"""CLI command for printing resolved storage configuration."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import KeelConfig
from core.types import StorageProperty
from storage.loader import load_registry
from storage.registry import StorageRegistry
from storage.results import Rejected


def add_show_command(subparsers: Any) -> None:
    """Register show subcommand."""
    parser = subparsers.add_parser(
        "show",
        help="Resolve storage config and print paths and engine options",
    )
    parser.add_argument("--name", help="Only print one database; unknown names print defaults")


def run_show_command(config: KeelConfig, args: argparse.Namespace) -> int:
    """Print resolved storage config as key=value rows."""
    result = load_registry(config.config_path)
    if isinstance(result, Rejected):
        print(f"storage_config_error={result.error}")
        return 1
    registry = result.value
    print(f"db_directory={registry.db_directory or '-'}")
    print(f"index_directory={registry.index_directory or '-'}")
    if args.name:
        _print_database_rows(args.name, registry)
        return 0
    for name in registry.names():
        _print_database_rows(name, registry)
    return 0


def _print_database_rows(name: str, registry: StorageRegistry) -> None:
    storage_property = StorageProperty(
        name=name,
        path=registry.path_for(name),
        options=registry.options_for(name),
    )
    print(f"{name}.path={storage_property.path or '-'}")
    option_rows = storage_property.options.to_dict()
    for key in sorted(option_rows.keys()):
        print(f"{name}.{key}={option_rows[key]}")
