"""CLI command for deleting configured storage directories."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import KeelConfig
from storage.loader import load_registry
from storage.results import Rejected


def add_purge_command(subparsers: Any) -> None:
    """Register purge subcommand."""
    parser = subparsers.add_parser(
        "purge",
        help="Recursively delete every configured storage path (test teardown only)",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Confirm destructive deletion",
    )


def run_purge_command(config: KeelConfig, args: argparse.Namespace) -> int:
    """Delete configured storage paths after explicit confirmation."""
    if not args.yes:
        print("purge_refused=pass --yes to delete configured storage paths")
        return 2
    result = load_registry(config.config_path)
    if isinstance(result, Rejected):
        print(f"storage_config_error={result.error}")
        return 1
    registry = result.value
    registry.purge_all_paths()
    for name in registry.names():
        path = registry.path_for(name)
        if path is not None:
            print(f"purged={path}")
    return 0
