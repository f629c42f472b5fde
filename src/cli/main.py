"""Keel CLI entry points.

This module exposes commands for inspecting and purging storage config.
It maps argparse commands onto registry operations.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from cli.purge_command import add_purge_command, run_purge_command
from cli.show_command import add_show_command, run_show_command
from core.config import KeelConfig
from core.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="keel", description="Keel storage config CLI")
    parser.add_argument("--config", help="Override KEEL_CONFIG_PATH for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_show_command(subparsers)
    add_purge_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Keel CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args.config)
    configure_logging(config.log_level)
    if args.command == "show":
        return run_show_command(config, args)
    if args.command == "purge":
        return run_purge_command(config, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(config_path: str | None) -> KeelConfig:
    """Build runtime config with optional config-path override.

    Args:
        config_path: Optional override path.

    Returns:
        Validated runtime config.
    """
    config = KeelConfig.from_env()
    if config_path:
        config = replace(config, config_path=Path(config_path).expanduser().resolve())
    return config
