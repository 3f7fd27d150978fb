"""Keepstore CLI entry points.

This module exposes one subcommand group per domain manager.
It maps argparse commands onto manager verbs and prints their outcomes.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from cli.health_command import add_health_command, run_health_command
from cli.inventory_command import add_inventory_command, run_inventory_command
from cli.ledger_command import add_ledger_command, run_ledger_command
from cli.warehouse_command import add_warehouse_command, run_warehouse_command
from core.config import KeepstoreConfig
from core.errors import KeepstoreError
from core.logging_config import configure_logging
from managers.client import KeepstoreClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="keepstore", description="Keepstore record manager CLI")
    parser.add_argument("--data-root", help="Override KEEPSTORE_DATA_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_warehouse_command(subparsers)
    add_health_command(subparsers)
    add_inventory_command(subparsers)
    add_ledger_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Keepstore CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.data_root)
        configure_logging(client.config.log_level)
        if args.command == "warehouse":
            return run_warehouse_command(client, args)
        if args.command == "health":
            return run_health_command(client, args)
        if args.command == "inventory":
            return run_inventory_command(client, args)
        if args.command == "ledger":
            return run_ledger_command(client, args)
    except KeepstoreError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(data_root: str | None) -> KeepstoreClient:
    """Build SDK client with optional data-root override.

    Args:
        data_root: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = KeepstoreConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    return KeepstoreClient(config)
