"""Inventory command wiring for Keepstore CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.output import emit_outcome, emit_rows, finish_mutation
from managers.client import KeepstoreClient
from managers.seed_data import load_seed_file


def add_inventory_command(subparsers: Any) -> None:
    """Register inventory subcommand group."""
    parser = subparsers.add_parser("inventory", help="Logged inventory items")
    actions = parser.add_subparsers(dest="action", required=True)
    seed_parser = actions.add_parser("seed", help="Add starter inventory items")
    seed_parser.add_argument("--file", help="Optional YAML seed file")
    actions.add_parser("list", help="List inventory items")
    add_parser = actions.add_parser("add", help="Log a new item")
    add_parser.add_argument("--id", type=int, required=True, help="Item id")
    add_parser.add_argument("--name", required=True, help="Item name")
    add_parser.add_argument("--quantity", type=int, required=True, help="Quantity")
    update_parser = actions.add_parser("update", help="Replace an item's name and quantity")
    update_parser.add_argument("--id", type=int, required=True, help="Item id")
    update_parser.add_argument("--name", required=True, help="New name")
    update_parser.add_argument("--quantity", type=int, required=True, help="New quantity")
    delete_parser = actions.add_parser("delete", help="Delete an item")
    delete_parser.add_argument("--id", type=int, required=True, help="Item id")


def run_inventory_command(client: KeepstoreClient, args: argparse.Namespace) -> int:
    """Execute one inventory action."""
    manager, load_outcome = client.inventory()
    if not load_outcome.ok:
        return emit_outcome(load_outcome)
    autosave = client.config.autosave
    if args.action == "seed":
        seed_data = load_seed_file(args.file) if args.file else None
        return finish_mutation(manager, manager.seed(seed_data), autosave)
    if args.action == "list":
        items = manager.list_items()
        if not items:
            print("No inventory items found.")
            return 0
        emit_rows(
            (item.id, item.name, item.quantity, item.date_added.isoformat(timespec="seconds"))
            for item in items
        )
        return 0
    if args.action == "add":
        outcome = manager.add_item(args.id, args.name, args.quantity)
        return finish_mutation(manager, outcome, autosave)
    if args.action == "update":
        outcome = manager.update_item(args.id, args.name, args.quantity)
        return finish_mutation(manager, outcome, autosave)
    return finish_mutation(manager, manager.delete_item(args.id), autosave)
