"""Warehouse command wiring for Keepstore CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.output import emit_outcome, emit_rows, finish_mutation
from core.constants import WAREHOUSE_CATEGORIES
from core.types import ElectronicItem, GroceryItem
from managers.client import KeepstoreClient
from managers.seed_data import load_seed_file


def add_warehouse_command(subparsers: Any) -> None:
    """Register warehouse subcommand group."""
    parser = subparsers.add_parser("warehouse", help="Electronics and grocery stock")
    actions = parser.add_subparsers(dest="action", required=True)
    seed_parser = actions.add_parser("seed", help="Add starter stock items")
    seed_parser.add_argument("--file", help="Optional YAML seed file")
    list_parser = actions.add_parser("list", help="List items in a category")
    _add_category_argument(list_parser)
    increase_parser = actions.add_parser("increase-stock", help="Add units to an item")
    _add_category_argument(increase_parser)
    increase_parser.add_argument("--id", type=int, required=True, help="Item id")
    increase_parser.add_argument("--amount", type=int, required=True, help="Units to add")
    quantity_parser = actions.add_parser("set-quantity", help="Set an item quantity")
    _add_category_argument(quantity_parser)
    quantity_parser.add_argument("--id", type=int, required=True, help="Item id")
    quantity_parser.add_argument("--quantity", type=int, required=True, help="New quantity")
    remove_parser = actions.add_parser("remove", help="Remove an item")
    _add_category_argument(remove_parser)
    remove_parser.add_argument("--id", type=int, required=True, help="Item id")


def run_warehouse_command(client: KeepstoreClient, args: argparse.Namespace) -> int:
    """Execute one warehouse action."""
    manager, load_outcome = client.warehouse()
    if not load_outcome.ok:
        return emit_outcome(load_outcome)
    autosave = client.config.autosave
    if args.action == "seed":
        seed_data = load_seed_file(args.file) if args.file else None
        return finish_mutation(manager, manager.seed(seed_data), autosave)
    if args.action == "list":
        outcome = manager.list_items(args.category)
        if outcome.ok:
            emit_rows(_item_row(item) for item in outcome.value or [])
            return 0
        return emit_outcome(outcome)
    if args.action == "increase-stock":
        outcome = manager.increase_stock(args.category, args.id, args.amount)
        return finish_mutation(manager, outcome, autosave)
    if args.action == "set-quantity":
        outcome = manager.update_quantity(args.category, args.id, args.quantity)
        return finish_mutation(manager, outcome, autosave)
    outcome = manager.remove_item(args.category, args.id)
    return finish_mutation(manager, outcome, autosave)


def _add_category_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--category",
        required=True,
        choices=WAREHOUSE_CATEGORIES,
        help="Stock category",
    )


def _item_row(item: ElectronicItem | GroceryItem) -> tuple[object, ...]:
    if isinstance(item, ElectronicItem):
        return (item.id, item.name, item.quantity, item.brand, f"{item.warranty_months} months")
    return (item.id, item.name, item.quantity, item.expiry_date.date().isoformat())
