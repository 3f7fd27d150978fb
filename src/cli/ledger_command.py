"""Ledger command wiring for Keepstore CLI."""

from __future__ import annotations

import argparse
from decimal import Decimal, InvalidOperation
from typing import Any

from cli.output import emit_outcome, emit_rows, finish_mutation
from core.constants import DEFAULT_OPENING_BALANCE, DEFAULT_PAYMENT_CHANNEL, PAYMENT_CHANNELS
from managers.client import KeepstoreClient
from managers.seed_data import load_seed_file


def add_ledger_command(subparsers: Any) -> None:
    """Register ledger subcommand group."""
    parser = subparsers.add_parser("ledger", help="Savings account transactions")
    parser.add_argument(
        "--opening-balance",
        type=_decimal_argument,
        default=DEFAULT_OPENING_BALANCE,
        help="Account balance before any stored transaction",
    )
    actions = parser.add_subparsers(dest="action", required=True)
    seed_parser = actions.add_parser("seed", help="Apply starter transactions")
    seed_parser.add_argument("--file", help="Optional YAML seed file")
    list_parser = actions.add_parser("list", help="List transactions")
    list_parser.add_argument("--category", help="Only this category, newest first")
    actions.add_parser("balance", help="Print the current balance")
    record_parser = actions.add_parser("record", help="Debit the account")
    record_parser.add_argument("--id", type=int, required=True, help="Transaction id")
    record_parser.add_argument("--amount", type=_decimal_argument, required=True, help="Amount")
    record_parser.add_argument("--category", required=True, help="Spending category")
    record_parser.add_argument(
        "--channel",
        choices=PAYMENT_CHANNELS,
        default=DEFAULT_PAYMENT_CHANNEL,
        help="Payment channel",
    )


def run_ledger_command(client: KeepstoreClient, args: argparse.Namespace) -> int:
    """Execute one ledger action."""
    manager, load_outcome = client.ledger(opening_balance=args.opening_balance)
    if not load_outcome.ok:
        return emit_outcome(load_outcome)
    autosave = client.config.autosave
    if args.action == "seed":
        seed_data = load_seed_file(args.file) if args.file else None
        return finish_mutation(manager, manager.seed(seed_data), autosave)
    if args.action == "list":
        if args.category:
            transactions = list(manager.transactions_in(args.category) or ())
        else:
            transactions = manager.list_transactions()
        emit_rows(
            (item.id, item.date.date().isoformat(), item.amount, item.category)
            for item in transactions
        )
        return 0
    if args.action == "balance":
        print(f"{manager.account_number}\t{manager.balance}")
        return 0
    outcome = manager.record_transaction(
        args.id,
        args.amount,
        args.category,
        channel=args.channel,
    )
    return finish_mutation(manager, outcome, autosave)


def _decimal_argument(raw_value: str) -> Decimal:
    try:
        value = Decimal(raw_value)
    except InvalidOperation as error:
        raise argparse.ArgumentTypeError(f"invalid decimal value: '{raw_value}'") from error
    if not value.is_finite():
        raise argparse.ArgumentTypeError(f"decimal value must be finite: '{raw_value}'")
    return value
