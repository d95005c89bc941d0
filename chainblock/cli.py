from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Iterable, List, Optional

from . import __version__ as CHAINBLOCK_VERSION
from .errors import ChainblockError
from .ledger import Chainblock
from .loader import load_ledger
from .logging_utils import setup_logging
from .transaction import Transaction

log = logging.getLogger("chainblock.cli")


# ------------------------------- Helpers ------------------------------------ #


def _records(txs: Iterable[Transaction]) -> List[dict]:
    return [tx.snapshot() for tx in txs]


def _run_query(ledger: Chainblock, args: argparse.Namespace) -> Any:
    if args.count:
        return {"count": ledger.count()}
    if args.get is not None:
        return ledger.get_by_id(args.get).snapshot()
    if args.status is not None:
        return _records(ledger.by_status(args.status))
    if args.senders is not None:
        return list(ledger.senders_by_status(args.senders))
    if args.receivers is not None:
        return list(ledger.receivers_by_status(args.receivers))
    if args.all:
        return _records(ledger.all_ordered_by_amount_then_id())
    if args.sender is not None:
        return _records(ledger.by_sender_ordered_by_amount(args.sender))
    if args.receiver is not None:
        return _records(ledger.by_receiver_ordered_by_amount_then_id(args.receiver))
    if args.status_max is not None:
        status, raw_max = args.status_max
        try:
            max_amount = float(raw_max)
        except ValueError:
            raise ChainblockError(f"max amount {raw_max!r} is not a number") from None
        return _records(ledger.by_status_and_max_amount(status, max_amount))
    return ledger.snapshot()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chainblock",
        description="Load a transactions file (JSON/YAML) and query it.",
    )
    parser.add_argument("path", help="Path to the transactions file.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v INFO, -vv DEBUG")
    parser.add_argument("--version", action="version", version=f"chainblock {CHAINBLOCK_VERSION}")
    parser.add_argument(
        "--strict-status",
        action="store_true",
        default=None,
        help="Only accept exact status names (overrides ledger.strict_status).",
    )

    q = parser.add_mutually_exclusive_group()
    q.add_argument("--count", action="store_true", help="Print the number of stored transactions.")
    q.add_argument("--get", type=int, metavar="ID", help="Print one transaction by id.")
    q.add_argument("--status", metavar="STATUS", help="Transactions with STATUS in insertion order.")
    q.add_argument("--senders", metavar="STATUS", help="Senders for STATUS, amount descending.")
    q.add_argument("--receivers", metavar="STATUS", help="Receivers for STATUS, amount descending.")
    q.add_argument("--all", action="store_true", help="All transactions, amount descending then id.")
    q.add_argument("--sender", metavar="NAME", help="Transactions sent by NAME, amount descending.")
    q.add_argument("--receiver", metavar="NAME", help="Transactions received by NAME, amount desc then id.")
    q.add_argument(
        "--status-max",
        nargs=2,
        metavar=("STATUS", "AMOUNT"),
        help="Transactions with STATUS and amount <= AMOUNT.",
    )
    q.add_argument("--snapshot", action="store_true", help="Print a ledger snapshot (default).")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        ledger = load_ledger(args.path, strict=args.strict_status)
        result = _run_query(ledger, args)
    except (ChainblockError, ValueError) as e:
        log.debug("query failed", exc_info=True)
        print(f"failed: {e}", file=sys.stderr)
        return 2

    print(json.dumps(result, indent=2))
    return 0
