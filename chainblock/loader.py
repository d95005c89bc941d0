"""Transactions file loading for the CLI and tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import yaml

from .config import get_ledger_options
from .errors import RecordLoadError
from .ledger import Chainblock
from .transaction import Transaction, normalize_status

log = logging.getLogger("chainblock.loader")

# Alternate field names accepted in records, mapped to the constructor argument.
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "sender": ("sender", "from"),
    "receiver": ("receiver", "to"),
}


def _pick(record: Dict[str, Any], names: Iterable[str]) -> Any:
    for name in names:
        if name in record:
            return record[name]
    return None


def parse_transaction(record: Any, *, strict: bool = False) -> Transaction:
    """Build a Transaction from one mapping; raises RecordLoadError on bad input."""

    if not isinstance(record, dict):
        raise RecordLoadError(f"transaction entry must be a mapping, got {type(record).__name__}")
    missing = [k for k in ("id", "status", "amount") if k not in record]
    if missing:
        raise RecordLoadError(f"transaction entry missing field(s): {', '.join(missing)}")

    raw_id = record["id"]
    if isinstance(raw_id, bool):
        raise RecordLoadError(f"transaction id {raw_id!r} is not an integer")
    try:
        tx_id = int(raw_id)
    except (TypeError, ValueError, OverflowError):
        raise RecordLoadError(f"transaction id {raw_id!r} is not an integer") from None
    if isinstance(raw_id, float) and not raw_id.is_integer():
        raise RecordLoadError(f"transaction id {raw_id!r} is not an integer")

    try:
        status = normalize_status(record["status"], strict=strict)
        amount = float(record["amount"])
    except (TypeError, ValueError, OverflowError) as e:
        raise RecordLoadError(f"transaction {tx_id}: {e}") from None

    return Transaction(
        tx_id,
        status,
        _pick(record, FIELD_ALIASES["sender"]),
        _pick(record, FIELD_ALIASES["receiver"]),
        amount,
    )


def read_document(path: str | Path) -> Dict[str, Any]:
    """Read a JSON or YAML transactions document into a mapping."""

    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise RecordLoadError(f"cannot read {p}: {e}") from None
    except UnicodeDecodeError as e:
        raise RecordLoadError(f"{p} is not valid UTF-8: {e}") from None

    try:
        if p.suffix.lower() in {".yaml", ".yml"}:
            data: Any = yaml.safe_load(text)
        else:
            data = json.loads(text or "[]")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise RecordLoadError(f"cannot parse {p}: {e}") from None

    if data is None:
        data = []
    if isinstance(data, list):
        data = {"transactions": data}
    if not isinstance(data, dict):
        raise RecordLoadError("document root must be a list of transactions or a mapping")
    if not isinstance(data.get("transactions", []), list):
        raise RecordLoadError("'transactions' must be a list")
    return data


def load_transactions(path: str | Path, *, strict: Optional[bool] = None) -> List[Transaction]:
    """
    Load transactions from ``path``.

    ``strict`` overrides the document's ``ledger.strict_status`` option when given.
    """
    doc = read_document(path)
    if strict is None:
        strict = get_ledger_options(doc)["strict_status"]
    txs = [parse_transaction(r, strict=strict) for r in doc.get("transactions", [])]
    log.info("Loaded %d transaction(s) from %s", len(txs), path)
    return txs


def load_ledger(path: str | Path, *, strict: Optional[bool] = None) -> Chainblock:
    """Load a file straight into a fresh store; duplicate ids keep the first record."""

    ledger = Chainblock()
    for tx in load_transactions(path, strict=strict):
        ledger.add(tx)
    if ledger.count():
        log.debug("Ledger holds %d distinct transaction(s)", ledger.count())
    return ledger
