"""
transaction.py -- transaction record and status enumeration.

Public API:
    TransactionStatus
    Transaction(id, status, sender, receiver, amount)
    normalize_status(raw, strict=False) -> TransactionStatus
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Dict, Union


class TransactionStatus(Enum):
    FAILED = "failed"
    SUCCESSFUL = "successful"
    UNAUTHORIZED = "unauthorized"
    ABORTED = "aborted"


# Loose spellings → canonical
_ALIASES = {
    "ok": TransactionStatus.SUCCESSFUL,
    "success": TransactionStatus.SUCCESSFUL,
    "succeeded": TransactionStatus.SUCCESSFUL,
    "successful": TransactionStatus.SUCCESSFUL,
    "fail": TransactionStatus.FAILED,
    "failed": TransactionStatus.FAILED,
    "failure": TransactionStatus.FAILED,
    "unauthorized": TransactionStatus.UNAUTHORIZED,
    "unauthorised": TransactionStatus.UNAUTHORIZED,
    "denied": TransactionStatus.UNAUTHORIZED,
    "abort": TransactionStatus.ABORTED,
    "aborted": TransactionStatus.ABORTED,
    "cancelled": TransactionStatus.ABORTED,
    "canceled": TransactionStatus.ABORTED,
}

StatusLike = Union[TransactionStatus, str]


def _clean(s: str) -> str:
    s = s.strip().lower()
    s = re.sub(r"[^a-z]+", "", s)
    return s


def normalize_status(raw: StatusLike, strict: bool = False) -> TransactionStatus:
    """
    Resolve ``raw`` to a TransactionStatus.

    Members pass through. Strings match a member name or value
    (case-insensitive); with ``strict=False`` the alias table is consulted too.
    Raises ValueError for anything else.
    """
    if isinstance(raw, TransactionStatus):
        return raw
    if not isinstance(raw, str):
        raise ValueError(f"Unknown transaction status {raw!r}")

    text = raw.strip()
    if text.upper() in TransactionStatus.__members__:
        return TransactionStatus[text.upper()]
    for member in TransactionStatus:
        if member.value == text.lower():
            return member

    if not strict:
        hit = _ALIASES.get(_clean(text))
        if hit is not None:
            return hit
    raise ValueError(f"Unknown transaction status {raw!r}")


class Transaction:
    """
    One ledger entry. Every field is exposed read-only; status changes go
    through Chainblock.change_status so the store's indices stay consistent.
    """

    __slots__ = ("_id", "_status", "_sender", "_receiver", "_amount")

    def __init__(
        self,
        id: int,
        status: StatusLike,
        sender: str,
        receiver: str,
        amount: float,
    ) -> None:
        if isinstance(id, bool) or not isinstance(id, int):
            raise TypeError(f"transaction id must be an int, got {type(id).__name__}")
        if amount is None:
            raise ValueError("amount is required")
        self._id = id
        self._status = normalize_status(status, strict=True)
        self._sender = "" if sender is None else str(sender)
        self._receiver = "" if receiver is None else str(receiver)
        self._amount = float(amount)

    @property
    def id(self) -> int:
        return self._id

    @property
    def status(self) -> TransactionStatus:
        return self._status

    @property
    def sender(self) -> str:
        return self._sender

    @property
    def receiver(self) -> str:
        return self._receiver

    @property
    def amount(self) -> float:
        return self._amount

    def snapshot(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "status": self._status.name,
            "from": self._sender,
            "to": self._receiver,
            "amount": self._amount,
        }

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self._id}, status={self._status.name}, "
            f"sender={self._sender!r}, receiver={self._receiver!r}, amount={self._amount})"
        )
