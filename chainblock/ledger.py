# ledger.py -- in-memory transaction store with sender/receiver indices
from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Tuple

from .errors import NotFoundError
from .transaction import StatusLike, Transaction, TransactionStatus, normalize_status

logger = logging.getLogger("chainblock.ledger")


# --------------------------
# Sort keys
# --------------------------

def _amount_desc(tx: Transaction) -> float:
    return -tx.amount


def _amount_desc_then_id(tx: Transaction) -> Tuple[float, int]:
    return (-tx.amount, tx.id)


def _index_add(index: Dict[str, Dict[int, None]], key: str, tx_id: int) -> None:
    index.setdefault(key, {})[tx_id] = None


def _index_drop(index: Dict[str, Dict[int, None]], key: str, tx_id: int) -> None:
    ids = index.get(key)
    if ids is None:
        return
    ids.pop(tx_id, None)
    if not ids:
        del index[key]


# --------------------------
# Chainblock
# --------------------------

class Chainblock:
    """
    In-memory ledger of uniquely identified transactions:
      - Primary map id -> Transaction, kept in insertion order
      - Secondary indices by sender and receiver (both immutable), maintained
        on add / remove
      - Status groups are read from each record's current status, so a record
        shared with another store is classified by its live status
      - Group queries (status, sender, receiver) raise NotFoundError when the
        group is empty; the status + max-amount filter returns an empty tuple
      - Results are tuples of the stored records; record fields are read-only
    """

    def __init__(self) -> None:
        self._entries: Dict[int, Transaction] = {}
        self._by_sender: Dict[str, Dict[int, None]] = {}
        self._by_receiver: Dict[str, Dict[int, None]] = {}

    # ----- Mutations ---------------------------------------------------------

    def add(self, tx: Transaction) -> None:
        if not isinstance(tx, Transaction):
            raise TypeError(f"expected Transaction, got {type(tx).__name__}")
        if tx.id in self._entries:
            logger.debug("add skipped: id %s already present", tx.id)
            return

        self._entries[tx.id] = tx
        _index_add(self._by_sender, tx.sender, tx.id)
        _index_add(self._by_receiver, tx.receiver, tx.id)
        logger.debug("added id=%s status=%s amount=%s", tx.id, tx.status.name, tx.amount)

    def change_status(self, tx_id: int, new_status: StatusLike) -> None:
        tx = self.get_by_id(tx_id)
        status = normalize_status(new_status, strict=True)
        if status is tx.status:
            return

        old = tx.status
        tx._status = status
        logger.debug("status id=%s %s -> %s", tx_id, old.name, status.name)

    def remove(self, tx_id: int) -> None:
        tx = self.get_by_id(tx_id)
        del self._entries[tx_id]
        _index_drop(self._by_sender, tx.sender, tx_id)
        _index_drop(self._by_receiver, tx.receiver, tx_id)
        logger.debug("removed id=%s", tx_id)

    # ----- Lookups -----------------------------------------------------------

    def count(self) -> int:
        return len(self._entries)

    def contains(self, tx_id: int) -> bool:
        return tx_id in self._entries

    def get_by_id(self, tx_id: int) -> Transaction:
        try:
            return self._entries[tx_id]
        except KeyError:
            raise NotFoundError(f"No transaction with id {tx_id}") from None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, tx_id: object) -> bool:
        return tx_id in self._entries

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._entries.values()))

    # ----- Group queries -----------------------------------------------------

    def by_status(self, status: StatusLike) -> Tuple[Transaction, ...]:
        """Records with ``status`` in insertion order."""
        return tuple(self._status_group(status))

    def senders_by_status(self, status: StatusLike) -> Tuple[str, ...]:
        group = sorted(self._status_group(status), key=_amount_desc)
        return tuple(tx.sender for tx in group)

    def receivers_by_status(self, status: StatusLike) -> Tuple[str, ...]:
        group = sorted(self._status_group(status), key=_amount_desc)
        return tuple(tx.receiver for tx in group)

    def by_sender_ordered_by_amount(self, sender: str) -> Tuple[Transaction, ...]:
        group = self._group(self._by_sender, sender, "sender")
        return tuple(sorted(group, key=_amount_desc))

    def by_receiver_ordered_by_amount_then_id(self, receiver: str) -> Tuple[Transaction, ...]:
        group = self._group(self._by_receiver, receiver, "receiver")
        return tuple(sorted(group, key=_amount_desc_then_id))

    # ----- Whole-store / predicate queries ------------------------------------

    def all_ordered_by_amount_then_id(self) -> Tuple[Transaction, ...]:
        return tuple(sorted(self._entries.values(), key=_amount_desc_then_id))

    def by_status_and_max_amount(self, status: StatusLike, max_amount: float) -> Tuple[Transaction, ...]:
        """
        Records with ``status`` and ``amount <= max_amount``, amount descending.
        An unmatched combination yields an empty tuple rather than an error.
        """
        st = normalize_status(status, strict=True)
        hits = [tx for tx in self._with_status(st) if tx.amount <= max_amount]
        return tuple(sorted(hits, key=_amount_desc))

    # ----- Snapshot ----------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        by_status = {st.name: 0 for st in TransactionStatus}
        for tx in self._entries.values():
            by_status[tx.status.name] += 1
        return {
            "count": len(self._entries),
            "by_status": by_status,
            "total_amount": float(sum(tx.amount for tx in self._entries.values())),
            "transactions": [tx.snapshot() for tx in self._entries.values()],
        }

    # ----- Utils -------------------------------------------------------------

    def _with_status(self, status: TransactionStatus) -> List[Transaction]:
        return [tx for tx in self._entries.values() if tx.status is status]

    def _status_group(self, status: StatusLike) -> List[Transaction]:
        st = normalize_status(status, strict=True)
        group = self._with_status(st)
        if not group:
            raise NotFoundError(f"No transactions with status {st.name!r}")
        return group

    def _group(self, index: Dict[str, Dict[int, None]], key: str, kind: str) -> List[Transaction]:
        ids = index.get(key)
        if not ids:
            raise NotFoundError(f"No transactions with {kind} {key!r}")
        # index dicts keep insertion order; sender/receiver never change
        return [self._entries[i] for i in ids]
