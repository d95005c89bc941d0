"""Pytest configuration for Chainblock."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_repo_on_path() -> None:
    """Make the repository importable without an editable install."""
    repo_root = Path(__file__).resolve().parent.parent
    if repo_root.exists():
        path_str = str(repo_root)
        if path_str not in sys.path:
            sys.path.insert(0, path_str)


_ensure_repo_on_path()

from chainblock import Chainblock, Transaction, TransactionStatus  # noqa: E402


@pytest.fixture
def sample_ledger() -> Chainblock:
    """Three-record ledger: two SUCCESSFUL sends from A, one FAILED."""
    led = Chainblock()
    led.add(Transaction(1, TransactionStatus.SUCCESSFUL, "A", "B", 50))
    led.add(Transaction(2, TransactionStatus.SUCCESSFUL, "A", "C", 70))
    led.add(Transaction(3, TransactionStatus.FAILED, "A", "C", 10))
    return led
