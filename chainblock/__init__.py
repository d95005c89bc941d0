# chainblock/__init__.py
"""
Chainblock — in-memory transaction ledger with status, sender and receiver queries.
"""

__version__ = "1.0.0"

from .errors import ChainblockError, NotFoundError, RecordLoadError
from .transaction import Transaction, TransactionStatus, normalize_status
from .ledger import Chainblock
from .loader import load_ledger, load_transactions

__all__ = [
    # Store
    "Chainblock",
    # Records
    "Transaction",
    "TransactionStatus",
    "normalize_status",
    # Loading
    "load_ledger",
    "load_transactions",
    # Errors
    "ChainblockError",
    "NotFoundError",
    "RecordLoadError",
    # Package version
    "__version__",
]
