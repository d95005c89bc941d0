"""
Module entrypoint:

  python -m chainblock path/to/transactions.json --all
"""
from __future__ import annotations

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
