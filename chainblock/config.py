"""Runtime configuration defaults and flag normalization helpers."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

STRICT_STATUS_DEFAULT: bool = False

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}
_DEFAULT_STRINGS = {"default", "auto", "inherit"}


def coerce_flag(value: Any, *, default: Optional[bool] = None) -> Tuple[Optional[bool], bool]:
    """Coerce a loosely-typed flag value into ``True``/``False``/``None``.

    ``default`` is returned when ``value`` is ``None`` or explicitly requests
    inheritance (``"default"``/``"auto"``). The boolean in the return tuple
    indicates whether the coercion succeeded.
    """

    if isinstance(value, bool):
        return value, True
    if value is None:
        return default, True
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True, True
        if text in _FALSE_STRINGS:
            return False, True
        if default is not None and text in _DEFAULT_STRINGS:
            return default, True
        return None, False
    if isinstance(value, (int, float)):
        if value == 1:
            return True, True
        if value == 0:
            return False, True
        return None, False
    return None, False


def normalize_strict_status(ledger_blk: Optional[Dict[str, Any]]) -> bool:
    """Resolve ``ledger.strict_status``; unparseable values fall back to the default."""

    value = None
    if isinstance(ledger_blk, dict):
        value = ledger_blk.get("strict_status")

    normalized, ok = coerce_flag(value, default=STRICT_STATUS_DEFAULT)
    if ok and normalized is not None:
        return bool(normalized)
    return STRICT_STATUS_DEFAULT


def get_ledger_options(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Extract ledger options from a loaded transactions document."""

    ledger_blk = (doc or {}).get("ledger") if isinstance(doc, dict) else None
    return {
        "strict_status": normalize_strict_status(ledger_blk),
    }
