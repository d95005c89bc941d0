import pytest

from chainblock.config import (
    STRICT_STATUS_DEFAULT,
    coerce_flag,
    get_ledger_options,
    normalize_strict_status,
)


@pytest.mark.parametrize(
    "value, default, expected, ok",
    [
        (True, None, True, True),
        (False, None, False, True),
        (None, True, True, True),
        (" true ", None, True, True),
        ("OFF", None, False, True),
        ("DEFAULT", True, True, True),
        (1, None, True, True),
        (0, None, False, True),
        ("maybe", None, None, False),
        (2, None, None, False),
        (object(), None, None, False),
    ],
)
def test_coerce_flag(value, default, expected, ok):
    normalized, success = coerce_flag(value, default=default)
    assert success is ok
    assert normalized == expected


@pytest.mark.parametrize(
    "ledger_block, expected",
    [
        (None, STRICT_STATUS_DEFAULT),
        ({}, STRICT_STATUS_DEFAULT),
        ({"strict_status": True}, True),
        ({"strict_status": "yes"}, True),
        ({"strict_status": "off"}, False),
        ({"strict_status": "auto"}, STRICT_STATUS_DEFAULT),
        ({"strict_status": "unknown"}, STRICT_STATUS_DEFAULT),
    ],
)
def test_normalize_strict_status(ledger_block, expected):
    assert normalize_strict_status(ledger_block) is expected


def test_get_ledger_options_reads_ledger_block():
    assert get_ledger_options({"ledger": {"strict_status": "on"}}) == {"strict_status": True}
    assert get_ledger_options({}) == {"strict_status": STRICT_STATUS_DEFAULT}
    assert get_ledger_options(None) == {"strict_status": STRICT_STATUS_DEFAULT}
