# tests/test_cli.py
import json

import pytest

from chainblock.cli import main

TXS = [
    {"id": 1, "status": "SUCCESSFUL", "from": "A", "to": "B", "amount": 50},
    {"id": 2, "status": "SUCCESSFUL", "from": "A", "to": "C", "amount": 70},
    {"id": 3, "status": "FAILED", "from": "A", "to": "C", "amount": 10},
]


@pytest.fixture
def txs_file(tmp_path):
    p = tmp_path / "txs.json"
    p.write_text(json.dumps(TXS), encoding="utf-8")
    return str(p)


def _run(capsys, argv):
    rc = main(argv)
    out = capsys.readouterr()
    return rc, out


def test_default_prints_snapshot(capsys, txs_file):
    rc, out = _run(capsys, [txs_file])
    assert rc == 0
    snap = json.loads(out.out)
    assert snap["count"] == 3
    assert snap["by_status"]["SUCCESSFUL"] == 2


def test_all_ordered(capsys, txs_file):
    rc, out = _run(capsys, [txs_file, "--all"])
    assert rc == 0
    assert [t["id"] for t in json.loads(out.out)] == [2, 1, 3]


def test_senders_and_status_max(capsys, txs_file):
    rc, out = _run(capsys, [txs_file, "--senders", "SUCCESSFUL"])
    assert rc == 0
    assert json.loads(out.out) == ["A", "A"]

    rc, out = _run(capsys, [txs_file, "--status-max", "SUCCESSFUL", "60"])
    assert rc == 0
    assert [t["id"] for t in json.loads(out.out)] == [1]

    rc, out = _run(capsys, [txs_file, "--status-max", "UNAUTHORIZED", "60"])
    assert rc == 0
    assert json.loads(out.out) == []


def test_receiver_query(capsys, txs_file):
    rc, out = _run(capsys, [txs_file, "--receiver", "C"])
    assert rc == 0
    assert [t["id"] for t in json.loads(out.out)] == [2, 3]


def test_missing_group_fails(capsys, txs_file):
    rc, out = _run(capsys, [txs_file, "--status", "UNAUTHORIZED"])
    assert rc == 2
    assert "failed" in out.err
    assert out.out == ""


def test_missing_id_fails(capsys, txs_file):
    rc, out = _run(capsys, [txs_file, "--get", "99"])
    assert rc == 2
    assert "No transaction with id 99" in out.err


def test_unreadable_file_fails(capsys, tmp_path):
    rc, out = _run(capsys, [str(tmp_path / "nope.json"), "--count"])
    assert rc == 2
    assert "failed" in out.err


@pytest.mark.parametrize(
    "name, payload",
    [
        ("inf.json", b'[{"id": Infinity, "status": "FAILED", "amount": 1}]'),
        ("bytes.json", b"[\xff]"),
    ],
)
def test_malformed_file_exits_two(capsys, tmp_path, name, payload):
    p = tmp_path / name
    p.write_bytes(payload)
    rc, out = _run(capsys, [str(p)])
    assert rc == 2
    assert "failed" in out.err
