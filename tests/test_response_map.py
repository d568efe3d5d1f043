"""Tests for the response map and default responses loaders."""

from __future__ import annotations

from pathlib import Path

import pytest

from supportdesk.core import FALLBACK_RESPONSE
from supportdesk.data.loaders.response_map_loader import (
    ResponseMapLoader,
    ResponseRecord,
    build_response_map,
    iter_records,
)
from supportdesk.data.loaders.default_responses_loader import DefaultResponsesLoader


SAMPLE_MAP = """\
crash, Crashes ,crashed
It never crashes on our system.
Tell me more about your configuration.

slow
Have you tried a faster processor?

printer
Is the printer switched on?
"""


def test_iter_records_multiline_values():
    """Keys are split and lower-cased, value lines joined with newlines."""
    records = list(iter_records(SAMPLE_MAP.splitlines(keepends=True)))

    assert len(records) == 3
    assert records[0] == ResponseRecord(
        keys=["crash", "crashes", "crashed"],
        value="It never crashes on our system.\nTell me more about your configuration.",
    )
    assert records[1].keys == ["slow"]
    assert records[2].value == "Is the printer switched on?"
    print(f"  ✓ Parsed {len(records)} records")


def test_table_holds_union_of_keys():
    """Every declared key maps to its record's value."""
    table = build_response_map(iter_records(SAMPLE_MAP.splitlines()))

    assert set(table) == {"crash", "crashes", "crashed", "slow", "printer"}
    assert table["crashes"] == table["crash"]
    assert table["slow"] == "Have you tried a faster processor?"


def test_last_declaration_wins():
    lines = [
        "printer, scanner",
        "first",
        "",
        "printer",
        "second",
    ]
    table = build_response_map(iter_records(lines))

    assert table == {"printer": "second", "scanner": "first"}


def test_value_lines_are_trimmed():
    lines = ["  Bug  ", "   Software has bugs.   ", "\tWe fix them.\t"]
    table = build_response_map(iter_records(lines))

    assert table == {"bug": "Software has bugs.\nWe fix them."}


def test_keys_line_without_value_ends_table():
    """A trailing keys line with no response is dropped, nothing after it is read."""
    lines = [
        "slow",
        "Buy a faster machine.",
        "",
        "orphan",
        "",
        "late",
        "Never registered.",
    ]
    table = build_response_map(iter_records(lines))

    assert table == {"slow": "Buy a faster machine."}


def test_keys_line_at_end_of_stream_is_dropped():
    table = build_response_map(iter_records(["slow", "Faster machine.", "", "orphan"]))

    assert "orphan" not in table
    assert table == {"slow": "Faster machine."}


def test_blank_line_in_keys_position_ends_table():
    lines = ["slow", "Faster machine.", "", "", "crash", "Never happens."]
    table = build_response_map(iter_records(lines))

    assert table == {"slow": "Faster machine."}


def test_empty_keys_are_skipped():
    table = build_response_map(iter_records([",mac,, macintosh,", "Ask Apple."]))

    assert table == {"mac": "Ask Apple.", "macintosh": "Ask Apple."}


def test_empty_input():
    assert list(iter_records([])) == []


def test_loader_reads_file(tmp_path):
    path = tmp_path / "response_map.txt"
    path.write_text(SAMPLE_MAP, encoding="ascii")

    table = ResponseMapLoader(path).load()

    assert len(table) == 5
    assert table["printer"] == "Is the printer switched on?"


def test_loader_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Response map not found"):
        ResponseMapLoader(tmp_path / "nope.txt").load()


def test_loader_non_ascii_raises(tmp_path):
    path = tmp_path / "response_map.txt"
    path.write_bytes("café\nCoffee is hot.\n".encode("utf-8"))

    with pytest.raises(OSError, match="not valid ascii"):
        ResponseMapLoader(path).load()


def test_defaults_one_per_line_blank_lines_kept(tmp_path):
    path = tmp_path / "default.txt"
    path.write_text("That sounds odd.\n\n  Tell me more...  \n", encoding="ascii")

    responses = DefaultResponsesLoader(path).load()

    assert responses == ["That sounds odd.", "", "  Tell me more...  "]


def test_defaults_missing_file_uses_fallback(tmp_path, caplog):
    responses = DefaultResponsesLoader(tmp_path / "missing.txt").load()

    assert responses == [FALLBACK_RESPONSE]
    assert "Unable to open" in caplog.text


def test_defaults_empty_file_uses_fallback(tmp_path):
    path = tmp_path / "default.txt"
    path.write_text("", encoding="ascii")

    assert DefaultResponsesLoader(path, fallback="Pardon?").load() == ["Pardon?"]


def test_defaults_unreadable_file_uses_fallback(tmp_path):
    path = tmp_path / "default.txt"
    path.write_bytes(b"\xff\xfe garbage\n")

    assert DefaultResponsesLoader(path).load() == [FALLBACK_RESPONSE]


def test_bundled_resources_load():
    """The shipped data files parse completely."""
    data_dir = Path(__file__).resolve().parent.parent / "data"

    table = ResponseMapLoader(data_dir / "response_map.txt").load()
    defaults = DefaultResponsesLoader(data_dir / "default.txt").load()

    assert "printer" in table
    assert table["crash"] == table["crashed"]
    assert "windows" in table and "linux" in table
    assert len(defaults) > 1
    print(f"  ✓ {len(table)} keywords, {len(defaults)} defaults")
