from datetime import time

import pytest

from clubsim.models import CLUB_CLOSING
from clubsim.parser import (
    ParseError,
    parse_event,
    parse_file,
    parse_input,
    parse_time_range,
)

HEADER = ["3", "09:00 19:00", "10"]


def test_parse_time_range():
    assert parse_time_range("09:00 19:00") == (time(9, 0), time(19, 0))


@pytest.mark.parametrize("line", ["09:00", "09:00 19:00 x", "25:00 19:00", "ab 19:00", ""])
def test_parse_time_range_invalid(line):
    with pytest.raises(ValueError):
        parse_time_range(line)


def test_parse_event_with_table():
    event = parse_event("09:54 2 client1 1")
    assert (event.time, event.event_id, event.text, event.table_id) == (
        time(9, 54), 2, "client1", 1)


def test_parse_event_without_table():
    event = parse_event("08:48 1 client1")
    assert event.table_id is None
    assert str(event) == "08:48 1 client1"


@pytest.mark.parametrize("line", [
    "09:00 5 client1",
    "09:00 0 client1",
    "09:00 1 Client1",
    "09:00 1 client-1",
    "09:00 2 client1",
    "09:00 1 client1 extra",
    "9h00 1 client1",
    "09:00 1",
])
def test_parse_event_invalid(line):
    with pytest.raises(ValueError):
        parse_event(line)


def test_parse_input_header_and_events():
    info = parse_input(HEADER + ["09:41 1 client1", "09:54 2 client1 1"])
    assert info.table_count == 3
    assert (info.open_time, info.close_time, info.price) == (time(9), time(19), 10)
    assert [e.event_id for e in info.events] == [1, 2, CLUB_CLOSING]
    assert info.events[-1].time == info.close_time


def test_close_event_inserted_before_late_event():
    info = parse_input(HEADER + ["10:00 1 a", "19:30 1 b"])
    assert [e.event_id for e in info.events] == [1, CLUB_CLOSING, 1]
    assert info.events[1].time == info.close_time


def test_no_close_event_when_all_events_before_opening():
    info = parse_input(HEADER + ["08:00 1 a"])
    assert [e.event_id for e in info.events] == [1]


def test_lines_with_newlines_are_accepted():
    info = parse_input([line + "\n" for line in HEADER + ["09:41 1 client1"]])
    assert info.events[0].text == "client1"


@pytest.mark.parametrize("lines, bad", [
    (["x", "09:00 19:00", "10"], "x"),
    (["3", "09:00", "10"], "09:00"),
    (["3", "09:00 19:00", "free"], "free"),
    (["3", "09:00 19:00"], ""),
    (HEADER + ["09:41 1 client1", "09:42 7 client1"], "09:42 7 client1"),
    (HEADER + ["09:41 2 client1 4"], "09:41 2 client1 4"),
])
def test_parse_input_reports_bad_line(lines, bad):
    with pytest.raises(ParseError) as excinfo:
        parse_input(lines)
    assert excinfo.value.line == bad


def test_parse_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(HEADER + ["09:41 1 client1"]) + "\n", encoding="utf-8")
    info = parse_file(path)
    assert [str(e) for e in info.events] == ["09:41 1 client1", "19:00 5 __system__"]


def test_parse_file_missing(tmp_path):
    with pytest.raises(OSError):
        parse_file(tmp_path / "missing.txt")