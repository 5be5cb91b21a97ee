"""Reading and validating the club's input file."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import time
from os import PathLike

from clubsim.models import (
    CLIENT_ARRIVED,
    CLIENT_LEFT,
    CLIENT_SAT_DOWN,
    CLUB_CLOSING,
    SYSTEM_CLIENT,
    Event,
    InputInfo,
)

_CLOCK = re.compile(r"\s*(\d{1,2}):(\d{1,2})", re.ASCII)
_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_WORD = re.compile(r"\s*(\S+)", re.ASCII)
_NAME = re.compile(r"[a-z0-9_]+", re.ASCII)


class ParseError(ValueError):
    """Raised for the first input line that is not valid."""

    def __init__(self, line: str) -> None:
        super().__init__(f"invalid input line: {line!r}")
        self.line = line


def _read_clock(text: str, pos: int, what: str) -> tuple[time, int]:
    match = _CLOCK.match(text, pos)
    if not match:
        raise ValueError(f"invalid {what}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"invalid {what}")
    return time(hour, minute), match.end()


def _read_int(text: str, pos: int, what: str) -> tuple[int, int]:
    match = _INT.match(text, pos)
    if not match:
        raise ValueError(f"invalid {what}")
    return int(match.group(1)), match.end()


def _ensure_no_extra(text: str, pos: int) -> None:
    if text[pos:].strip():
        raise ValueError("extra invalid input")


def parse_time_range(line: str) -> tuple[time, time]:
    """Parse an 'HH:MM HH:MM' opening-hours line."""
    start, pos = _read_clock(line, 0, "start time")
    end, pos = _read_clock(line, pos, "end time")
    _ensure_no_extra(line, pos)
    return start, end


def parse_event(line: str) -> Event:
    """Parse one incoming event line."""
    when, pos = _read_clock(line, 0, "time")
    event_id, pos = _read_int(line, pos, "event id")
    if not CLIENT_ARRIVED <= event_id <= CLIENT_LEFT:
        raise ValueError("invalid event id")
    match = _WORD.match(line, pos)
    if not match or not _NAME.fullmatch(match.group(1)):
        raise ValueError("invalid client name")
    name, pos = match.group(1), match.end()
    if event_id == CLIENT_SAT_DOWN:
        table_id, pos = _read_int(line, pos, "table id")
        return Event(when, event_id, name, table_id)
    _ensure_no_extra(line, pos)
    return Event(when, event_id, name)


def _parse_count(line: str) -> int:
    match = _INT.match(line)
    if not match or int(match.group(1)) < 0:
        raise ParseError(line)
    return int(match.group(1))


def parse_input(lines: Iterable[str]) -> InputInfo:
    """Parse the input lines, adding the system closing events.

    Raises ParseError carrying the first invalid line.
    """
    stream = (raw.rstrip("\n") for raw in lines)

    table_count = _parse_count(next(stream, ""))

    hours_line = next(stream, "")
    try:
        open_time, close_time = parse_time_range(hours_line)
    except ValueError:
        raise ParseError(hours_line) from None

    price = _parse_count(next(stream, ""))

    info = InputInfo(table_count, open_time, close_time, price)
    previous: time | None = None
    current: time | None = None
    for line in stream:
        try:
            event = parse_event(line)
        except ValueError:
            raise ParseError(line) from None
        if event.table_id is not None and not 1 <= event.table_id <= table_count:
            raise ParseError(line)
        previous, current = current, event.time
        if current >= close_time and (previous is None or previous < close_time):
            info.events.append(Event(close_time, CLUB_CLOSING, SYSTEM_CLIENT))
        info.events.append(event)

    if info.events:
        last = info.events[-1]
        if last.event_id != CLUB_CLOSING and open_time <= last.time < close_time:
            info.events.append(Event(close_time, CLUB_CLOSING, SYSTEM_CLIENT))
    return info


def parse_file(path: str | PathLike[str]) -> InputInfo:
    """Parse an input file; OSError is raised if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        return parse_input(handle)