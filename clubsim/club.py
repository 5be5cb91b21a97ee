"""Simulation of a computer club's working day."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from datetime import time

from clubsim.models import (
    CLIENT_ARRIVED,
    CLIENT_LEFT,
    CLIENT_SAT_DOWN,
    CLIENT_SEATED_FROM_QUEUE,
    CLIENT_SENT_AWAY,
    CLIENT_WAITING,
    CLUB_CLOSING,
    ERROR,
    ClientStatus,
    Event,
    InputInfo,
    Table,
)
from clubsim.parser import ParseError, parse_file


def _seconds(moment: time) -> int:
    return moment.hour * 3600 + moment.minute * 60 + moment.second


def _clock(moment: time) -> str:
    return moment.strftime("%H:%M")


def format_table_stats(tables: Iterable[Table]) -> list[str]:
    """One 'number money HH:MM' line per table."""
    lines = []
    for number, table in enumerate(tables, start=1):
        hours, rest = divmod(table.seconds, 3600)
        lines.append(f"{number} {table.money} {hours:02d}:{rest // 60:02d}")
    return lines


class Club:
    """Club state driven by a sequence of events."""

    def __init__(self, info: InputInfo) -> None:
        self.info = info
        self.tables = [Table(number) for number in range(1, info.table_count + 1)]
        self.clients: dict[str, ClientStatus] = {}
        self.queue: deque[str] = deque()
        self._handlers = {
            CLIENT_ARRIVED: self._arrived,
            CLIENT_SAT_DOWN: self._sat_down,
            CLIENT_WAITING: self._waiting,
            CLIENT_LEFT: self._left,
            CLUB_CLOSING: self._closing,
        }

    def process(self, event: Event) -> list[str]:
        """Apply one event and return the output lines it produces."""
        out: list[str] = []
        if event.event_id != CLUB_CLOSING:
            out.append(str(event))
        self._handlers[event.event_id](event, out)
        return out

    def run(self) -> list[str]:
        """Process every input event and return the whole output."""
        lines = [_clock(self.info.open_time)]
        for event in self.info.events:
            lines.extend(self.process(event))
        return lines

    def _error(self, event: Event, message: str, out: list[str]) -> None:
        out.append(str(Event(event.time, ERROR, message)))

    def _settle(self, status: ClientStatus, until: time) -> Table:
        table = self.tables[status.table_id - 1]
        table.release()
        table.charge(_seconds(until) - _seconds(status.start_time), self.info.price)
        return table

    def _arrived(self, event: Event, out: list[str]) -> None:
        if not self.info.open_time <= event.time <= self.info.close_time:
            self._error(event, "NotOpenYet", out)
        elif event.text in self.clients:
            self._error(event, "YouShallNotPass", out)
        else:
            self.clients[event.text] = ClientStatus()

    def _sat_down(self, event: Event, out: list[str]) -> None:
        status = self.clients.get(event.text)
        if status is None:
            self._error(event, "ClientUnknown", out)
            return
        desired = self.tables[event.table_id - 1]
        if desired.acquired:
            self._error(event, "PlaceIsBusy", out)
            return
        if status.table_id is not None:
            self._settle(status, event.time)
        status.table_id = event.table_id
        status.start_time = event.time
        desired.occupy(event.text)

    def _waiting(self, event: Event, out: list[str]) -> None:
        if any(not table.acquired for table in self.tables):
            self._error(event, "ICanWaitNoLonger!", out)
        elif len(self.queue) == len(self.tables):
            out.append(str(Event(event.time, CLIENT_SENT_AWAY, event.text)))
        else:
            self.queue.append(event.text)

    def _left(self, event: Event, out: list[str]) -> None:
        status = self.clients.pop(event.text, None)
        if status is None:
            self._error(event, "ClientUnknown", out)
            return
        if status.table_id is None:
            return
        table = self._settle(status, event.time)
        if self.queue:
            waiting = self.queue.popleft()
            table.occupy(waiting)
            seated = self.clients.setdefault(waiting, ClientStatus())
            seated.table_id = table.table_id
            seated.start_time = event.time
            out.append(str(Event(event.time, CLIENT_SEATED_FROM_QUEUE, waiting, table.table_id)))

    def _closing(self, event: Event, out: list[str]) -> None:
        for name in sorted(n for n, s in self.clients.items() if s.table_id is not None):
            self._settle(self.clients[name], event.time)
            out.append(str(Event(event.time, CLIENT_SENT_AWAY, name)))
        out.append(_clock(self.info.close_time))
        out.extend(format_table_stats(self.tables))
        self.clients.clear()
        for table in self.tables:
            table.clear()
        self.queue.clear()


def simulate(info: InputInfo) -> str:
    """Run a whole day and return the printed report."""
    return "".join(f"{line}\n" for line in Club(info).run())


def main(argv: list[str] | None = None) -> int:
    """Command entry point: club FILE."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("error: invalid args", file=sys.stderr)
        print("example: club test_file.txt", file=sys.stderr)
        return 1
    try:
        info = parse_file(args[0])
    except ParseError as error:
        print(error.line, file=sys.stderr)
        return 2
    except OSError:
        print("file error", file=sys.stderr)
        return 1
    sys.stdout.write(simulate(info))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())