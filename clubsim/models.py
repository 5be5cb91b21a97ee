"""Data types shared by the parser and the club simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import time

CLIENT_ARRIVED = 1
CLIENT_SAT_DOWN = 2
CLIENT_WAITING = 3
CLIENT_LEFT = 4
CLUB_CLOSING = 5
CLIENT_SENT_AWAY = 11
CLIENT_SEATED_FROM_QUEUE = 12
ERROR = 13

SYSTEM_CLIENT = "__system__"


@dataclass
class Event:
    """A timestamped event: incoming, outgoing or generated by the system."""

    time: time
    event_id: int
    text: str
    table_id: int | None = None

    def __str__(self) -> str:
        line = f"{self.time.strftime('%H:%M')} {self.event_id} {self.text}"
        if self.table_id is not None:
            line += f" {self.table_id}"
        return line


@dataclass
class Table:
    """A playing table with its occupant and the day's takings."""

    table_id: int
    client_name: str = ""
    acquired: bool = False
    money: int = 0
    seconds: int = 0

    def occupy(self, client_name: str) -> None:
        """Seat a client at this table."""
        if self.acquired:
            raise ValueError(f"table {self.table_id} is already occupied")
        self.acquired = True
        self.client_name = client_name

    def release(self) -> None:
        """Free the table."""
        if not self.acquired:
            raise ValueError(f"table {self.table_id} is not occupied")
        self.acquired = False

    def charge(self, seconds: int, price: int) -> None:
        """Record a sitting of the given length, billed per started hour."""
        self.seconds += seconds
        self.money += price * math.ceil(seconds / 3600)

    def clear(self) -> None:
        """Reset the table for a new day."""
        self.client_name = ""
        self.acquired = False
        self.money = 0
        self.seconds = 0


@dataclass
class ClientStatus:
    """Where a client inside the club sits and since when."""

    table_id: int | None = None
    start_time: time | None = None


@dataclass
class InputInfo:
    """Everything read from an input file."""

    table_count: int
    open_time: time
    close_time: time
    price: int
    events: list[Event] = field(default_factory=list)