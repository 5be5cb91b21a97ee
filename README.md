# clubsim

`clubsim` replays one working day of a computer club from an event file.
It prints every event, the errors and automatic events those events cause,
and at closing time it prints how much each table earned and how long it
was occupied.

## Installation

```
pip install .
```

## Usage

```
clubsim events.txt
```

The input file looks like this:

```
3
09:00 19:00
10
08:48 1 client1
09:41 1 client1
09:54 2 client1 1
12:33 4 client1
```

- line 1: number of tables (a non-negative integer)
- line 2: opening and closing time (`HH:MM HH:MM`)
- line 3: price per started hour (a non-negative integer)
- then one event per line: `HH:MM ID client_name [table]`

Incoming event IDs:

| ID | Meaning |
|----|---------|
| 1  | client arrives |
| 2  | client sits at a table (table number follows, from 1 to the number of tables) |
| 3  | client waits for a free table |
| 4  | client leaves |

Client names may contain only lowercase letters, digits and `_`.

Events produced by the simulation:

| ID | Meaning |
|----|---------|
| 11 | client leaves (queue full, or club closing) |
| 12 | waiting client takes a freed table |
| 13 | error: `NotOpenYet`, `YouShallNotPass`, `ClientUnknown`, `PlaceIsBusy`, `ICanWaitNoLonger!` |

When the first event at or after closing time is read, or when the last event
falls within opening hours, a closing event is added at closing time. At that
point every client still at a table leaves (event 11, in name order), the
closing time is printed, and then one line per table:
`table_number revenue HH:MM`. Every started hour at a table is billed in full.

If a line of the input is malformed, that line is written to standard error
and the command exits with status 2. A wrong number of arguments, or a file
that cannot be opened, exits with status 1.

## Library use

```python
from clubsim.parser import parse_file
from clubsim.club import simulate

info = parse_file("events.txt")
print(simulate(info), end="")
```

- `clubsim.parser.parse_file(path)` reads a file; `parse_input(lines)` accepts
  any iterable of lines. Both return an `InputInfo` and raise
  `clubsim.parser.ParseError` (a `ValueError`) whose `line` attribute holds the
  first invalid line. `parse_event` and `parse_time_range` parse single lines.
- `clubsim.club.simulate(info)` returns the full report as a string.
- `clubsim.club.Club(info)` holds the tables, clients and queue; `Club.process(event)`
  applies one event and returns its output lines, and `Club.run()` returns the
  whole day's output as a list of lines.
- `clubsim.club.format_table_stats(tables)` renders the per-table summary lines.
- `clubsim.models` defines `Event`, `Table`, `ClientStatus` and `InputInfo`.

## Tests

```
pip install .[test]
pytest
```