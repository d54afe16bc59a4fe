"""Line protocol spoken with the referee over stdin/stdout."""

from __future__ import annotations

from typing import TextIO

from kutulu_bot.ai.classifier import EntityRecord
from kutulu_bot.config import GameConstants
from kutulu_bot.core.grid import Grid, build_walls, load_row
from kutulu_bot.core.models import Command
from kutulu_bot.errors import ProtocolError


class LineReader:
    """Pulls one stripped line at a time from a text stream."""

    __slots__ = ("_stream", "lines_read")

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.lines_read = 0

    def next_line(self) -> str | None:
        """Return the next line without its newline, or None at end of input."""
        line = self._stream.readline()
        if not line:
            return None
        self.lines_read += 1
        return line.rstrip("\r\n")

    def require_line(self, what: str) -> str:
        line = self.next_line()
        if line is None:
            raise ProtocolError(f"unexpected end of input while reading {what}")
        return line


def parse_ints(line: str, count: int, what: str) -> list[int]:
    fields = line.split()
    if len(fields) < count:
        raise ProtocolError(f"{what}: expected {count} integers, got {line!r}")
    try:
        return [int(f) for f in fields[:count]]
    except ValueError:
        raise ProtocolError(f"{what}: expected integers, got {line!r}") from None


def parse_entity_line(line: str) -> EntityRecord:
    """Parse ``<TYPE> <id> <x> <y> <param0> <param1> <param2>``."""
    fields = line.split()
    if len(fields) < 7:
        raise ProtocolError(f"entity record: expected 7 fields, got {line!r}")
    eid, x, y, p0, p1, p2 = parse_ints(" ".join(fields[1:7]), 6, "entity record")
    return EntityRecord(fields[0], eid, x, y, p0, p1, p2)


def read_setup(reader: LineReader) -> tuple[Grid, GameConstants]:
    """Consume the one-off header: map size, map rows, game constants."""
    (width,) = parse_ints(reader.require_line("map width"), 1, "map width")
    (height,) = parse_ints(reader.require_line("map height"), 1, "map height")
    grid = build_walls(width, height)
    for row in range(height):
        load_row(grid, row, reader.require_line(f"map row {row}"))
    values = parse_ints(reader.require_line("game constants"), 4, "game constants")
    return grid, GameConstants(*values)


def read_turn(reader: LineReader) -> list[EntityRecord] | None:
    """Consume one turn of entity records; None when input ended cleanly."""
    header = reader.next_line()
    while header is not None and not header.strip():
        header = reader.next_line()
    if header is None:
        return None
    (count,) = parse_ints(header, 1, "entity count")
    if count < 0:
        raise ProtocolError(f"negative entity count {count}")
    return [parse_entity_line(reader.require_line(f"entity {i}")) for i in range(count)]


def write_command(stream: TextIO, command: Command) -> None:
    stream.write(f"{command}\n")
    stream.flush()
