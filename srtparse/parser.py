"""Incremental SRT parser: a state machine that yields one subtitle at a time."""

import logging
from enum import Enum
from typing import Iterable, Iterator, Optional

from srtparse.exceptions import (
    BadPositionError,
    CreateSubtitleError,
    ExtraTimePartError,
    ItemBuilderError,
    ParseError,
    ParseTimeEndError,
    ParseTimeError,
    ParseTimeStartError,
    ReadLineError,
    UnexpectedEndError,
)
from srtparse.models import Item, ItemBuilder
from srtparse.timecode import Time, parse_uint

logger = logging.getLogger(__name__)

UTF8_BOM = '\ufeff'
TIME_DELIMITER = '-->'


class State(Enum):
    """Parser states.

    ``POS`` means a position line has been read into ``Parser.pending`` but not
    yet committed, which lets the parser finish the previous subtitle first.
    """
    START = 'start'
    POS = 'pos'
    TIME = 'time'
    TEXT = 'text'
    STOP = 'stop'


class Parser:
    """Pull-based SRT parser over an iterable of text lines.

    Iterating yields ``Item`` objects in input order. The first malformed
    subtitle raises a ``ParseError`` subclass, after which the parser is
    exhausted. A parser cannot be restarted.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._builder = ItemBuilder()
        self.state = State.START
        self.pending: Optional[str] = None
        self.pending_line_number = 0
        self.line_number = 0

    def __iter__(self) -> 'Parser':
        return self

    def __next__(self) -> Item:
        item = self.next_item()
        if item is None:
            raise StopIteration
        return item

    def _read_line(self) -> Optional[str]:
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise ReadLineError(e, {'line': self.line_number + 1}) from e
        self.line_number += 1
        return line

    def _take(self) -> Item:
        try:
            item = self._builder.take()
        except ItemBuilderError as e:
            raise CreateSubtitleError(e, {'line': self.line_number}) from e
        logger.debug("Parsed subtitle %d (%s --> %s)", item.pos, item.start_time, item.end_time)
        return item

    def _hold_position(self, line: str) -> None:
        self.pending = line
        self.pending_line_number = self.line_number
        self.state = State.POS

    def next_item(self) -> Optional[Item]:
        """Return the next subtitle, or None once the input is exhausted."""
        try:
            return self._parse_item()
        except ParseError:
            self.state = State.STOP
            self.pending = None
            raise

    def _parse_item(self) -> Optional[Item]:
        while True:
            if self.state is State.START:
                line = self._read_line()
                if line is None:
                    self.state = State.STOP
                    return None
                self._hold_position(line.lstrip(UTF8_BOM).strip())

            elif self.state is State.POS:
                if self._builder.maybe_ready():
                    return self._take()
                try:
                    pos = parse_uint(self.pending)
                except ValueError as e:
                    raise BadPositionError(e, {'line': self.pending_line_number}) from e
                self._builder.set_pos(pos)
                self.pending = None
                self.state = State.TIME

            elif self.state is State.TIME:
                line = self._read_line()
                if line is None:
                    raise UnexpectedEndError({'line': self.line_number})
                self._parse_time_range(line)
                self.state = State.TEXT

            elif self.state is State.TEXT:
                line = self._read_line()
                if line is None:
                    self.state = State.STOP
                    return self._take()
                line = line.strip()
                if line:
                    self._builder.append_text(line)
                    continue
                following = self._read_line()
                if following is None:
                    self.state = State.STOP
                    return self._take()
                self._hold_position(following.strip())

            else:
                return None

    def _parse_time_range(self, line: str) -> None:
        details = {'line': self.line_number}
        parts = line.strip().split(TIME_DELIMITER)
        try:
            self._builder.set_start_time(Time.parse(parts[0]))
        except ParseTimeError as e:
            raise ParseTimeStartError(e, details) from e
        if len(parts) > 1:
            try:
                self._builder.set_end_time(Time.parse(parts[1]))
            except ParseTimeError as e:
                raise ParseTimeEndError(e, details) from e
        if len(parts) > 2:
            raise ExtraTimePartError(parts[2], details)
