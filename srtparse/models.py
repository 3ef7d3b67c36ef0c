"""Data models for parsed subtitles."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from srtparse.exceptions import (
    MissingEndTimeError,
    MissingPositionError,
    MissingStartTimeError,
    MissingTextError,
)
from srtparse.timecode import Time


@dataclass
class ReaderConfig:
    """How byte input is decoded into lines."""
    encoding: str = 'utf-8'
    errors: str = 'strict'


@dataclass(frozen=True)
class Item:
    """A single subtitle from an SRT file."""
    pos: int
    start_time: Time
    end_time: Time
    text: str

    def __str__(self) -> str:
        return f"{self.pos}\n{self.start_time}-->{self.end_time}\n{self.text}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pos': self.pos,
            'start_time': str(self.start_time),
            'end_time': str(self.end_time),
            'start_ms': self.start_time.to_milliseconds(),
            'end_ms': self.end_time.to_milliseconds(),
            'text': self.text,
        }


class ItemBuilder:
    """Collects the fields of one subtitle while its lines are being read.

    ``take()`` empties the builder and returns the finished ``Item``, or
    raises an ``ItemBuilderError`` subclass for the first missing field.
    """

    def __init__(self) -> None:
        self.pos: Optional[int] = None
        self.start_time: Optional[Time] = None
        self.end_time: Optional[Time] = None
        self.text: Optional[str] = None

    def set_pos(self, pos: int) -> None:
        self.pos = pos

    def set_start_time(self, start_time: Time) -> None:
        self.start_time = start_time

    def set_end_time(self, end_time: Time) -> None:
        self.end_time = end_time

    def append_text(self, part: str) -> None:
        if self.text is None:
            self.text = part
        else:
            self.text = f"{self.text}\n{part}"

    def maybe_ready(self) -> bool:
        return self.pos is not None

    def take(self) -> Item:
        pos, start_time, end_time, text = self.pos, self.start_time, self.end_time, self.text
        self.pos = self.start_time = self.end_time = self.text = None

        if pos is None:
            raise MissingPositionError()
        if start_time is None:
            raise MissingStartTimeError()
        if end_time is None:
            raise MissingEndTimeError()
        if text is None:
            raise MissingTextError()
        return Item(pos=pos, start_time=start_time, end_time=end_time, text=text)
