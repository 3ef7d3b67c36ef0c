"""SRT time codes: parsing ``HH:MM:SS,mmm`` and converting to durations."""

import re
from dataclasses import dataclass
from datetime import timedelta

from srtparse.exceptions import (
    MissingHoursError,
    MissingMillisecondsError,
    MissingMinutesError,
    MissingSecondsError,
    MissingTimeError,
    ParseHoursError,
    ParseMillisecondsError,
    ParseMinutesError,
    ParseSecondsError,
    UnexpectedTimePartError,
)

_UINT_RE = re.compile(r'\+?[0-9]+')


def parse_uint(raw: str) -> int:
    """Parse a non-negative integer made of ASCII digits with an optional ``+``.

    Stricter than ``int()``: surrounding whitespace, underscores, signs other
    than ``+`` and non-ASCII digits are all rejected.
    """
    if not raw:
        raise ValueError("cannot parse integer from empty string")
    if not _UINT_RE.fullmatch(raw):
        raise ValueError("invalid digit found in string")
    try:
        return int(raw)
    except ValueError:
        # int() refuses strings longer than sys.get_int_max_str_digits()
        raise ValueError("number too large to fit in target type") from None


@dataclass(frozen=True)
class Time:
    """The moment a subtitle appears or disappears.

    Components are not range-checked, so ``Time(0, 75, 0, 0)`` is valid and
    simply means 75 minutes.
    """
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d},{self.milliseconds}"

    def to_milliseconds(self) -> int:
        """Return the time as a single number of milliseconds."""
        minutes = self.minutes + self.hours * 60
        seconds = self.seconds + minutes * 60
        return self.milliseconds + seconds * 1000

    def to_duration(self) -> timedelta:
        """Return the time as a ``timedelta`` offset from the start of the media."""
        return timedelta(milliseconds=self.to_milliseconds())

    @classmethod
    def parse(cls, raw: str) -> 'Time':
        """Parse an SRT time code such as ``00:01:02,200``.

        Raises a ``ParseTimeError`` subclass naming the field that failed.
        """
        parts = raw.strip().split(',')
        if not parts:
            raise MissingTimeError()

        clock = parts[0].split(':')
        if not clock:
            raise MissingHoursError()
        try:
            hours = parse_uint(clock[0])
        except ValueError as e:
            raise ParseHoursError(e) from e

        if len(clock) < 2:
            raise MissingMinutesError()
        try:
            minutes = parse_uint(clock[1])
        except ValueError as e:
            raise ParseMinutesError(e) from e

        if len(clock) < 3:
            raise MissingSecondsError()
        try:
            seconds = parse_uint(clock[2])
        except ValueError as e:
            raise ParseSecondsError(e) from e

        if len(clock) > 3:
            raise UnexpectedTimePartError(clock[3])

        if len(parts) < 2:
            raise MissingMillisecondsError()
        try:
            milliseconds = parse_uint(parts[1])
        except ValueError as e:
            raise ParseMillisecondsError(e) from e

        if len(parts) > 2:
            raise UnexpectedTimePartError(parts[2])

        return cls(hours=hours, minutes=minutes, seconds=seconds, milliseconds=milliseconds)
