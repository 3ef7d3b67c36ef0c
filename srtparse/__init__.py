"""srtparse — incremental SubRip (SRT) subtitle parser."""

import logging

from srtparse.exceptions import ParseError, ParseTimeError, ReaderError, SrtParseError
from srtparse.models import Item, ReaderConfig
from srtparse.parser import Parser
from srtparse.reader import from_bytes, from_file, from_reader, from_str, iter_file
from srtparse.timecode import Time

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Item",
    "ParseError",
    "ParseTimeError",
    "Parser",
    "ReaderConfig",
    "ReaderError",
    "SrtParseError",
    "Time",
    "from_bytes",
    "from_file",
    "from_reader",
    "from_str",
    "iter_file",
]
