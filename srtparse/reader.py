"""Convenience entry points that run the parser over strings, streams and files."""

import codecs
import io
import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Optional, Union

from srtparse.exceptions import OpenFileError, UnknownEncodingError
from srtparse.models import Item, ReaderConfig
from srtparse.parser import Parser

logger = logging.getLogger(__name__)


def from_str(data: Union[str, bytes], config: Optional[ReaderConfig] = None) -> List[Item]:
    """Parse SRT content held in memory and return every subtitle."""
    if isinstance(data, (bytes, bytearray)):
        return from_bytes(data, config)
    return list(Parser(io.StringIO(data)))


def from_bytes(data: bytes, config: Optional[ReaderConfig] = None) -> List[Item]:
    """Parse undecoded SRT content; decoding errors surface as ``ReadLineError``."""
    return from_reader(io.BytesIO(data), config)


def from_reader(reader: Union[IO, Iterable[str]], config: Optional[ReaderConfig] = None) -> List[Item]:
    """Parse SRT lines from a text stream, binary stream or iterable of strings."""
    return list(Parser(_text_lines(reader, config)))


def from_file(path: Union[str, Path], config: Optional[ReaderConfig] = None) -> List[Item]:
    """Parse an SRT file and return every subtitle."""
    items = list(iter_file(path, config))
    logger.info("Parsed %d subtitles from %s", len(items), path)
    return items


def iter_file(path: Union[str, Path], config: Optional[ReaderConfig] = None) -> Iterator[Item]:
    """Lazily yield subtitles from an SRT file, keeping it open while iterating."""
    config = _checked(config)
    try:
        f = open(path, 'r', encoding=config.encoding, errors=config.errors, newline='\n')
    except OSError as e:
        logger.error("Could not open subtitle file %s: %s", path, e)
        raise OpenFileError(path, e) from e
    with f:
        yield from Parser(f)


def _checked(config: Optional[ReaderConfig]) -> ReaderConfig:
    config = config or ReaderConfig()
    try:
        codecs.lookup(config.encoding)
        codecs.lookup_error(config.errors)
    except LookupError as e:
        raise UnknownEncodingError(config.encoding, config.errors, e) from e
    return config


def _text_lines(reader, config: Optional[ReaderConfig]) -> Iterable[str]:
    # Split on '\n' only, like io.StringIO; a stray '\r' stays inside the line.
    if isinstance(reader, (io.RawIOBase, io.BufferedIOBase)):
        config = _checked(config)
        return io.TextIOWrapper(reader, encoding=config.encoding, errors=config.errors, newline='\n')
    return reader
