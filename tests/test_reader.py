"""Tests for srtparse.reader module."""

import io
from pathlib import Path

import pytest

from srtparse.exceptions import (
    OpenFileError, ParseTimeStartError, ReadLineError, ReaderError, UnknownEncodingError,
)
from srtparse.models import ReaderConfig
from srtparse.reader import from_bytes, from_file, from_reader, from_str, iter_file
from srtparse.timecode import Time


class TestFromStr:
    def test_parse_string(self):
        items = from_str("1\n00:00:01,100 --> 00:00:02,120\nHello!")
        assert len(items) == 1
        assert items[0].pos == 1
        assert items[0].start_time == Time(0, 0, 1, 100)
        assert items[0].text == 'Hello!'

    def test_parse_empty(self):
        assert from_str('') == []

    def test_bytes_are_decoded(self, sample_srt):
        assert from_str(sample_srt.encode('utf-8')) == from_str(sample_srt)

    def test_bytes_with_bom(self, sample_srt):
        assert from_str(b'\xef\xbb\xbf' + sample_srt.encode('utf-8')) == from_str(sample_srt)

    def test_first_error_stops_parsing(self):
        with pytest.raises(ParseTimeStartError):
            from_str("1\n00:00:01,000 --> 00:00:02,000\na\n\n2\nnope\nb\n")


class TestFromBytes:
    def test_invalid_utf8_is_a_read_error(self):
        with pytest.raises(ReadLineError) as excinfo:
            from_bytes(b"1\n00:00:01,000 --> 00:00:02,000\n\xff\xfe\n")
        assert isinstance(excinfo.value.original_error, UnicodeDecodeError)

    def test_custom_encoding(self):
        data = "1\n00:00:01,000 --> 00:00:02,000\nÇa va?\n".encode('latin-1')
        items = from_bytes(data, ReaderConfig(encoding='latin-1'))
        assert items[0].text == 'Ça va?'


class TestFromReader:
    def test_text_stream(self, sample_srt):
        assert len(from_reader(io.StringIO(sample_srt))) == 4

    def test_binary_stream(self, sample_srt):
        assert len(from_reader(io.BytesIO(sample_srt.encode('utf-8')))) == 4

    def test_iterable_of_lines(self):
        items = from_reader(['1', '00:00:01,000 --> 00:00:02,000', 'Hi'])
        assert items[0].text == 'Hi'


class TestFromFile:
    def test_parse_basic(self, sample_srt_file):
        entries = from_file(sample_srt_file)
        assert len(entries) == 2
        assert entries[0].text == 'Hello, world!'
        assert entries[0].pos == 1
        assert entries[1].text == 'This is a test.'
        assert entries[1].end_time.to_milliseconds() == 6000

    def test_accepts_str_path(self, sample_srt_file):
        assert len(from_file(str(sample_srt_file))) == 2

    def test_windows_line_endings(self, tmp_path, sample_srt):
        path = tmp_path / 'crlf.srt'
        path.write_bytes(sample_srt.replace('\n', '\r\n').encode('utf-8'))
        assert from_file(path) == from_str(sample_srt)

    def test_missing_file(self):
        with pytest.raises(OpenFileError) as excinfo:
            from_file(Path('/file/does/not/exist.srt'))
        assert isinstance(excinfo.value, ReaderError)
        assert isinstance(excinfo.value.original_error, FileNotFoundError)
        assert excinfo.value.message.startswith('could not open a file: ')
        assert excinfo.value.details == {'path': '/file/does/not/exist.srt'}

    def test_parse_error_propagates(self, broken_srt_file):
        with pytest.raises(ParseTimeStartError) as excinfo:
            from_file(broken_srt_file)
        assert excinfo.value.line == 6


class TestIterFile:
    def test_lazy(self, sample_srt_file):
        items = iter_file(sample_srt_file)
        assert next(items).pos == 1
        assert next(items).pos == 2
        with pytest.raises(StopIteration):
            next(items)

    def test_error_after_good_items(self, broken_srt_file):
        items = iter_file(broken_srt_file)
        assert next(items).text == 'Hello, world!'
        with pytest.raises(ParseTimeStartError):
            next(items)


class TestDecodingSettings:
    def test_unknown_encoding_for_file(self, sample_srt_file):
        with pytest.raises(UnknownEncodingError) as excinfo:
            from_file(sample_srt_file, ReaderConfig(encoding='bogus'))
        assert isinstance(excinfo.value, ReaderError)
        assert isinstance(excinfo.value.original_error, LookupError)
        assert excinfo.value.details == {'encoding': 'bogus', 'errors': 'strict'}

    def test_unknown_encoding_for_bytes(self):
        with pytest.raises(UnknownEncodingError):
            from_bytes(b'1\n00:00:01,000 --> 00:00:02,000\nHi\n', ReaderConfig(encoding='bogus'))

    def test_unknown_error_handler(self, sample_srt_file):
        with pytest.raises(UnknownEncodingError):
            from_file(sample_srt_file, ReaderConfig(errors='bogus'))


class TestLineSplitting:
    CONTENT = "1\n00:00:01,000 --> 00:00:02,000\nA\rB\n"

    def test_lone_carriage_return_is_not_a_line_break(self):
        assert from_str(self.CONTENT)[0].text == 'A\rB'

    def test_all_sources_agree(self, tmp_path):
        path = tmp_path / 'cr.srt'
        path.write_bytes(self.CONTENT.encode('utf-8'))
        expected = from_str(self.CONTENT)
        assert from_file(path) == expected
        assert from_bytes(self.CONTENT.encode('utf-8')) == expected
        assert from_reader(io.BytesIO(self.CONTENT.encode('utf-8'))) == expected
