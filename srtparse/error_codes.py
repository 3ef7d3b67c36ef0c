"""Error codes for the srtparse subtitle parser."""

from enum import Enum


class ErrorCategory(Enum):
    TIME = "Time Code"
    POSITION = "Subtitle Position"
    RECORD = "Subtitle Record"
    INPUT = "Input Stream"
    FILE = "File Operation"


class ErrorCode(Enum):
    # Time-code Errors (1000-1099)
    TIME_ERROR = 1000
    PARSE_HOURS = 1001
    PARSE_MINUTES = 1002
    PARSE_SECONDS = 1003
    PARSE_MILLISECONDS = 1004
    MISSING_TIME = 1010
    MISSING_HOURS = 1011
    MISSING_MINUTES = 1012
    MISSING_SECONDS = 1013
    MISSING_MILLISECONDS = 1014
    UNEXPECTED_TIME_PART = 1020

    # Position Errors (2000-2099)
    BAD_POSITION = 2000

    # Record Errors (3000-3099)
    RECORD_ERROR = 3000
    MISSING_POSITION = 3001
    MISSING_START_TIME = 3002
    MISSING_END_TIME = 3003
    MISSING_TEXT = 3004
    PARSE_TIME_START = 3010
    PARSE_TIME_END = 3011
    EXTRA_TIME_PART = 3012
    CREATE_SUBTITLE = 3020

    # Input Errors (4000-4099)
    PARSE_ERROR = 4000
    UNEXPECTED_END = 4001
    READ_LINE = 4002

    # File Errors (5000-5099)
    READER_ERROR = 5000
    OPEN_FILE = 5001
    UNKNOWN_ENCODING = 5002

    @classmethod
    def get_category(cls, code) -> ErrorCategory:
        if isinstance(code, str):
            code = cls.__members__.get(code)
            if code is None:
                return ErrorCategory.INPUT
        code_value = code.value if isinstance(code, cls) else code
        ranges = {
            (1000, 1999): ErrorCategory.TIME,
            (2000, 2999): ErrorCategory.POSITION,
            (3000, 3999): ErrorCategory.RECORD,
            (4000, 4999): ErrorCategory.INPUT,
            (5000, 5999): ErrorCategory.FILE,
        }
        for (lo, hi), cat in ranges.items():
            if lo <= code_value <= hi:
                return cat
        return ErrorCategory.INPUT

    @classmethod
    def get_description(cls, code) -> str:
        if isinstance(code, str):
            code = cls.__members__.get(code)
        descriptions = {
            cls.TIME_ERROR: "Time code could not be parsed",
            cls.PARSE_HOURS: "Hours are not an integer",
            cls.PARSE_MINUTES: "Minutes are not an integer",
            cls.PARSE_SECONDS: "Seconds are not an integer",
            cls.PARSE_MILLISECONDS: "Milliseconds are not an integer",
            cls.MISSING_TIME: "Time part is empty",
            cls.MISSING_HOURS: "Hours not found in time part",
            cls.MISSING_MINUTES: "Minutes not found in time part",
            cls.MISSING_SECONDS: "Seconds not found in time part",
            cls.MISSING_MILLISECONDS: "Milliseconds not found in time part",
            cls.UNEXPECTED_TIME_PART: "Unexpected part of time code",
            cls.BAD_POSITION: "Subtitle position is not an unsigned integer",
            cls.RECORD_ERROR: "Subtitle record could not be built",
            cls.MISSING_POSITION: "Subtitle position is missing",
            cls.MISSING_START_TIME: "Subtitle start time is missing",
            cls.MISSING_END_TIME: "Subtitle end time is missing",
            cls.MISSING_TEXT: "Subtitle text is missing",
            cls.PARSE_TIME_START: "Subtitle start time is invalid",
            cls.PARSE_TIME_END: "Subtitle end time is invalid",
            cls.EXTRA_TIME_PART: "Time range has more than a start and an end",
            cls.CREATE_SUBTITLE: "Subtitle record is incomplete",
            cls.PARSE_ERROR: "Subtitle input could not be parsed",
            cls.UNEXPECTED_END: "Input ended in the middle of a subtitle",
            cls.READ_LINE: "Failed to read a line from input",
            cls.READER_ERROR: "Failed to read subtitles",
            cls.OPEN_FILE: "Failed to open subtitle file",
            cls.UNKNOWN_ENCODING: "Text encoding or error handler is not known",
        }
        return descriptions.get(code, "Unknown error")
