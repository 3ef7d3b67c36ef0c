"""Custom exception hierarchy for srtparse."""

from srtparse.error_codes import ErrorCode


class SrtParseError(Exception):
    """Base exception for all srtparse errors."""

    def __init__(self, message, error_code=None, details=None, original_error=None):
        self.message = message
        self.error_code = error_code or "UNKNOWN"
        self.details = details or {}
        self.original_error = original_error

        full_message = f"[{self.error_code}] {message}"
        if details:
            full_message += f"\nDetails: {details}"

        super().__init__(full_message)

    def to_dict(self):
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "category": ErrorCode.get_category(self.error_code).value,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None,
        }


# Time code errors


class ParseTimeError(SrtParseError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or ErrorCode.TIME_ERROR.name, details, original_error)


class _TimeFieldParseError(ParseTimeError):
    field_name = ""
    code = ErrorCode.TIME_ERROR

    def __init__(self, original_error):
        super().__init__(
            f"could not parse {self.field_name}: {original_error}",
            self.code.name,
            original_error=original_error,
        )


class ParseHoursError(_TimeFieldParseError):
    field_name = "hours"
    code = ErrorCode.PARSE_HOURS


class ParseMinutesError(_TimeFieldParseError):
    field_name = "minutes"
    code = ErrorCode.PARSE_MINUTES


class ParseSecondsError(_TimeFieldParseError):
    field_name = "seconds"
    code = ErrorCode.PARSE_SECONDS


class ParseMillisecondsError(_TimeFieldParseError):
    field_name = "milliseconds"
    code = ErrorCode.PARSE_MILLISECONDS


class MissingTimeError(ParseTimeError):
    def __init__(self):
        super().__init__("time not found", ErrorCode.MISSING_TIME.name)


class MissingHoursError(ParseTimeError):
    def __init__(self):
        super().__init__("hours not found", ErrorCode.MISSING_HOURS.name)


class MissingMinutesError(ParseTimeError):
    def __init__(self):
        super().__init__("minutes not found", ErrorCode.MISSING_MINUTES.name)


class MissingSecondsError(ParseTimeError):
    def __init__(self):
        super().__init__("seconds not found", ErrorCode.MISSING_SECONDS.name)


class MissingMillisecondsError(ParseTimeError):
    def __init__(self):
        super().__init__("milliseconds not found", ErrorCode.MISSING_MILLISECONDS.name)


class UnexpectedTimePartError(ParseTimeError):
    def __init__(self, part):
        super().__init__(f"unexpected time part: '{part}'", ErrorCode.UNEXPECTED_TIME_PART.name)
        self.part = part


# Record builder errors


class ItemBuilderError(SrtParseError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or ErrorCode.RECORD_ERROR.name, details, original_error)


class MissingPositionError(ItemBuilderError):
    def __init__(self):
        super().__init__("item position is missing", ErrorCode.MISSING_POSITION.name)


class MissingStartTimeError(ItemBuilderError):
    def __init__(self):
        super().__init__("item start time is missing", ErrorCode.MISSING_START_TIME.name)


class MissingEndTimeError(ItemBuilderError):
    def __init__(self):
        super().__init__("item end time is missing", ErrorCode.MISSING_END_TIME.name)


class MissingTextError(ItemBuilderError):
    def __init__(self):
        super().__init__("item text is missing", ErrorCode.MISSING_TEXT.name)


# Parser errors


class ParseError(SrtParseError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or ErrorCode.PARSE_ERROR.name, details, original_error)

    @property
    def line(self):
        """1-based input line the parser was on when it failed, if known."""
        return self.details.get("line")


class BadPositionError(ParseError):
    def __init__(self, original_error, details=None):
        super().__init__(
            f"bad subtitle position: {original_error}",
            ErrorCode.BAD_POSITION.name,
            details,
            original_error,
        )


class UnexpectedEndError(ParseError):
    def __init__(self, details=None):
        super().__init__("unexpected end of input", ErrorCode.UNEXPECTED_END.name, details)


class ParseTimeStartError(ParseError):
    def __init__(self, original_error, details=None):
        super().__init__(
            f"failed to parse start time: {original_error.message}",
            ErrorCode.PARSE_TIME_START.name,
            details,
            original_error,
        )


class ParseTimeEndError(ParseError):
    def __init__(self, original_error, details=None):
        super().__init__(
            f"failed to parse end time: {original_error.message}",
            ErrorCode.PARSE_TIME_END.name,
            details,
            original_error,
        )


class ExtraTimePartError(ParseError):
    def __init__(self, part, details=None):
        super().__init__(
            f"an extra time part found: '{part}'; there should be start and end only",
            ErrorCode.EXTRA_TIME_PART.name,
            details,
        )
        self.part = part


class CreateSubtitleError(ParseError):
    def __init__(self, original_error, details=None):
        super().__init__(
            original_error.message,
            ErrorCode.CREATE_SUBTITLE.name,
            details,
            original_error,
        )


class ReadLineError(ParseError):
    def __init__(self, original_error, details=None):
        super().__init__(
            f"could not read a line from input: {original_error}",
            ErrorCode.READ_LINE.name,
            details,
            original_error,
        )


# Reader errors


class ReaderError(SrtParseError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or ErrorCode.READER_ERROR.name, details, original_error)


class OpenFileError(ReaderError):
    def __init__(self, path, original_error):
        super().__init__(
            f"could not open a file: {original_error}",
            ErrorCode.OPEN_FILE.name,
            {"path": str(path)},
            original_error,
        )
        self.path = path


class UnknownEncodingError(ReaderError):
    def __init__(self, encoding, errors, original_error):
        super().__init__(
            f"unsupported text decoding: {original_error}",
            ErrorCode.UNKNOWN_ENCODING.name,
            {"encoding": encoding, "errors": errors},
            original_error,
        )
