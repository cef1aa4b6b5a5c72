"""Exceptions raised while generating or decoding enum types."""

from enum import StrEnum


class ValidationError(RuntimeError):
    """Raised when an enum definition cannot be turned into a schema."""


class DuplicateSchemaError(ValidationError):
    """Raised when two distinct types register under the same schema name."""


class ParseErrorKind(StrEnum):
    """Classification of runtime decode failures."""

    WRONG_TYPE = "wrong_type"
    INVALID_VALUE = "invalid_value"
    INVALID_FORMAT = "invalid_format"
    MISSING_INPUT = "missing_input"


class ParseError(ValueError):
    """Base exception for values that cannot be decoded into an enum member."""

    kind: ParseErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class WrongTypeError(ParseError):
    """Raised when the input has the wrong JSON kind."""

    kind = ParseErrorKind.WRONG_TYPE


class InvalidValueError(ParseError):
    """Raised when the input matches no declared variant."""

    kind = ParseErrorKind.INVALID_VALUE


class InvalidFormatError(ParseError):
    """Raised when a parameter string is not a valid integer."""

    kind = ParseErrorKind.INVALID_FORMAT


class MissingInputError(ParseError):
    """Raised when a required multipart field is absent."""

    kind = ParseErrorKind.MISSING_INPUT
