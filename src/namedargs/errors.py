"""Error hierarchy for named-argument parsing and conversion."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Discriminator carried by every NamedArgsError subclass."""

    UNEXPECTED_CHARACTER = "unexpected_character"
    UNCLOSED_STRING_LITERAL = "unclosed_string_literal"
    NUMERIC_OVERFLOW = "numeric_overflow"
    UNEXPECTED_TOKEN = "unexpected_token"
    DUPLICATE_KEY = "duplicate_key"
    INPUT_TOO_LONG = "input_too_long"
    TYPE_MISMATCH = "type_mismatch"
    MISSING_ARGUMENT = "missing_argument"


class NamedArgsError(Exception):
    """Base error for all namedargs failures."""

    kind: ErrorKind

    def __init__(self, message: str, *, position: int | None = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} at offset {self.position}"


# --- Lexing and parsing ---


class ParseError(NamedArgsError):
    """The input text could not be turned into bindings."""


class InputTooLongError(ParseError):
    """Input exceeds ParserConfig.max_input_length."""

    kind = ErrorKind.INPUT_TOO_LONG


class UnexpectedCharacterError(ParseError):
    """A character matches no token-start rule."""

    kind = ErrorKind.UNEXPECTED_CHARACTER


class UnclosedStringLiteralError(ParseError):
    """A string literal has no closing quote before the end of input."""

    kind = ErrorKind.UNCLOSED_STRING_LITERAL


class NumericOverflowError(ParseError):
    """A decimal literal does not fit the configured integer width."""

    kind = ErrorKind.NUMERIC_OVERFLOW


class UnexpectedTokenError(ParseError):
    """The token stream does not match the grammar."""

    kind = ErrorKind.UNEXPECTED_TOKEN


class DuplicateKeyError(ParseError):
    """The same identifier is assigned twice in one input."""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, message: str, *, key: str, position: int | None = None):
        super().__init__(message, position=position)
        self.key = key


# --- Conversion ---


class ConversionError(NamedArgsError):
    """Bindings could not populate the requested structure."""


class TypeMismatchError(ConversionError):
    """A stored value cannot be assigned to the requested type."""

    kind = ErrorKind.TYPE_MISMATCH

    def __init__(self, message: str, *, key: str, expected: Any, actual: type):
        super().__init__(message)
        self.key = key
        self.expected = expected
        self.actual = actual


class MissingArgumentError(ConversionError):
    """A required field has neither a binding nor a default."""

    kind = ErrorKind.MISSING_ARGUMENT

    def __init__(self, message: str, *, key: str):
        super().__init__(message)
        self.key = key
