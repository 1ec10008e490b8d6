"""Parse ``key = value`` argument strings into typed structures."""

from namedargs.bindings import Accessor, Binding, BindingStore
from namedargs.config import DEFAULT_CONFIG, INT64_MAX, ParserConfig
from namedargs.converters import (
    ConverterRegistry,
    converter,
    dataclass_converter,
    default_registry,
)
from namedargs.errors import (
    ConversionError,
    DuplicateKeyError,
    ErrorKind,
    InputTooLongError,
    MissingArgumentError,
    NamedArgsError,
    NumericOverflowError,
    ParseError,
    TypeMismatchError,
    UnclosedStringLiteralError,
    UnexpectedCharacterError,
    UnexpectedTokenError,
)
from namedargs.lexer import Token, TokenKind, lex
from namedargs.parser import ArgParser, parse_args, parse_bindings

__all__ = [
    "Accessor",
    "ArgParser",
    "Binding",
    "BindingStore",
    "ConversionError",
    "ConverterRegistry",
    "DEFAULT_CONFIG",
    "DuplicateKeyError",
    "ErrorKind",
    "INT64_MAX",
    "InputTooLongError",
    "MissingArgumentError",
    "NamedArgsError",
    "NumericOverflowError",
    "ParseError",
    "ParserConfig",
    "Token",
    "TokenKind",
    "TypeMismatchError",
    "UnclosedStringLiteralError",
    "UnexpectedCharacterError",
    "UnexpectedTokenError",
    "converter",
    "dataclass_converter",
    "default_registry",
    "lex",
    "parse_args",
    "parse_bindings",
]
