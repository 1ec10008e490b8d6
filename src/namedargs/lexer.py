import logging
from dataclasses import dataclass
from enum import Enum

from namedargs.config import DEFAULT_CONFIG, ParserConfig
from namedargs.ctype import is_digit, is_ident_continue, is_ident_start, is_punct, is_space
from namedargs.errors import (
    InputTooLongError,
    NumericOverflowError,
    UnclosedStringLiteralError,
    UnexpectedCharacterError,
)
from namedargs.from_chars import from_chars

logger = logging.getLogger(__name__)


class TokenKind(str, Enum):
    NUMBER = "number"
    STRING = "string"
    IDENT = "ident"
    PUNCT = "punct"
    EOF = "eof"


@dataclass(slots=True, frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int
    number: int | None = None


QUOTE = "'"


def lex(source: str, config: ParserConfig | None = None) -> list[Token]:
    config = config or DEFAULT_CONFIG
    if config.max_input_length is not None and len(source) > config.max_input_length:
        raise InputTooLongError(
            f"input length {len(source)} exceeds limit of {config.max_input_length}"
        )

    tokens: list[Token] = []
    index = 0
    length = len(source)

    while index < length:
        char = source[index]
        if is_space(char):
            index = _skip_whitespace(source, index)
            continue

        if is_digit(char):
            token, index = _read_number(source, index, config.max_integer)
            tokens.append(token)
            continue

        if char == QUOTE:
            token, index = _read_string(source, index)
            tokens.append(token)
            continue

        if is_ident_start(char):
            token, index = _read_identifier(source, index)
            tokens.append(token)
            continue

        if is_punct(char):
            tokens.append(Token(TokenKind.PUNCT, char, index))
            index += 1
            continue

        raise UnexpectedCharacterError(f"unexpected character {char!r}", position=index)

    tokens.append(Token(TokenKind.EOF, "", length))
    logger.debug("lexed %d token(s) from %d character(s)", len(tokens), length)
    return tokens


def _skip_whitespace(source: str, index: int) -> int:
    while index < len(source) and is_space(source[index]):
        index += 1
    return index


def _read_number(source: str, index: int, max_value: int) -> tuple[Token, int]:
    result = from_chars(source, index, max_value=max_value)
    if result.overflow:
        raise NumericOverflowError(
            "conversion from characters to integer failed", position=index
        )
    return Token(TokenKind.NUMBER, source[index : result.end], index, result.value), result.end


def _read_string(source: str, index: int) -> tuple[Token, int]:
    closing = source.find(QUOTE, index + 1)
    if closing == -1:
        raise UnclosedStringLiteralError("unclosed string literal", position=index)
    return Token(TokenKind.STRING, source[index + 1 : closing], index), closing + 1


def _read_identifier(source: str, index: int) -> tuple[Token, int]:
    start = index
    while index < len(source) and is_ident_continue(source[index]):
        index += 1
    return Token(TokenKind.IDENT, source[start:index], start), index
