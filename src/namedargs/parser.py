import logging
from typing import Any

from namedargs.bindings import Accessor, BindingStore, Value
from namedargs.config import ParserConfig
from namedargs.converters import ConverterRegistry, resolve_converter
from namedargs.errors import UnexpectedTokenError
from namedargs.lexer import Token, TokenKind, lex

logger = logging.getLogger(__name__)


class ArgParser:
    def __init__(self, source: str, config: ParserConfig | None = None):
        self._tokens = lex(source, config)
        self._index = 0
        self._store = BindingStore()
        self._parsed = False

    @property
    def tokens(self) -> list[Token]:
        return list(self._tokens)

    def parse(self) -> BindingStore:
        if self._parsed:
            raise RuntimeError("ArgParser.parse() may only be called once")
        self._parsed = True

        self._parse_args()
        logger.debug("parsed %d binding(s)", len(self._store))
        return self._store.finalize()

    # args := EOF | stmt EOF
    def _parse_args(self) -> None:
        if self._peek().kind == TokenKind.EOF:
            return
        self._parse_stmt()
        self._expect(TokenKind.EOF, "end of input")

    # stmt := assign ("," assign)*
    def _parse_stmt(self) -> None:
        self._parse_assign()
        while self._at_punct(","):
            self._consume()
            self._parse_assign()

    # assign := IDENT "=" primary
    def _parse_assign(self) -> None:
        ident = self._expect(TokenKind.IDENT, "identifier")
        self._store.ensure_new(ident.text, position=ident.position)
        self._expect_punct("=")
        value = self._parse_primary()
        self._store.add(ident.text, value, position=ident.position)

    # primary := STRING | NUMBER
    def _parse_primary(self) -> Value:
        token = self._peek()
        if token.kind == TokenKind.STRING:
            return self._consume().text
        if token.kind == TokenKind.NUMBER:
            number = self._consume().number
            assert number is not None
            return number
        raise self._unexpected(token, "string or number")

    def _at_punct(self, value: str) -> bool:
        token = self._peek()
        return token.kind == TokenKind.PUNCT and token.text == value

    def _expect_punct(self, value: str) -> Token:
        if not self._at_punct(value):
            raise self._unexpected(self._peek(), repr(value))
        return self._consume()

    def _expect(self, kind: TokenKind, expected: str) -> Token:
        token = self._peek()
        if token.kind != kind:
            raise self._unexpected(token, expected)
        return self._consume()

    def _unexpected(self, token: Token, expected: str) -> UnexpectedTokenError:
        found = "end of input" if token.kind == TokenKind.EOF else repr(token.text)
        return UnexpectedTokenError(
            f"unexpected token {found}; expecting {expected}", position=token.position
        )

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _consume(self) -> Token:
        token = self._tokens[self._index]
        self._index += 1
        return token


def parse_bindings(source: str, config: ParserConfig | None = None) -> BindingStore:
    return ArgParser(source, config).parse()


def parse_args(
    source: str,
    convert: Any,
    *,
    config: ParserConfig | None = None,
    registry: ConverterRegistry | None = None,
) -> Any:
    routine = resolve_converter(convert, registry)
    store = parse_bindings(source, config)
    return routine(Accessor(store))
