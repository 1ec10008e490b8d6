import pytest

from namedargs.config import ParserConfig
from namedargs.errors import (
    ErrorKind,
    InputTooLongError,
    NumericOverflowError,
    UnclosedStringLiteralError,
    UnexpectedCharacterError,
)
from namedargs.lexer import Token, TokenKind, lex


def test_lexer_produces_expected_token_stream():
    tokens = lex("num = 42, str = 'Hello, world!'")

    assert tokens == [
        Token(TokenKind.IDENT, "num", 0),
        Token(TokenKind.PUNCT, "=", 4),
        Token(TokenKind.NUMBER, "42", 6, 42),
        Token(TokenKind.PUNCT, ",", 8),
        Token(TokenKind.IDENT, "str", 10),
        Token(TokenKind.PUNCT, "=", 14),
        Token(TokenKind.STRING, "Hello, world!", 16),
        Token(TokenKind.EOF, "", 31),
    ]


def test_empty_and_blank_input_yield_only_eof():
    assert lex("") == [Token(TokenKind.EOF, "", 0)]
    assert lex(" \t\r\n") == [Token(TokenKind.EOF, "", 4)]


def test_identifier_may_contain_digits_and_underscores():
    tokens = lex("_a1b2 x_")

    assert [t.text for t in tokens[:-1]] == ["_a1b2", "x_"]
    assert all(t.kind == TokenKind.IDENT for t in tokens[:-1])


def test_number_followed_by_letters_splits_into_two_tokens():
    tokens = lex("12abc")

    assert tokens[0] == Token(TokenKind.NUMBER, "12", 0, 12)
    assert tokens[1] == Token(TokenKind.IDENT, "abc", 2)


def test_string_literal_keeps_interior_verbatim():
    tokens = lex("'a, b = c' '' '\\n'")

    assert [t.text for t in tokens[:-1]] == ["a, b = c", "", "\\n"]
    assert all(t.kind == TokenKind.STRING for t in tokens[:-1])


def test_string_literal_ends_at_next_quote():
    tokens = lex("'it''s'")

    assert tokens[0] == Token(TokenKind.STRING, "it", 0)
    assert tokens[1] == Token(TokenKind.STRING, "s", 4)
    assert tokens[2].kind == TokenKind.EOF
    # the final quote opens a second, unclosed literal
    with pytest.raises(UnclosedStringLiteralError):
        lex("'it's'")


def test_punctuation_is_one_character_per_token():
    tokens = lex("=,;")

    assert [(t.kind, t.text) for t in tokens[:-1]] == [
        (TokenKind.PUNCT, "="),
        (TokenKind.PUNCT, ","),
        (TokenKind.PUNCT, ";"),
    ]


def test_only_eof_token_is_empty():
    tokens = lex("a = '', b = 0")

    for token in tokens:
        if token.kind == TokenKind.EOF:
            assert token.text == ""
        elif token.kind == TokenKind.STRING:
            assert token.position < len("a = '', b = 0")
        else:
            assert token.text


def test_unclosed_string_literal():
    with pytest.raises(UnclosedStringLiteralError) as excinfo:
        lex("s = 'abc")

    assert excinfo.value.kind == ErrorKind.UNCLOSED_STRING_LITERAL
    assert excinfo.value.position == 4
    assert "unclosed string literal" in str(excinfo.value)


@pytest.mark.parametrize("source", ["a = \x01", "a = \x7f", "a = é"])
def test_unexpected_character(source):
    with pytest.raises(UnexpectedCharacterError) as excinfo:
        lex(source)

    assert excinfo.value.position == 4
    assert "unexpected character" in str(excinfo.value)


def test_numeric_overflow_is_reported():
    with pytest.raises(NumericOverflowError) as excinfo:
        lex("n = 9223372036854775808")

    assert excinfo.value.position == 4
    assert "conversion from characters to integer failed" in str(excinfo.value)


def test_max_integer_is_configurable():
    assert lex("n = 10", ParserConfig(max_integer=10))[2].number == 10
    with pytest.raises(NumericOverflowError):
        lex("n = 11", ParserConfig(max_integer=10))


def test_max_input_length_is_enforced():
    with pytest.raises(InputTooLongError):
        lex("a = 1", ParserConfig(max_input_length=4))
    assert lex("a = 1", ParserConfig(max_input_length=5))[-1].kind == TokenKind.EOF
