"""ASCII character classes used by the lexer.

Each predicate takes a single character. Anything outside the ASCII range
belongs to no class.
"""


def is_space(char: str) -> bool:
    return "\t" <= char <= "\r" or char == " "


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def is_lower(char: str) -> bool:
    return "a" <= char <= "z"


def is_ident_start(char: str) -> bool:
    return is_upper(char) or is_lower(char) or char == "_"


def is_ident_continue(char: str) -> bool:
    return is_ident_start(char) or is_digit(char)


def is_punct(char: str) -> bool:
    if char in "'_":
        return False
    return (
        "!" <= char <= "/"
        or ":" <= char <= "@"
        or "[" <= char <= "`"
        or "{" <= char <= "~"
    )
