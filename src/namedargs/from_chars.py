"""Decimal integer scanning over a slice of text."""

from __future__ import annotations

from dataclasses import dataclass

from namedargs.config import INT64_MAX
from namedargs.ctype import is_digit


@dataclass(slots=True, frozen=True)
class FromCharsResult:
    """Outcome of a scan.

    ``end`` always points past the last digit seen, even when ``overflow``
    is set, so callers know how much input the literal occupies.
    """

    value: int
    start: int
    end: int
    overflow: bool = False

    @property
    def consumed(self) -> int:
        return self.end - self.start

    @property
    def ok(self) -> bool:
        return self.consumed > 0 and not self.overflow


def from_chars(
    text: str,
    start: int = 0,
    end: int | None = None,
    *,
    max_value: int = INT64_MAX,
) -> FromCharsResult:
    """Accumulate the run of decimal digits at ``text[start:end]``.

    No sign is accepted. When no digit is present the result has
    ``end == start``.
    """
    stop = len(text) if end is None else min(end, len(text))
    risky_value, max_digit = divmod(max_value, 10)

    value = 0
    overflow = False
    index = start
    while index < stop and is_digit(text[index]):
        digit = ord(text[index]) - ord("0")
        fits = value < risky_value or (value == risky_value and digit <= max_digit)
        if not overflow and fits:
            value = value * 10 + digit
        else:
            # value stays frozen; keep advancing so end covers the whole digit run
            overflow = True
        index += 1

    return FromCharsResult(value=value, start=start, end=index, overflow=overflow)
