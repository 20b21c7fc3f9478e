"""Token types, positions, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    NUMBER = auto()  # 12, 1.5, .5
    STRING = auto()  # "...", value has escapes resolved
    WORD = auto()  # alnum/underscore run
    CHAR = auto()  # any single character not matched above


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int

    def advance(self, text: str) -> Position:
        """Return the position reached after reading *text* from here."""
        if not text:
            return self
        newlines = text.count("\n")
        if newlines:
            column = len(text) - text.rfind("\n")
        else:
            column = self.column + len(text)
        return Position(self.line + newlines, column, self.offset + len(text))


START = Position(1, 1, 0)


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with its value, source text, and trailing trivia."""

    type: TokenType
    value: int | float | str
    raw: str
    trivia: str
    span: Span

    @property
    def start(self) -> Position:
        return self.span.start

    @property
    def final(self) -> Position:
        return self.span.end

    @property
    def display(self) -> str:
        """Rendering used when the token is reported in a diagnostic."""
        if self.type is TokenType.NUMBER and isinstance(self.value, int):
            # str() of a huge int trips the interpreter's digit limit
            return self.raw.lstrip("0") or "0"
        return str(self.value)


# Stays below the smallest digit limit sys.set_int_max_str_digits accepts
_DIGIT_CHUNK = 500


def digits_to_int(digits: str) -> int:
    """Convert a run of decimal digits of any length to an int."""
    value = 0
    for i in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[i : i + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch != "" and ch in "0123456789"


def is_word_char(ch: str) -> bool:
    """Return True if ch may appear in a word token."""
    return ch.isalnum() or ch == "_"


def is_trivia_char(ch: str) -> bool:
    """Return True if ch is whitespace attached to the preceding token."""
    return ch.isspace()
