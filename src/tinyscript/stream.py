"""Forward-only cursor over a token list."""

from __future__ import annotations

from collections.abc import Callable

from tinyscript.tokens import START, Position, Span, Token, TokenType

Predicate = Callable[[object], bool] | int | float | str


class TokenStream:
    """Single forward cursor with lookahead and atomic conditional consumption.

    Nothing here moves the cursor backwards: a caller that wants to try an
    alternative must decide from ``current()``/``peek()`` before consuming.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._index = 0
        if tokens:
            last = tokens[-1]
            self._end = last.span.end.advance(last.trivia)
        else:
            self._end = START

    @property
    def index(self) -> int:
        """Cursor position, as an index into the token list."""
        return self._index

    @property
    def end(self) -> Position:
        """Position just past the last character of the source."""
        return self._end

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._tokens)

    def current(self) -> Token | None:
        return self.peek(0)

    def peek(self, offset: int = 1) -> Token | None:
        idx = self._index + offset
        if 0 <= idx < len(self._tokens):
            return self._tokens[idx]
        return None

    def consume(self) -> Token | None:
        tok = self.current()
        if tok is not None:
            self._index += 1
        return tok

    def consume_if(self, tt: TokenType, predicate: Predicate | None = None) -> Token | None:
        """Consume and return the current token only if it is of type *tt*.

        *predicate* is either an exact value the token must equal or a
        callable over the token value. On mismatch the cursor is unchanged.
        """
        tok = self.current()
        if tok is None or tok.type is not tt:
            return None
        if predicate is not None:
            if callable(predicate):
                if not predicate(tok.value):
                    return None
            elif tok.value != predicate:
                return None
        self._index += 1
        return tok

    def location(self) -> Span:
        """Span of the current token, or an empty span at end of input."""
        tok = self.current()
        if tok is not None:
            return tok.span
        return Span(self._end, self._end)
