"""tinyscript lexer — converts source text into a flat token list."""

from __future__ import annotations

from collections.abc import Callable

from tinyscript.tokens import START, Span, Token, TokenType, digits_to_int, is_digit, is_trivia_char, is_word_char

# (type, value, end offset) for a successful scan
_Match = tuple[TokenType, int | float | str, int]

_STRING_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "t": "\t"}


class Lexer:
    """Tokenize tinyscript source text into a list of Token objects.

    Each token is produced by the first scanner in ``_scanners`` that
    matches at the current offset: number, string, word, then the
    single-character fallback. Whitespace after a token is attached to it
    as trivia, so the token list reproduces the source exactly.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._position = START
        self._scanners: tuple[Callable[[], _Match | None], ...] = (
            self._scan_number,
            self._scan_string,
            self._scan_word,
            self._scan_char,
        )

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        tokens: list[Token] = []
        while True:
            tok = self._next_token()
            if tok is None:
                return tokens
            tokens.append(tok)

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _peek(self, index: int) -> str:
        if index < len(self._source):
            return self._source[index]
        return ""

    def _next_token(self) -> Token | None:
        for scanner in self._scanners:
            match = scanner()
            if match is not None:
                return self._emit(*match)
        return None

    def _emit(self, tt: TokenType, value: int | float | str, end: int) -> Token:
        raw = self._source[self._pos : end]
        trivia_end = end
        while is_trivia_char(self._peek(trivia_end)):
            trivia_end += 1
        trivia = self._source[end:trivia_end]

        start = self._position
        final = start.advance(raw)
        self._position = final.advance(trivia)
        self._pos = trivia_end
        return Token(tt, value, raw, trivia, Span(start, final))

    # ------------------------------------------------------------------
    # Scanners, in priority order
    # ------------------------------------------------------------------

    def _scan_number(self) -> _Match | None:
        i = self._pos
        while is_digit(self._peek(i)):
            i += 1
        int_end = i

        frac_end = int_end
        if self._peek(int_end) == "." and is_digit(self._peek(int_end + 1)):
            frac_end = int_end + 1
            while is_digit(self._peek(frac_end)):
                frac_end += 1

        if frac_end == self._pos:
            return None
        text = self._source[self._pos : frac_end]
        if frac_end > int_end:
            return TokenType.NUMBER, float(text), frac_end
        return TokenType.NUMBER, digits_to_int(text), frac_end

    def _scan_string(self) -> _Match | None:
        if self._peek(self._pos) != '"':
            return None
        chars: list[str] = []
        i = self._pos + 1
        while i < len(self._source):
            ch = self._source[i]
            if ch == '"':
                return TokenType.STRING, "".join(chars), i + 1
            if ch == "\\" and i + 1 < len(self._source):
                nxt = self._source[i + 1]
                chars.append(_STRING_ESCAPES.get(nxt, ch + nxt))
                i += 2
                continue
            chars.append(ch)
            i += 1
        # Unterminated; the quote falls through to the char scanner
        return None

    def _scan_word(self) -> _Match | None:
        i = self._pos
        while is_word_char(self._peek(i)):
            i += 1
        if i == self._pos:
            return None
        return TokenType.WORD, self._source[self._pos : i], i

    def _scan_char(self) -> _Match | None:
        if self._pos >= len(self._source):
            return None
        return TokenType.CHAR, self._source[self._pos], self._pos + 1


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source).tokenize()
