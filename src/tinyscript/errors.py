"""Error types with formatted source context."""

from __future__ import annotations

from dataclasses import dataclass

from tinyscript.tokens import Span


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Plain-data view of a fatal syntax error."""

    message: str
    line: int
    column: int
    received: str | None  # None at end of input


class ParseError(Exception):
    """Raised on the first syntax error, with span and source context."""

    def __init__(
        self, message: str, span: Span, received: str | None, source: str, filename: str = "input.tiny"
    ) -> None:
        self.message = message
        self.span = span
        self.received = received
        self.source = source
        self.filename = filename
        super().__init__(self.format())

    @property
    def line(self) -> int:
        return self.span.start.line

    @property
    def column(self) -> int:
        return self.span.start.column

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic(self.message, self.line, self.column, self.received)

    def describe_received(self) -> str:
        if self.received is None:
            return "end of input"
        return repr(self.received)

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename
        lines = self.source.splitlines(keepends=True)
        line_idx = self.line - 1
        col = self.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Underline the token when it sits on one line, otherwise to end of line
        if self.span.end.line == self.span.start.line:
            underline_len = max(1, self.span.end.column - col)
        else:
            underline_len = max(1, len(source_line) - col + 1)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}, found {self.describe_received()}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
