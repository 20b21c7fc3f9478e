"""tinyscript front end: lexer and recursive-descent parser."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tinyscript.ast import Block

__version__ = "0.1.0"


def parse(source: str, filename: str = "input.tiny") -> Block:
    """Tokenize and parse tinyscript source into its root Block."""
    from tinyscript.parser import parse as _parse

    return _parse(source, filename)
