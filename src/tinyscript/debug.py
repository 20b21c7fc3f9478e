"""Human-readable token and AST dumps."""

from __future__ import annotations

import sys
from typing import TextIO

from tinyscript.ast import (
    Assignment,
    BinaryOp,
    Block,
    CallStatement,
    Expression,
    Identifier,
    IfStatement,
    NumberLiteral,
    Statement,
    StringLiteral,
)
from tinyscript.tokens import Token, TokenType


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr, show_trivia: bool = False) -> None:
    """Print one line per token: position, type, and value."""
    for tok in tokens:
        pos = f"{tok.start.line}:{tok.start.column}"
        value = tok.display if tok.type is TokenType.NUMBER else repr(tok.value)
        line = f"{pos:<8}{tok.type.name:<8}{value}"
        if show_trivia and tok.trivia:
            line += f"  trivia={tok.trivia!r}"
        file.write(line + "\n")


def dump_ast(node: Block | Statement | Expression, *, file: TextIO = sys.stderr, indent: int = 2) -> None:
    """Print a human-readable AST tree to *file*."""
    _Dumper(file, " " * indent).node(node, 0)


def to_sexpr(node: Block | Statement | Expression) -> str:
    """Render a node on one line, e.g. ``(+ 1 (* 2 3))``."""
    if isinstance(node, Block):
        return "{" + " ".join(to_sexpr(s) for s in node.statements) + "}"
    if isinstance(node, Assignment):
        return f"(set {node.target_name} {to_sexpr(node.value)})"
    if isinstance(node, CallStatement):
        parts = [to_sexpr(node.callee), *(to_sexpr(a) for a in node.arguments)]
        return f"(call {' '.join(parts)})"
    if isinstance(node, IfStatement):
        parts = [to_sexpr(node.condition), to_sexpr(node.then_block)]
        if node.else_block is not None:
            parts.append(to_sexpr(node.else_block))
        return f"(if {' '.join(parts)})"
    if isinstance(node, BinaryOp):
        return f"({node.operator} {to_sexpr(node.left)} {to_sexpr(node.right)})"
    if isinstance(node, StringLiteral):
        return f'"{node.value}"'
    if isinstance(node, NumberLiteral):
        return node.token.display
    if isinstance(node, Identifier):
        return node.name
    raise TypeError(f"not an AST node: {type(node).__name__}")


class _Dumper:
    def __init__(self, f: TextIO, unit: str) -> None:
        self._f = f
        self._unit = unit

    def _line(self, depth: int, text: str) -> None:
        self._f.write(f"{self._unit * depth}{text}\n")

    def node(self, node: Block | Statement | Expression, depth: int) -> None:
        if isinstance(node, Block):
            self._line(depth, "Block")
            for statement in node.statements:
                self.node(statement, depth + 1)
        elif isinstance(node, Assignment):
            self._line(depth, f"Assignment {node.target_name}")
            self.node(node.value, depth + 1)
        elif isinstance(node, CallStatement):
            self._line(depth, "CallStatement")
            self.node(node.callee, depth + 1)
            for arg in node.arguments:
                self._line(depth + 1, "Arg")
                self.node(arg, depth + 2)
        elif isinstance(node, IfStatement):
            self._line(depth, "IfStatement")
            self.node(node.condition, depth + 1)
            self.node(node.then_block, depth + 1)
            if node.else_block is not None:
                self._line(depth + 1, "Else")
                self.node(node.else_block, depth + 2)
        elif isinstance(node, BinaryOp):
            self._line(depth, f"BinaryOp {node.operator}")
            self.node(node.left, depth + 1)
            self.node(node.right, depth + 1)
        elif isinstance(node, StringLiteral):
            self._line(depth, f"StringLiteral({node.value!r})")
        elif isinstance(node, NumberLiteral):
            self._line(depth, f"NumberLiteral({node.token.display})")
        elif isinstance(node, Identifier):
            self._line(depth, f"Identifier({node.name})")
