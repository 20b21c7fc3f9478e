"""AST node types for parsed tinyscript programs."""

from __future__ import annotations

from dataclasses import dataclass

from tinyscript.tokens import Span, Token


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """String literal; value has escapes resolved."""

    token: Token

    @property
    def value(self) -> str:
        return str(self.token.value)

    @property
    def span(self) -> Span:
        return self.token.span


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    """Integer or decimal literal."""

    token: Token

    @property
    def value(self) -> int | float:
        assert not isinstance(self.token.value, str)
        return self.token.value

    @property
    def span(self) -> Span:
        return self.token.span


@dataclass(frozen=True, slots=True)
class Identifier:
    """Bare word used as a value."""

    token: Token

    @property
    def name(self) -> str:
        return str(self.token.value)

    @property
    def span(self) -> Span:
        return self.token.span


@dataclass(frozen=True, slots=True)
class BinaryOp:
    """Infix operator application, e.g. ``a + b``."""

    operator: str
    left: Expression
    right: Expression
    span: Span


Expression = StringLiteral | NumberLiteral | Identifier | BinaryOp


@dataclass(frozen=True, slots=True)
class Assignment:
    """set <target_name> to <value>"""

    target_name: str
    value: Expression
    span: Span


@dataclass(frozen=True, slots=True)
class CallStatement:
    """<callee>(<arguments>), or a bare <callee> with no arguments."""

    callee: Expression
    arguments: tuple[Expression, ...]
    span: Span


@dataclass(frozen=True, slots=True)
class IfStatement:
    """if <condition> <then_block> [else <else_block>]"""

    condition: Expression
    then_block: Block
    else_block: Block | None
    span: Span


Statement = Assignment | CallStatement | IfStatement


@dataclass(frozen=True, slots=True)
class Block:
    """Ordered statement sequence; also the root node of a parsed program."""

    statements: tuple[Statement, ...]
    span: Span
