"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from tinyscript.ast import Block, CallStatement, Identifier, NumberLiteral
from tinyscript.debug import to_sexpr
from tinyscript.lexer import tokenize
from tinyscript.parser import Parser, parse, parse_expression
from tinyscript.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def make_parser():
    """Return a helper that builds a Parser over source, for calling parse_* directly."""

    def _make(source: str) -> Parser:
        return Parser(tokenize(source), source, "test.tiny")

    return _make


@pytest.fixture
def parse_source():
    """Return a helper that parses a whole program and returns its Block."""

    def _parse(source: str) -> Block:
        return parse(source, "test.tiny")

    return _parse


@pytest.fixture
def sexpr():
    """Return a helper that parses one expression and renders it as an s-expression."""

    def _sexpr(source: str) -> str:
        return to_sexpr(parse_expression(source, "test.tiny"))

    return _sexpr


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[object]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_number(node: object, value: int | float) -> None:
    assert isinstance(node, NumberLiteral), f"Expected NumberLiteral, got {type(node).__name__}"
    assert node.value == value, f"Expected {value}, got {node.value}"


def assert_bare_call(block: Block, name: str) -> None:
    """Assert that *block* holds exactly one argument-less call of *name*."""
    assert len(block.statements) == 1, f"Expected 1 statement, got {len(block.statements)}"
    call = block.statements[0]
    assert isinstance(call, CallStatement), f"Expected CallStatement, got {type(call).__name__}"
    assert isinstance(call.callee, Identifier)
    assert call.callee.name == name
    assert call.arguments == ()
