"""Tests for token and AST dumps."""

from __future__ import annotations

import io

import pytest

from tinyscript.debug import dump_ast, dump_tokens, to_sexpr
from tinyscript.lexer import tokenize
from tinyscript.parser import parse, parse_expression


class TestDumpTokens:
    def test_one_line_per_token(self):
        out = io.StringIO()
        dump_tokens(tokenize("set a"), file=out)
        lines = out.getvalue().splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("1:1")
        assert "WORD" in lines[0]
        assert "'set'" in lines[0]

    def test_trivia_hidden_by_default(self):
        out = io.StringIO()
        dump_tokens(tokenize("a \n"), file=out)
        assert "trivia" not in out.getvalue()

    def test_trivia_shown(self):
        out = io.StringIO()
        dump_tokens(tokenize("a \n"), file=out, show_trivia=True)
        assert "trivia=' \\n'" in out.getvalue()

    def test_long_number_written_as_digits(self):
        out = io.StringIO()
        dump_tokens(tokenize("9" * 5000), file=out)
        assert out.getvalue().rstrip("\n").endswith("NUMBER  " + "9" * 5000)


class TestDumpAst:
    def test_tree_layout(self):
        out = io.StringIO()
        dump_ast(parse("set a to 1 + b"), file=out)
        assert out.getvalue() == (
            "Block\n"
            "  Assignment a\n"
            "    BinaryOp +\n"
            "      NumberLiteral(1)\n"
            "      Identifier(b)\n"
        )

    def test_if_else_and_call(self):
        out = io.StringIO()
        dump_ast(parse('if a { f("s") } else { g }'), file=out, indent=1)
        assert out.getvalue() == (
            "Block\n"
            " IfStatement\n"
            "  Identifier(a)\n"
            "  Block\n"
            "   CallStatement\n"
            "    Identifier(f)\n"
            "    Arg\n"
            "     StringLiteral('s')\n"
            "  Else\n"
            "   Block\n"
            "    CallStatement\n"
            "     Identifier(g)\n"
        )


class TestSexpr:
    def test_statements(self):
        block = parse('set x to 2 ^ 3; show(x, "y"); if x { a } else b')
        assert to_sexpr(block) == '{(set x (^ 2 3)) (call show x "y") (if x {(call a)} {(call b)})}'

    def test_rejects_non_nodes(self):
        with pytest.raises(TypeError):
            to_sexpr("not a node")

    def test_long_number(self):
        digits = "1" * 5000
        assert to_sexpr(parse_expression(digits + " + 1")) == f"(+ {digits} 1)"
