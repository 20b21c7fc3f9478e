"""tinyscript parser — converts a token list into an AST."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

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
from tinyscript.errors import ParseError
from tinyscript.lexer import tokenize
from tinyscript.stream import TokenStream
from tinyscript.tokens import Span, Token, TokenType


class Assoc(Enum):
    LEFT = auto()
    RIGHT = auto()


# symbol -> (level, associativity); higher levels bind tighter
OPERATORS: dict[str, tuple[int, Assoc]] = {
    "<": (1, Assoc.LEFT),
    "<=": (1, Assoc.LEFT),
    ">": (1, Assoc.LEFT),
    ">=": (1, Assoc.LEFT),
    "==": (1, Assoc.LEFT),
    "!=": (1, Assoc.LEFT),
    "+": (2, Assoc.LEFT),
    "-": (2, Assoc.LEFT),
    "*": (3, Assoc.LEFT),
    "/": (3, Assoc.LEFT),
    "%": (3, Assoc.LEFT),
    "^": (4, Assoc.RIGHT),
}


class Parser:
    """Recursive descent parser for tinyscript token lists.

    Every ``parse_*`` method returns a node, or None when the leading tokens
    do not begin that construct. A None result never consumes tokens, so the
    caller is free to try the next alternative. Once a construct has
    committed (its leading token matched) any missing piece raises
    ParseError.
    """

    def __init__(self, tokens: list[Token], source: str, filename: str = "input.tiny") -> None:
        self._stream = TokenStream(tokens)
        self._source = source
        self._filename = filename

    @property
    def stream(self) -> TokenStream:
        return self._stream

    # ------------------------------------------------------------------
    # Program
    # ------------------------------------------------------------------

    def parse_program(self) -> Block:
        """Parse the whole input as a statement list and return the root Block."""
        self._skip_leading_whitespace()
        start = self._stream.location().start
        statements = self._parse_statements()
        if not self._stream.exhausted:
            raise self._error("expected statement")
        return Block(tuple(statements), Span(start, self._stream.end))

    def parse_single_expression(self) -> Expression:
        """Parse the whole input as exactly one expression."""
        self._skip_leading_whitespace()
        expr = self.parse_expression()
        if expr is None:
            raise self._error("expected expression")
        if not self._stream.exhausted:
            raise self._error("unexpected token after expression")
        return expr

    def _skip_leading_whitespace(self) -> None:
        # Whitespace before the first token lexes as a single char token
        if self._stream.index == 0:
            self._stream.consume_if(TokenType.CHAR, str.isspace)

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def parse_body(self) -> Block | None:
        block = self.parse_block()
        if block is not None:
            return block
        return self.parse_simple_block()

    def parse_block(self) -> Block | None:
        open_tok = self._stream.consume_if(TokenType.CHAR, "{")
        if open_tok is None:
            return None
        statements = self._parse_statements()
        close_tok = self._expect_char("}", "expected '}' to close block")
        return Block(tuple(statements), Span(open_tok.span.start, close_tok.span.end))

    def parse_simple_block(self) -> Block | None:
        statement = self.parse_statement()
        if statement is None:
            return None
        return Block((statement,), statement.span)

    def _parse_statements(self) -> list[Statement]:
        statements: list[Statement] = []
        while True:
            statement = self.parse_statement()
            if statement is None:
                return statements
            statements.append(statement)
            self._stream.consume_if(TokenType.CHAR, ";")

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def parse_statement(self) -> Statement | None:
        # Keyword forms first, so "if"/"set" never parse as a callee
        statement: Statement | None = self.parse_if()
        if statement is None:
            statement = self.parse_assignment()
        if statement is None:
            statement = self.parse_call_statement()
        return statement

    def parse_assignment(self) -> Assignment | None:
        set_tok = self._stream.consume_if(TokenType.WORD, "set")
        if set_tok is None:
            return None
        target = self._stream.consume_if(TokenType.WORD)
        if target is None:
            raise self._error("expected variable name after 'set'")
        if self._stream.consume_if(TokenType.WORD, "to") is None:
            raise self._error("expected 'to' after variable name")
        value = self.parse_expression()
        if value is None:
            raise self._error("expected expression after 'to'")
        return Assignment(str(target.value), value, Span(set_tok.span.start, value.span.end))

    def parse_call_statement(self) -> CallStatement | None:
        callee = self.parse_expression()
        if callee is None:
            return None

        if self._at_statement_end():
            return CallStatement(callee, (), callee.span)

        self._expect_char("(", "expected '(' after call target")
        arguments: list[Expression] = []
        first = self.parse_expression()
        if first is not None:
            arguments.append(first)
            while self._stream.consume_if(TokenType.CHAR, ",") is not None:
                arg = self.parse_expression()
                if arg is None:
                    raise self._error("expected expression after ','")
                arguments.append(arg)
        close_tok = self._expect_char(")", "expected ')' to close argument list")
        return CallStatement(callee, tuple(arguments), Span(callee.span.start, close_tok.span.end))

    def parse_if(self) -> IfStatement | None:
        if_tok = self._stream.consume_if(TokenType.WORD, "if")
        if if_tok is None:
            return None
        condition = self.parse_expression()
        if condition is None:
            raise self._error("expected condition after 'if'")
        then_block = self.parse_body()
        if then_block is None:
            raise self._error("expected block after condition")

        else_block = None
        if self._stream.consume_if(TokenType.WORD, "else") is not None:
            else_block = self.parse_body()
            if else_block is None:
                raise self._error("expected block after 'else'")

        last = else_block if else_block is not None else then_block
        return IfStatement(condition, then_block, else_block, Span(if_tok.span.start, last.span.end))

    def _at_statement_end(self) -> bool:
        """True if the current token may directly follow a complete statement."""
        tok = self._stream.current()
        if tok is None:
            return True
        if tok.type is TokenType.CHAR:
            return tok.value in (";", "}")
        return tok.type is TokenType.WORD and tok.value == "else"

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def parse_expression(self, min_level: int = 0) -> Expression | None:
        """Precedence climbing over OPERATORS.

        Only operators whose level exceeds *min_level* are folded in here;
        anything weaker is left for an outer call.
        """
        left = self.parse_atom()
        if left is None:
            return None

        while True:
            op = self._peek_operator()
            if op is None:
                return left
            symbol, width = op
            level, assoc = OPERATORS[symbol]
            if level <= min_level:
                return left

            for _ in range(width):
                self._stream.consume()
            right = self.parse_expression(level - 1 if assoc is Assoc.RIGHT else level)
            if right is None:
                raise self._error(f"expected expression after operator '{symbol}'")
            left = BinaryOp(symbol, left, right, Span(left.span.start, right.span.end))

    def parse_atom(self) -> Expression | None:
        tok = self._stream.consume_if(TokenType.STRING)
        if tok is not None:
            return StringLiteral(tok)
        tok = self._stream.consume_if(TokenType.NUMBER)
        if tok is not None:
            return NumberLiteral(tok)
        tok = self._stream.consume_if(TokenType.WORD)
        if tok is not None:
            return Identifier(tok)
        return None

    def _peek_operator(self) -> tuple[str, int] | None:
        """Return (symbol, token count) for an operator at the cursor, without consuming."""
        tok = self._stream.current()
        if tok is None or tok.type is not TokenType.CHAR:
            return None
        nxt = self._stream.peek()
        if not tok.trivia and nxt is not None and nxt.type is TokenType.CHAR:
            pair = f"{tok.value}{nxt.value}"
            if pair in OPERATORS:
                return pair, 2
        if tok.value in OPERATORS:
            return str(tok.value), 1
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _expect_char(self, ch: str, message: str) -> Token:
        tok = self._stream.consume_if(TokenType.CHAR, ch)
        if tok is None:
            raise self._error(message)
        return tok

    def _error(self, message: str) -> ParseError:
        tok = self._stream.current()
        received = tok.display if tok is not None else None
        return ParseError(message, self._stream.location(), received, self._source, self._filename)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of try_parse: exactly one of value and error is set."""

    value: Block | None
    error: ParseError | None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Block:
        """Return the parsed Block, re-raising the ParseError on failure."""
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


def parse(source: str, filename: str = "input.tiny") -> Block:
    """Convenience function: parse source text and return the root Block."""
    tokens = tokenize(source)
    return Parser(tokens, source, filename).parse_program()


def try_parse(source: str, filename: str = "input.tiny") -> ParseResult:
    """Parse source text, returning the failure as a value instead of raising."""
    try:
        return ParseResult(parse(source, filename), None)
    except ParseError as exc:
        return ParseResult(None, exc)


def parse_expression(source: str, filename: str = "input.tiny") -> Expression:
    """Parse source text that must consist of exactly one expression."""
    tokens = tokenize(source)
    return Parser(tokens, source, filename).parse_single_expression()
