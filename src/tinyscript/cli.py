"""Command-line interface for tinyscript."""

from __future__ import annotations

import argparse
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tinyscript.errors import ParseError


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    show_tokens: bool
    show_trivia: bool
    indent: int


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="tinyscript",
        description="Parse a tinyscript file and print its syntax tree",
    )
    p.add_argument("input", help="Input .tiny file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--tokens",
        action="store_true",
        default=None,
        help="Print the token list before the tree",
    )
    p.add_argument(
        "--trivia",
        action="store_true",
        default=None,
        help="Include trailing whitespace in the token list",
    )
    p.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help="Spaces per tree level (default: 2)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover tinyscript.toml)",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "tinyscript.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    show_tokens = False
    show_trivia = False
    indent = 2
    cfg_dump = config.get("dump")
    if isinstance(cfg_dump, dict):
        if isinstance(cfg_dump.get("tokens"), bool):
            show_tokens = cfg_dump["tokens"]
        if isinstance(cfg_dump.get("trivia"), bool):
            show_trivia = cfg_dump["trivia"]
        cfg_indent = cfg_dump.get("indent")
        if isinstance(cfg_indent, int) and not isinstance(cfg_indent, bool):
            indent = cfg_indent

    if args.tokens is not None:
        show_tokens = args.tokens
    if args.trivia is not None:
        show_trivia = args.trivia
    if args.indent is not None:
        indent = args.indent

    if indent < 0:
        raise argparse.ArgumentTypeError(f"indent must not be negative: {indent}")

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        show_tokens=show_tokens,
        show_trivia=show_trivia,
        indent=indent,
    )


def parse_file(options: CliOptions) -> str:
    """Read and parse a tinyscript file, returning the requested dumps as text."""
    from tinyscript.debug import dump_ast, dump_tokens
    from tinyscript.lexer import tokenize
    from tinyscript.parser import Parser

    source = options.input_file.read_text(encoding="utf-8")
    filename = str(options.input_file)
    tokens = tokenize(source)

    out = io.StringIO()
    if options.show_tokens:
        dump_tokens(tokens, file=out, show_trivia=options.show_trivia)
        out.write("\n")

    program = Parser(tokens, source, filename).parse_program()
    dump_ast(program, file=out, indent=options.indent)
    return out.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        text = parse_file(options)
    except ParseError as exc:
        print(exc.format(), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)

    return 0
