from __future__ import annotations
import sys
from typing import List, Optional
from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser, TraceHook
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json_text
from ast_viz import write_and_render


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token], trace: Optional[TraceHook] = None) -> ProgramNode:
    """Parse tokens into AST."""
    parser = Parser(tokens, trace=trace)
    return parser.parse()


def print_trace(pos: int, token: Token) -> None:
    """Trace hook that reports each term dispatch on stderr."""
    print(f"[parse] {pos:4}: {token!r}", file=sys.stderr)


def process_program(
    text: str,
    *,
    print_tokens: bool = True,
    print_ast: bool = True,
    print_json: bool = False,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    trace: bool = False,
) -> Optional[ProgramNode]:
    """Process a single program: lex, parse and optionally print each stage.

    Tokens are printed before parsing starts, so they are still shown when
    the parse fails. Returns the Program node, or None on a syntax error.
    """
    try:
        tokens = lex(text)
        if print_tokens:
            print(f"Tokens ({len(tokens)}):")
            print(PrettyPrinter.print_tokens(tokens))

        ast = parse_tokens(tokens, trace=print_trace if trace else None)
    except SyntaxError as e:
        print(f"Syntax Error: {e}")
        return None

    if print_ast:
        print("\nAST:")
        print(PrettyPrinter.print_ast(ast))

    if print_json:
        print("\nAST (JSON):")
        print(ast_to_json_text(ast))

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            write_and_render(ast, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    return ast


def interactive_mode(
    print_tokens: bool = True,
    print_ast: bool = True,
    print_json: bool = False,
    trace: bool = False,
) -> None:
    """Run interactive parser REPL reading programs from stdin."""
    print("\nInteractive Parser Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter program: ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            process_program(
                text,
                print_tokens=print_tokens,
                print_ast=print_ast,
                print_json=print_json,
                trace=trace,
            )

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Tokenize and parse a program from a file or interactively from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--no-tokens",
        dest="print_tokens",
        action="store_false",
        help="Do not print the token dump",
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--json", dest="print_json", action="store_true", help="Print the AST as JSON"
    )
    parser.add_argument(
        "--trace",
        dest="trace",
        action="store_true",
        help="Report every term the parser dispatches on (stderr)",
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    args = parser.parse_args(argv)

    if args.interactive:
        interactive_mode(
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            print_json=args.print_json,
            trace=args.trace,
        )
        return 0

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1

        ast = process_program(
            text,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            print_json=args.print_json,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
            trace=args.trace,
        )
        return 0 if ast is not None else 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
