#!/usr/bin/env python3
"""
exprparse command-line harness
==============================

Runs one or all parsing methods over a list of expressions and prints the
resulting trees in prefix form.

Usage:
    exprparse METHOD [options]

    METHOD is one of naive, tree-rewriting, tree-rewriting-complete, pratt,
    or all.

Options:
    -e EXPR, --expression EXPR  Parse EXPR instead of the demo corpus (repeatable)
    -f FILE, --file FILE        Parse each non-blank line of FILE
    --compare                   Flag trees that differ from the pratt tree
    --tokens                    Show the token stream for each expression
    --warnings                  Report skipped characters and broken trees on stderr
"""

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, TextIO

from .lexer import Lexer
from .parser import (
    PARSE_METHODS, REFERENCE_METHOD, get_parser_class, print_tree, validate_tree
)


DEMO_EXPRESSIONS = [
    "a + b + c + d",
    "a - b + c",
    "a + b * c + d",
    "a / b - c",
    "a / b * c",
    "a / b * c + d",
    "a * b + c + d",
    "a * b * c * d",
]

ALL_METHODS = "all"


@dataclass
class RunConfiguration:
    """Configuration for a harness run"""
    methods: List[str] = field(default_factory=lambda: [REFERENCE_METHOD])
    expressions: List[str] = field(default_factory=lambda: list(DEMO_EXPRESSIONS))
    filename: str = "<demo>"

    # Output options
    compare: bool = False           # Mark trees that differ from the reference method
    show_tokens: bool = False
    show_warnings: bool = False


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprparse",
        description="Compare four ways of parsing infix expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    exprparse pratt                          # Demo corpus, precedence climbing
    exprparse naive -e "a * b + c"           # One expression, naive parser
    exprparse all --compare                  # Every method, divergences marked
        """
    )

    method_help = "; ".join(f"{name}: {cls.description}" for name, cls in PARSE_METHODS.items())
    parser.add_argument('method', choices=list(PARSE_METHODS) + [ALL_METHODS],
                        metavar='METHOD',
                        help=f'{method_help}; {ALL_METHODS}: every method in turn')

    # Input options
    parser.add_argument('-e', '--expression', action='append', dest='expressions',
                        metavar='EXPR',
                        help='expression to parse (repeatable, replaces the demo corpus)')
    parser.add_argument('-f', '--file', type=Path,
                        help='read expressions from FILE, one per line')

    # Output options
    parser.add_argument('--compare', action='store_true',
                        help=f'flag trees that differ from the {REFERENCE_METHOD} tree')
    parser.add_argument('--tokens', action='store_true',
                        help='show the token stream for each expression')
    parser.add_argument('--warnings', action='store_true',
                        help='report skipped characters and broken trees on stderr')
    return parser


def build_config(argv: Optional[List[str]] = None) -> RunConfiguration:
    """Parse command-line arguments into a RunConfiguration."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    config = RunConfiguration(
        compare=args.compare,
        show_tokens=args.tokens,
        show_warnings=args.warnings,
    )

    if args.method == ALL_METHODS:
        config.methods = list(PARSE_METHODS)
    else:
        config.methods = [args.method]

    expressions: List[str] = []
    if args.file is not None:
        try:
            text = args.file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            parser.error(f"cannot read {args.file}: {e}")
        expressions.extend(line.strip() for line in text.splitlines() if line.strip())
        config.filename = str(args.file)
    if args.expressions:
        expressions.extend(args.expressions)
        if args.file is None:
            config.filename = "<argv>"

    if expressions:
        config.expressions = expressions

    return config


def run(config: RunConfiguration, out: Optional[TextIO] = None,
        err: Optional[TextIO] = None) -> int:
    """
    Parse every configured expression with every configured method.

    Args:
        config: What to parse and how to report it
        out: Stream for trees (defaults to stdout)
        err: Stream for diagnostics (defaults to stderr)

    Returns:
        Exit status: 1 if `compare` is on and some tree differs from the
        reference tree, 0 otherwise
    """
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr
    divergent = 0

    for method in config.methods:
        parser_class = get_parser_class(method)
        print(f"--- Method: {method}", file=out)

        for number, source in enumerate(config.expressions, start=1):
            lexer = Lexer(source, config.filename)
            tokens = lexer.tokenize()
            tree = parser_class(tokens).parse()
            rendered = print_tree(tree)

            print(f"=== Test #{number:02d}: {source}", file=out)
            if config.show_tokens:
                print("    tokens: " + " ".join(str(token) for token in tokens), file=out)
            print(rendered, file=out)

            if config.compare and method != REFERENCE_METHOD:
                expected = print_tree(get_parser_class(REFERENCE_METHOD)(tokens).parse())
                if rendered != expected:
                    divergent += 1
                    print(f"    differs from {REFERENCE_METHOD}: {expected}", file=out)

            if config.show_warnings:
                for warning in lexer.warnings:
                    print(str(warning), file=err, end="")
                for warning in validate_tree(tree):
                    print(str(warning), file=err, end="")

            print(file=out)

    if config.compare:
        checked = len(config.expressions) * len(
            [m for m in config.methods if m != REFERENCE_METHOD])
        print(f"{divergent} of {checked} trees differ from {REFERENCE_METHOD}", file=out)

    return 1 if divergent else 0


def main(argv: Optional[List[str]] = None):
    """Main entry point for the harness"""
    config = build_config(argv)
    sys.exit(run(config))


if __name__ == "__main__":
    main()
