from __future__ import annotations
from typing import Iterable, List, TextIO
import argparse as arg
import logging
import sys

from calc.backend.evaluator import evaluate
from calc.config import CalcConfig
from calc.errors import CalcError
from calc.frontend.parser import parse, parse_stream
from calc.log import setup_logging

logger = logging.getLogger(__name__)

def calculate(src: str) -> int:
    return evaluate(parse(src))

def evaluate_stream(stream: TextIO) -> int:
    """Evaluates the first line of `stream`, the newline ends the expression."""
    tree = parse_stream(stream)
    logger.debug('tree:\n%s', tree)
    return evaluate(tree)

def _prompt_lines(prompt: str) -> Iterable[str]:
    import readline # line editing for input()
    try:
        while (src := input(prompt)):
            yield src
    except EOFError:
        pass

def repl(config: CalcConfig, lines: Iterable[str]|None = None, out: TextIO|None = None) -> int:
    """One expression per line until EOF or an empty line, errors don't stop the loop."""
    out = out or sys.stdout
    failures = 0
    for src in (lines if lines is not None else _prompt_lines(config.prompt)):
        src = src.rstrip('\n')
        if not src:
            break
        try:
            print(calculate(src), file=out)
        except CalcError as e:
            failures += 1
            print(f"Error: {e.message}", file=sys.stderr)
    logger.debug(f'repl done, {failures} failed expression(s)')
    return 0

def build_arg_parser() -> arg.ArgumentParser:
    parser = arg.ArgumentParser(
        prog='calc',
        description='Evaluates one integer arithmetic expression read from stdin',
        epilog='Operators: + - * / ( ) and unary minus. Division truncates toward zero.')

    parser.add_argument('-e', '--expression', dest='expression', default=None,
                        help='evaluate EXPRESSION instead of reading a line from stdin')
    parser.add_argument('-i', '--interactive', dest='interactive', action='store_true', default=False)
    parser.add_argument('-t', '--trace', dest='trace', action='store_true', default=False,
                        help='print every recognized token on stderr')
    parser.add_argument('--log-level', dest='log_level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser

def main(argv: List[str]|None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    config = CalcConfig(trace=args.trace, log_level=args.log_level)
    setup_logging(config.effective_level())

    if args.interactive:
        return repl(config)

    try:
        if args.expression is not None:
            value = calculate(args.expression)
        else:
            value = evaluate_stream(sys.stdin)
    except CalcError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(value)
    return 0
