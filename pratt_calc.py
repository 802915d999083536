#!/usr/bin/env python3

from __future__ import annotations
import argparse as arg
import sys
from typing import TextIO
from pratt.frontend.lexer import Reporter, format_number, print_error, tokenize
from pratt.frontend.parser import ParseError, parse
from pratt.backend.evaluator import evaluate

def run_line(src: str, show_tokens: bool = False, show_ast: bool = False,
             out: TextIO|None = None, report: Reporter = print_error) -> bool:
    if out is None:
        out = sys.stdout
    lexer = tokenize(src, report)

    try:
        if show_tokens:
            listing = lexer.clone()
            listing.report = lambda message: None # parse() reports them
            for tok in listing:
                print(tok, file=out)
        tree = parse(lexer)
    except ValueError as err: # Lexer produced a number float() rejects
        report(f'....Internal error: {err}')
        return False

    if isinstance(tree, ParseError):
        print(tree, file=out)
        return False

    if show_ast:
        print(tree, file=out)
    print(format_number(evaluate(tree)), file=out)
    return True

def repl(args) -> None:
    import readline # Line editing for input()

    print("Starting REPL. Ctrl+D to quit")
    try:
        while True:
            src = input(args.prompt).strip()
            if src:
                run_line(src, args.tokens, args.ast)
    except EOFError:
        print()

def main(argv=None) -> int:
    parser = arg.ArgumentParser(
        prog='pratt-calc',
        description='Evaluates arithmetic expressions over floating-point numbers',
        epilog='Operators: + - * / and parentheses')

    parser.add_argument('expression', nargs='*',
                        help='expression to evaluate once; starts a REPL if omitted')
    parser.add_argument('-t', '--tokens', dest='tokens', action='store_true', default=False,
                        help='list the tokens of each line before parsing it')
    parser.add_argument('-a', '--ast', dest='ast', action='store_true', default=False,
                        help='print the parsed tree in prefix form')
    parser.add_argument('-p', '--prompt', dest='prompt', default='>> ')
    args = parser.parse_args(argv)

    if args.expression:
        ok = run_line(' '.join(args.expression), args.tokens, args.ast)
        return 0 if ok else 1

    repl(args)
    return 0

if __name__ == '__main__':
    sys.exit(main())
