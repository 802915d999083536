from __future__ import annotations
from typing import Iterable, Iterator
from pratt.frontend.lexer import Token, TokenId
from pratt.frontend.expr import Atom, Operation, Expr

# Precedence climbing:
#   1   *   ( 2 + 3 )   -   4
#  lhs
#      op  -> parse_expr(10 + 1) reads the parenthesised group as an atom
#                       ^ '-' binds looser than 11, so lhs = (* 1 (+ 2 3))
#                           and the loop at level 0 picks '-' up next

class ParseError(Exception):
    def __init__(self, message: str, token: Token|None = None) -> None:
        super().__init__(message)
        self.message = message
        self.token = token

    def __str__(self) -> str:
        return f'....Err: {self.message}'

class TokenStream:
    """Token cursor with a single token of lookahead."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens: Iterator[Token] = iter(tokens)
        self.lookahead: Token|None = None

    def look(self) -> Token|None:
        if self.lookahead is None:
            self.lookahead = next(self.tokens, None)
        return self.lookahead

    def next(self) -> Token|None:
        tok = self.look()
        self.lookahead = None
        return tok

def parse_atom(stream: TokenStream) -> Expr:
    tok = stream.next()
    if tok is None:
        raise ParseError('nothing to parse')
    if tok.token_id == TokenId.NUMBER:
        return Atom(tok.value)
    if tok.token_id == TokenId.OP:
        raise ParseError('an atom is expected', tok)
    if tok.token_id == TokenId.RBRACE_RIGHT:
        raise ParseError('right parenthesis not expected', tok)

    inner = parse_expr(stream, 0)
    closing = stream.next()
    if closing is None:
        raise ParseError('right parenthesis expected, found nothing')
    if closing.token_id != TokenId.RBRACE_RIGHT:
        raise ParseError('right parenthesis expected', closing)
    return inner

def parse_expr(stream: TokenStream, min_precedence: int = 0) -> Expr:
    lhs = parse_atom(stream)

    while (tok := stream.look()) is not None:
        if tok.token_id == TokenId.RBRACE_RIGHT:
            break
        if tok.token_id != TokenId.OP:
            raise ParseError('an operation is expected', tok)
        op = tok.value
        if op.precedence < min_precedence:
            break
        stream.next()
        # +1 so that an operator of equal precedence ends the rhs: 1 - 2 - 3 is (1 - 2) - 3
        rhs = parse_expr(stream, op.precedence + 1)
        lhs = Operation(lhs, op, rhs)

    return lhs

def parse(tokens: Iterable[Token]) -> Expr|ParseError:
    """Build the expression tree for a whole line of tokens.

    Failures are returned, not raised: the result is either the tree or the
    ParseError describing why the line was rejected.
    """
    stream = TokenStream(tokens)
    try:
        tree = parse_expr(stream, 0)
        leftover = stream.look()
        if leftover is not None:
            raise ParseError('right parenthesis not expected', leftover)
    except ParseError as err:
        return err
    except RecursionError:
        return ParseError('expression is nested too deeply')
    return tree
