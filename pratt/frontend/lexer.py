from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Callable, Iterator
import copy
import math
import sys

Reporter = Callable[[str], None]

class Operator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

    @property
    def precedence(self) -> int:
        if self in (Operator.ADD, Operator.SUB):
            return 5
        return 10

    def __str__(self) -> str:
        return self.value

class TokenId(Enum):
    NUMBER = auto()
    OP = auto()
    RBRACE_LEFT = auto()
    RBRACE_RIGHT = auto()

@dataclass(frozen=True)
class Token:
    token_id: TokenId
    value: float|Operator|None = None

    def __str__(self) -> str:
        if self.token_id == TokenId.NUMBER:
            return f'....S: Number: {format_number(self.value)}'
        if self.token_id == TokenId.OP:
            return f'....S: Op: {self.value}'
        if self.token_id == TokenId.RBRACE_LEFT:
            return '....S: LeftParen'
        return '....S: RightParen'

def format_number(value: float) -> str:
    """Render a float without a trailing '.0' when it holds an integer."""
    if value == 0.0 and math.copysign(1.0, value) < 0:
        return '-0'
    return str(int(value)) if value.is_integer() else repr(value)

def print_error(message: str) -> None:
    print(message, file=sys.stderr)

_single_char_tokens = {
    '+': Token(TokenId.OP, Operator.ADD),
    '-': Token(TokenId.OP, Operator.SUB),
    '*': Token(TokenId.OP, Operator.MUL),
    '/': Token(TokenId.OP, Operator.DIV),
    '(': Token(TokenId.RBRACE_LEFT),
    ')': Token(TokenId.RBRACE_RIGHT),
}

def _is_digit(c: str) -> bool:
    return '0' <= c <= '9'

class Lexer:
    """Lazy scanner turning a string into tokens, one per call to next().

    Unknown characters are skipped and handed to `report`, scanning goes on.
    A lexer is a cursor: clone() it to look ahead without disturbing it.
    """

    def __init__(self, src: str, report: Reporter = print_error) -> None:
        self.src = src
        self.pos = 0
        self.report = report

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        while (c := self.peek()) is not None:
            if c in _single_char_tokens:
                self.pos += 1
                return _single_char_tokens[c]
            if _is_digit(c):
                return Token(TokenId.NUMBER, self.read_number())
            self.pos += 1
            if not c.isspace():
                self.report(f'.... {c} is unknown (skipped)')
        raise StopIteration

    def peek(self) -> str|None:
        return self.src[self.pos] if self.pos < len(self.src) else None

    def clone(self) -> Lexer:
        return copy.copy(self)

    def read_digits(self) -> str:
        start = self.pos
        while (c := self.peek()) is not None and _is_digit(c):
            self.pos += 1
        return self.src[start:self.pos]

    def read_number(self) -> float:
        text = self.read_digits()
        if self.peek() == '.':
            self.pos += 1
            text += '.' + self.read_digits()
        # Only digits and a single dot get here, a ValueError is a bug
        return float(text)

def tokenize(src: str, report: Reporter = print_error) -> Lexer:
    return Lexer(src, report)
