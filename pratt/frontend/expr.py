from __future__ import annotations
from dataclasses import dataclass
from typing import Union
from pratt.frontend.lexer import Operator, format_number

@dataclass(frozen=True)
class Atom:
    value: float

    def __str__(self) -> str:
        return format_number(self.value)

@dataclass(frozen=True)
class Operation:
    left: Expr
    op: Operator
    right: Expr

    def __str__(self) -> str:
        return render(self)

Expr = Union[Atom, Operation]

def render(tree: Expr) -> str:
    """Prefix form of a tree, e.g. (+ 1 (* 2 3)).

    Walks with an explicit stack: a long chain like 1 + 1 + ... + 1 is as
    deep as it is long.
    """
    parts = []
    stack = [tree]
    while stack:
        item = stack.pop()
        if isinstance(item, Operation):
            stack.extend([')', item.right, ' ', item.left, ' ', f'({item.op}'])
        else:
            parts.append(str(item))
    return ''.join(parts)
