from __future__ import annotations
import math
from pratt.frontend.lexer import Operator
from pratt.frontend.expr import Atom, Expr

def divide(x: float, y: float) -> float:
    # Python raises on a zero divisor, IEEE-754 gives inf or nan
    if y == 0.0:
        if x == 0.0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y

op_map = {
    Operator.ADD: lambda x, y: x + y,
    Operator.SUB: lambda x, y: x - y,
    Operator.MUL: lambda x, y: x * y,
    Operator.DIV: divide,
}

def evaluate(tree: Expr) -> float:
    # Post-order walk on an explicit stack, trees can be thousands of nodes deep
    values = []
    stack = [tree]
    while stack:
        item = stack.pop()
        if isinstance(item, Atom):
            values.append(item.value)
        elif isinstance(item, Operator):
            rhs = values.pop()
            lhs = values.pop()
            values.append(op_map[item](lhs, rhs))
        else:
            stack.extend([item.op, item.right, item.left])
    return values.pop()
