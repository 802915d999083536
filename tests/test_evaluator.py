import unittest
import math
from pratt.frontend.lexer import Operator, tokenize
from pratt.frontend.expr import Atom, Operation
from pratt.frontend.parser import parse
from pratt.backend.evaluator import divide, evaluate

def calc(src):
    return evaluate(parse(tokenize(src, lambda message: None)))

class TestEvaluator(unittest.TestCase):
    def test_atom(self):
        self.assertEqual(evaluate(Atom(42.0)), 42.0)

    def test_operation(self):
        self.assertEqual(evaluate(Operation(Atom(6.0), Operator.SUB, Atom(4.5))), 1.5)

    def test_eval_expressions(self):
        self.assertEqual(calc('1 * 2 + 3'), 5.0)
        self.assertEqual(calc('1 + 2 * 3'), 7.0)
        self.assertEqual(calc('(1 + 2) * 3'), 9.0)
        self.assertEqual(calc('8 - 3 - 2'), 3.0)
        self.assertEqual(calc('16 / 4 / 2'), 2.0)
        self.assertEqual(calc('2 * (3 + (4 - 1)) / 4'), 3.0)
        self.assertEqual(calc('0.5 + 0.25'), 0.75)

    def test_unknown_characters_are_ignored(self):
        self.assertEqual(calc('1 @ + 2'), 3.0)

    def test_division_by_zero(self):
        self.assertEqual(calc('1 / 0'), math.inf)
        self.assertEqual(calc('(0 - 1) / 0'), -math.inf)
        self.assertTrue(math.isnan(calc('0 / 0')))

    def test_divide_follows_ieee_signs(self):
        self.assertEqual(divide(1.0, -0.0), -math.inf)
        self.assertEqual(divide(-1.0, -0.0), math.inf)
        self.assertTrue(math.isnan(divide(math.nan, 0.0)))
        self.assertEqual(divide(math.inf, 0.0), math.inf)
        self.assertEqual(divide(3.0, 2.0), 1.5)

    def test_long_chain(self):
        self.assertEqual(calc('1' + ' + 1' * 3000), 3001.0)
        self.assertEqual(calc('1' + ' - 1' * 3000), -2999.0)
        self.assertEqual(calc('2' + ' * 1 + 1' * 2500), 2502.0)

    def test_negative_zero(self):
        self.assertEqual(math.copysign(1.0, calc('0 * (0 - 1)')), -1.0)

    def test_infinity_propagates(self):
        self.assertEqual(calc('1 / 0 + 5'), math.inf)
        self.assertTrue(math.isnan(calc('1 / 0 - 1 / 0')))

if __name__ == '__main__':
    unittest.main()
