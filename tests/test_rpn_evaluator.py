import math
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core.errors import CalcMathError, CalcSyntaxError
from core.operators import Operators
from core.rpn_evaluator import RPNEvaluator, evaluate_rpn


class TestRPNEvaluator(unittest.TestCase):
    def test_arithmetic(self):
        self.assertEqual(evaluate_rpn("2 3 4 * +"), 14.0)
        self.assertEqual(evaluate_rpn("2 3 + 4 *"), 20.0)

    def test_operand_order(self):
        self.assertEqual(evaluate_rpn("5 2 -"), 3.0)
        self.assertEqual(evaluate_rpn("8 2 /"), 4.0)

    def test_unary_minus(self):
        self.assertEqual(evaluate_rpn("3 u"), -3.0)
        self.assertEqual(evaluate_rpn("3 5 u -"), 8.0)

    def test_functions(self):
        self.assertAlmostEqual(evaluate_rpn("1 sin"), math.sin(1))
        self.assertAlmostEqual(evaluate_rpn("1 ctg"), 1 / math.tan(1))
        self.assertEqual(evaluate_rpn("16 sqrt"), 4.0)

    def test_returns_plain_float(self):
        self.assertIs(type(RPNEvaluator.evaluate("1.5")), float)

    def test_math_errors(self):
        for text in ["4 0 /", "0 ln", "1 u ln", "1 u sqrt", "0 ctg"]:
            with self.assertRaises(CalcMathError):
                evaluate_rpn(text)

    def test_stack_underflow(self):
        for text in ["2 +", "u", "sqrt", "+"]:
            with self.assertRaises(CalcSyntaxError):
                evaluate_rpn(text)

    def test_leftover_values(self):
        with self.assertRaises(CalcSyntaxError):
            evaluate_rpn("1 2")

    def test_empty_expression(self):
        with self.assertRaises(CalcSyntaxError):
            evaluate_rpn("")

    def test_unknown_symbol(self):
        with self.assertRaises(CalcSyntaxError):
            evaluate_rpn("1 2 %")


class TestOperators(unittest.TestCase):
    def test_division_by_exact_zero_only(self):
        self.assertEqual(Operators.div(1.0, 4.0), 0.25)
        with self.assertRaises(CalcMathError):
            Operators.div(1.0, -0.0)

    def test_domain_boundaries(self):
        self.assertEqual(Operators.sqrt(0.0), 0.0)
        self.assertEqual(Operators.ln(1.0), 0.0)
        with self.assertRaises(CalcMathError):
            Operators.ln(-2.0)

    def test_negation(self):
        self.assertEqual(Operators.neg(2.5), -2.5)


if __name__ == "__main__":
    unittest.main()
