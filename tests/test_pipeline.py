import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from unittest import mock

from config.config import LEXER_CONFIG
from core import (
    CalcMathError, CalcSyntaxError, ExpressionCalculator, Status, evaluate_expression, run_pipeline, validate
)


class TestEvaluateExpression(unittest.TestCase):
    def setUp(self):
        self.calculator = ExpressionCalculator()

    def assertResult(self, expression, expected):
        result = self.calculator.calculate(expression)
        self.assertEqual(result.status, Status.SUCCESS, result.message)
        self.assertEqual(self.calculator.format_result(result.value), expected)

    def assertStatus(self, expression, status):
        self.assertEqual(self.calculator.calculate(expression).status, status)

    def test_precedence(self):
        self.assertResult("2 + 3 * 4", "14.000000")
        self.assertResult("(2 + 3) * 4", "20.000000")

    def test_unary_minus(self):
        self.assertResult("-3 + 5", "2.000000")
        self.assertResult("3 - -5", "8.000000")
        self.assertResult("- -3", "3.000000")
        self.assertResult("-(2+3)", "-5.000000")
        self.assertResult("2*-3", "-6.000000")

    def test_functions(self):
        self.assertResult("sqrt(16)", "4.000000")
        self.assertResult("-sqrt(16)", "-4.000000")
        self.assertResult("cos(0) + sin(0)", "1.000000")
        self.assertResult("ln(1)", "0.000000")
        self.assertResult("ctg(1)", "0.642093")

    def test_math_errors(self):
        for expression in ["ln(0)", "sqrt(-1)", "4 / 0", "ln(-2)", "ctg(0)", "1/(2-2)"]:
            self.assertStatus(expression, Status.MATH_ERROR)

    def test_syntax_errors(self):
        for expression in ["2 + ", "(2 + 3", "2 3", "2 + + 3", ")(", "1.2.3", "x + 1", "", "2 % 3"]:
            self.assertStatus(expression, Status.SYNTAX_ERROR)

    def test_whitespace_is_irrelevant(self):
        self.assertEqual(self.calculator.calculate("2+3"), self.calculator.calculate("  2 + 3  "))

    def test_repeated_evaluation_is_deterministic(self):
        expression = "sin(2) * (3.5 - -ln(7)) / 4"
        self.assertEqual(evaluate_expression(expression), evaluate_expression(expression))

    def test_result_carries_postfix(self):
        result = self.calculator.calculate("2 + 3 * 4")
        self.assertTrue(result.ok)
        self.assertEqual(result.postfix, "2 3 4 * +")

    def test_failure_carries_message(self):
        result = self.calculator.calculate("4 / 0")
        self.assertIsNone(result.value)
        self.assertEqual(result.message, "division by zero")

    def test_evaluate_expression_raises(self):
        with self.assertRaises(CalcMathError):
            evaluate_expression("4/0")
        with self.assertRaises(CalcSyntaxError):
            evaluate_expression("(2")

    def test_prefix_operators_in_sequence(self):
        self.assertResult("-sin(1)", "-0.841471")
        self.assertResult("- -3", "3.000000")

    def test_typed_u_is_not_unary_minus(self):
        self.assertEqual(validate("u 5")[0].text, "u")
        self.assertStatus("u5", Status.SYNTAX_ERROR)

    def test_run_pipeline_returns_postfix_and_value(self):
        postfix, value = run_pipeline("(2 + 3) * 4")
        self.assertEqual([t.text for t in postfix], ["2", "3", "+", "4", "*"])
        self.assertEqual(value, 20.0)

    def test_non_finite_result_is_logged(self):
        expression = " * ".join(["9999999999999999"] * 21)
        with mock.patch.dict(LEXER_CONFIG, {"max_buffer_size": 1000}):
            with self.assertLogs("core.pipeline", level="WARNING") as logs:
                result = self.calculator.calculate(expression)
        self.assertEqual(result.status, Status.SUCCESS)
        self.assertEqual(result.value, float("inf"))
        self.assertIn("non-finite", logs.output[0])

    def test_precision(self):
        calculator = ExpressionCalculator(precision=2)
        self.assertEqual(calculator.format_result(calculator.calculate("1/3").value), "0.33")


if __name__ == "__main__":
    unittest.main()
