import math
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core.engine import compile_expression
from core.errors import (
    StackUnderflowError, UnknownSymbolError, MalformedResultError, DomainError
)
from core.functions import AngleMode
from core.rpn_evaluator import RPNEvaluator


def _run(text, angle_mode=AngleMode.DEGREES, constants=None):
    postfix = compile_expression(text, constants=constants)
    return RPNEvaluator.evaluate(postfix, angle_mode, constants)


class TestRPNEvaluator(unittest.TestCase):
    def test_arithmetic(self):
        self.assertEqual(_run("2+3*4"), 14.0)
        self.assertEqual(_run("7%4"), 3.0)
        self.assertEqual(_run("-5%3"), -2.0)
        self.assertEqual(_run("2^-3"), 0.125)

    def test_operand_order(self):
        self.assertEqual(_run("10-4"), 6.0)
        self.assertEqual(_run("10/4"), 2.5)
        self.assertAlmostEqual(_run("root(8,3)"), 2.0, delta=1e-12)

    def test_division_by_zero_propagates(self):
        self.assertEqual(_run("1/0"), math.inf)
        self.assertEqual(_run("-1/0"), -math.inf)
        self.assertTrue(math.isnan(_run("0/0")))

    def test_stack_underflow(self):
        with self.assertRaises(StackUnderflowError):
            _run("+")
        with self.assertRaises(StackUnderflowError) as ctx:
            _run("sin()")
        self.assertEqual(ctx.exception.symbol, "sin")
        with self.assertRaises(StackUnderflowError):
            _run("root(8)")

    def test_unknown_function(self):
        with self.assertRaises(UnknownSymbolError) as ctx:
            _run("foo(2)")
        self.assertEqual(ctx.exception.symbol, "foo")

    def test_malformed_result(self):
        with self.assertRaises(MalformedResultError) as ctx:
            _run("1,2")
        self.assertEqual(ctx.exception.stack_size, 2)
        with self.assertRaises(MalformedResultError):
            _run("()")

    def test_factorial_domain(self):
        self.assertEqual(_run("5!"), 120.0)
        with self.assertRaises(DomainError):
            _run("(-3)!")
        with self.assertRaises(DomainError):
            _run("2.5!")

    def test_inverse_trig_modes(self):
        self.assertAlmostEqual(_run("asin(1)"), 90.0, delta=1e-9)
        self.assertAlmostEqual(_run("asin(1)", AngleMode.RADIANS), math.pi / 2, delta=1e-12)
        self.assertAlmostEqual(_run("acos(0.5)"), 60.0, delta=1e-9)

    def test_hyperbolic_ignores_angle_mode(self):
        self.assertEqual(_run("sinh(1)"), _run("sinh(1)", AngleMode.RADIANS))
        self.assertAlmostEqual(_run("cosh(0)"), 1.0)

    def test_call_constants(self):
        self.assertEqual(_run("2x^2", constants={"x": 3.0}), 18.0)

    def test_unbound_constant(self):
        postfix = compile_expression("x+1", constants={"x": 0.0})
        with self.assertRaises(UnknownSymbolError):
            RPNEvaluator.evaluate(postfix, AngleMode.DEGREES)


if __name__ == "__main__":
    unittest.main()
