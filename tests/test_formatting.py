import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config.config import validate_config
from utils.formatting import format_number, format_operand, format_results, is_integral


class TestFormatting(unittest.TestCase):
    def test_integers(self):
        self.assertEqual(format_number(5.0), "5")
        self.assertEqual(format_number(-0.0), "0")
        self.assertEqual(format_number(-12.0), "-12")

    def test_fractions(self):
        self.assertEqual(format_number(0.5), "0.5")
        self.assertEqual(format_number(0.1 + 0.2), "0.30000000000000004")

    def test_special_values(self):
        self.assertEqual(format_results([float("nan"), float("inf"), float("-inf")]),
                         ["NaN", "Infinity", "-Infinity"])

    def test_is_integral(self):
        self.assertTrue(is_integral(3.0))
        self.assertFalse(is_integral(3.5))
        self.assertFalse(is_integral(float("inf")))

    def test_operand_never_uses_exponent(self):
        self.assertEqual(format_operand(1e-7), "0.0000001")
        self.assertEqual(format_operand(2.5e-10), "0.00000000025")
        self.assertEqual(format_operand(1e22), "10000000000000000000000")
        self.assertEqual(format_operand(-4.0), "-4")


class TestConfig(unittest.TestCase):
    def test_validate_config(self):
        validate_config()


if __name__ == "__main__":
    unittest.main()
