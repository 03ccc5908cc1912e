import math
import os
import tempfile
import unittest
import sys
from pathlib import Path

import pandas as pd

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core.functions import AngleMode
from data.expression_loader import load_expressions, evaluate_frame, summarize_results


class TestExpressionLoader(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, name, content):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_load_csv(self):
        path = self._write("input.csv", "id,expression\n1,2+2\n2,sin(90)\n")
        frame = load_expressions(path)
        self.assertEqual(list(frame["expression"]), ["2+2", "sin(90)"])

    def test_load_csv_missing_column(self):
        path = self._write("input.csv", "id,formula\n1,2+2\n")
        with self.assertRaises(ValueError):
            load_expressions(path)

    def test_load_text_skips_blank_lines(self):
        path = self._write("input.txt", "2×3\n\n   \n5!\n")
        frame = load_expressions(path)
        self.assertEqual(list(frame["expression"]), ["2×3", "5!"])


class TestEvaluateFrame(unittest.TestCase):
    def test_evaluate_frame(self):
        frame = pd.DataFrame({"expression": ["2+2", "sin(90)", "+", "1/0"]})
        results = evaluate_frame(frame)
        self.assertNotIn("result", frame.columns)
        self.assertEqual(results["result"][0], 4.0)
        self.assertAlmostEqual(results["result"][1], 1.0, delta=1e-9)
        self.assertTrue(math.isnan(results["result"][2]))
        self.assertEqual(results["result"][3], math.inf)

        summary = summarize_results(results)
        self.assertEqual(summary, {"total": 4, "failed": 1, "infinite": 1, "finite": 2})

    def test_angle_mode_and_columns(self):
        frame = pd.DataFrame({"expr": ["sin(pi/2)"]})
        results = evaluate_frame(frame, column="expr", angle_mode=AngleMode.RADIANS, result_column="value")
        self.assertAlmostEqual(results["value"][0], 1.0, delta=1e-9)
        self.assertEqual(summarize_results(results, result_column="value")["finite"], 1)

    def test_missing_expression_evaluates_to_zero(self):
        frame = pd.DataFrame({"expression": [None, "3"]})
        results = evaluate_frame(frame)
        self.assertEqual(list(results["result"]), [0.0, 3.0])


if __name__ == "__main__":
    unittest.main()
