import math
import unittest
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from graph import (
    GraphData, GraphPoint, extract_graph_block, clean_equation, is_implicit,
    sample_functions, points_frame
)

RESPONSE = """The curves meet at (1, 1).
Final Answer: x = 1

```json-graph
{
  "functions": ["x^2", "x^2 + y^2 = 9"],
  "points": [{"x": 1, "y": 1, "label": "A"}],
  "xDomain": [-2, 2],
  "yDomain": [-1, 5]
}
```"""


class TestGraphBlock(unittest.TestCase):
    def test_extract(self):
        text, graph = extract_graph_block(RESPONSE)
        self.assertTrue(text.endswith("Final Answer: x = 1"))
        self.assertNotIn("json-graph", text)
        self.assertEqual(graph.functions, ["x^2", "x^2 + y^2 = 9"])
        self.assertEqual(graph.points, [GraphPoint(1.0, 1.0, "A")])
        self.assertEqual(graph.x_domain, (-2.0, 2.0))
        self.assertEqual(graph.y_domain, (-1.0, 5.0))

    def test_no_block(self):
        text, graph = extract_graph_block("  just prose  ")
        self.assertEqual(text, "just prose")
        self.assertIsNone(graph)

    def test_malformed_block(self):
        with self.assertLogs("graph.graph_data", level="ERROR"):
            text, graph = extract_graph_block("prose\n```json-graph\n{not json}\n```")
        self.assertEqual(text, "prose")
        self.assertIsNone(graph)

    def test_to_dict_uses_service_keys(self):
        graph = GraphData(functions=["x"], x_domain=(0.0, 1.0))
        self.assertEqual(graph.to_dict(), {"functions": ["x"], "xDomain": [0.0, 1.0]})


class TestSampler(unittest.TestCase):
    def test_clean_equation(self):
        self.assertEqual(clean_equation(r"\sin(x) \cdot x^{2}"), "sin(x)*x^2")
        self.assertEqual(clean_equation(r"e^{2x}"), "e^(2x)")
        self.assertEqual(clean_equation(r"\left(x+1\right)"), "(x+1)")
        self.assertEqual(clean_equation(r"2\pi x"), "2pix")
        self.assertEqual(clean_equation(""), "")

    def test_is_implicit(self):
        self.assertTrue(is_implicit("x^2+y^2=9"))
        self.assertTrue(is_implicit("y<x"))
        self.assertFalse(is_implicit("x^2"))

    def test_sample_explicit_functions(self):
        graph = GraphData(functions=["x^2", "x^2 + y^2 = 9"], x_domain=(-2, 2))
        frame = sample_functions(graph, num_points=5)
        self.assertEqual(list(frame.columns), ["x", "x^2"])
        np.testing.assert_allclose(frame["x"], [-2, -1, 0, 1, 2])
        np.testing.assert_allclose(frame["x^2"], [4, 1, 0, 1, 4])

    def test_undefined_samples_are_nan(self):
        graph = GraphData(functions=["sqrt(x)", "1/x"], x_domain=(-1, 1))
        frame = sample_functions(graph, num_points=3)
        self.assertTrue(math.isnan(frame["sqrt(x)"][0]))
        self.assertEqual(frame["sqrt(x)"][2], 1.0)
        self.assertTrue(math.isnan(frame["1/x"][1]))

    def test_trig_defaults_to_radians(self):
        graph = GraphData(functions=["sin(x)"], x_domain=(0, math.pi))
        frame = sample_functions(graph, num_points=3)
        np.testing.assert_allclose(frame["sin(x)"], [0, 1, 0], atol=1e-12)

    def test_default_domain(self):
        frame = sample_functions(GraphData(functions=["2x"]), num_points=11)
        self.assertEqual(frame["x"].iloc[0], -10)
        self.assertEqual(frame["x"].iloc[-1], 10)
        np.testing.assert_allclose(frame["2x"], 2 * frame["x"])

    def test_points_frame(self):
        _, graph = extract_graph_block(RESPONSE)
        frame = points_frame(graph)
        self.assertEqual(frame.to_dict("records"), [{"x": 1.0, "y": 1.0, "label": "A"}])
        self.assertEqual(len(points_frame(GraphData())), 0)


if __name__ == "__main__":
    unittest.main()
