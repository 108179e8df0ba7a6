"""
Tests for the per-window frequency table.
"""

import math
import sys
import unittest
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from window_lm.frequency import CharObservation, EmptyDistributionError, FrequencyTable


def make_table(chars):
    table = FrequencyTable()
    for c in chars:
        table.record(c)
    table.finalize()
    return table


class TestRecord(unittest.TestCase):
    """Tests for recording observations."""

    def test_first_seen_order(self):
        """New characters are appended in first-seen order."""
        table = FrequencyTable()
        for c in "cabca":
            table.record(c)
        self.assertEqual([o.char for o in table], ["c", "a", "b"])

    def test_counts(self):
        """Repeated characters increment their count."""
        table = FrequencyTable()
        for c in "cabca":
            table.record(c)
        self.assertEqual(table.get("c").count, 2)
        self.assertEqual(table.get("a").count, 2)
        self.assertEqual(table.get("b").count, 1)
        self.assertEqual(table.total, 5)
        self.assertEqual(len(table), 3)

    def test_case_and_whitespace_distinct(self):
        table = FrequencyTable()
        for c in "aA \t":
            table.record(c)
        self.assertEqual(len(table), 4)
        self.assertIn(" ", table)
        self.assertNotIn("x", table)

    def test_rejects_multi_character(self):
        table = FrequencyTable()
        with self.assertRaises(ValueError):
            table.record("ab")
        with self.assertRaises(ValueError):
            table.record("")


class TestFinalize(unittest.TestCase):
    """Tests for probability computation."""

    def test_probabilities(self):
        """p is count/total and cp is the running sum."""
        table = make_table("abb")
        a, b = table.observations()
        self.assertAlmostEqual(a.p, 1 / 3)
        self.assertAlmostEqual(a.cp, 1 / 3)
        self.assertAlmostEqual(b.p, 2 / 3)
        self.assertAlmostEqual(b.cp, 1.0)

    def test_sum_and_monotonic(self):
        table = make_table("the quick brown fox jumps over the lazy dog")
        obs = table.observations()
        self.assertTrue(math.isclose(sum(o.p for o in obs), 1.0, abs_tol=1e-9))
        cps = [o.cp for o in obs]
        self.assertEqual(cps, sorted(cps))
        self.assertTrue(math.isclose(cps[-1], 1.0, abs_tol=1e-9))

    def test_empty_table_is_noop(self):
        table = FrequencyTable()
        table.finalize()
        self.assertEqual(len(table), 0)

    def test_finalize_recomputes(self):
        """Recording after finalize and finalizing again uses the new totals."""
        table = make_table("a")
        table.record("b")
        table.finalize()
        self.assertAlmostEqual(table.get("a").p, 0.5)
        self.assertAlmostEqual(table.get("b").cp, 1.0)


class TestSelect(unittest.TestCase):
    """Tests for threshold selection and sampling."""

    def test_threshold(self):
        """The first observation whose cp exceeds the draw wins."""
        table = make_table("abb")
        self.assertEqual(table.select(0.0), "a")
        self.assertEqual(table.select(0.33), "a")
        self.assertEqual(table.select(0.34), "b")
        self.assertEqual(table.select(0.999), "b")

    def test_draw_equal_to_cp_moves_on(self):
        table = make_table("ab")
        self.assertEqual(table.select(0.5), "b")

    def test_rounding_falls_back_to_last(self):
        table = make_table("ab")
        table.get("b").cp = 0.9999
        self.assertEqual(table.select(0.99995), "b")

    def test_empty_table_raises(self):
        table = FrequencyTable()
        with self.assertRaises(EmptyDistributionError):
            table.select(0.5)
        with self.assertRaises(EmptyDistributionError):
            table.sample(np.random.default_rng(0))

    def test_empty_error_is_value_error(self):
        self.assertTrue(issubclass(EmptyDistributionError, ValueError))

    def test_sample_single_char(self):
        table = make_table("zzz")
        rng = np.random.default_rng(7)
        self.assertEqual({table.sample(rng) for _ in range(20)}, {"z"})

    def test_sample_only_observed(self):
        table = make_table("xyz")
        rng = np.random.default_rng(1)
        drawn = {table.sample(rng) for _ in range(200)}
        self.assertTrue(drawn <= {"x", "y", "z"})


class TestRendering(unittest.TestCase):

    def test_str(self):
        table = make_table("aab")
        text = str(table)
        self.assertTrue(text.startswith("(("))
        self.assertIn("(a 2 ", text)
        self.assertIn("(b 1 ", text)

    def test_observation_str(self):
        obs = CharObservation("q", count=1, p=1.0, cp=1.0)
        self.assertEqual(str(obs), "(q 1 1.0 1.0)")


if __name__ == "__main__":
    unittest.main()
