#!/usr/bin/env python3

import unittest

from annodiff.diff.similarity import (
    MODIFIED_THRESHOLD,
    REORDER_SIMILARITY,
    is_same_tokens_reordered,
    is_whitespace_only_change,
    line_similarity,
)


class TestLineSimilarity(unittest.TestCase):

    def test_identical(self):
        self.assertEqual(line_similarity("let x = 1;", "let x = 1;"), 1.0)

    def test_identical_after_trimming(self):
        self.assertEqual(line_similarity("    let x = 1;", "\tlet x = 1;  "), 1.0)

    def test_completely_different(self):
        self.assertEqual(line_similarity("aaa bbb", "xxx yyy"), 0.0)

    def test_half_similar(self):
        self.assertEqual(line_similarity("foo bar", "foo baz"), 0.5)

    def test_mostly_similar(self):
        self.assertEqual(line_similarity("a b c d", "a b c e"), 0.75)

    def test_divides_by_longer_line(self):
        self.assertEqual(line_similarity("a b", "x y z"), 0.0)
        self.assertAlmostEqual(line_similarity("foo(a)", "foo(a, b)"), 4 / 6)

    def test_repeated_tokens(self):
        self.assertAlmostEqual(line_similarity("a a b", "a b b"), 2 / 3)

    def test_single_punctuation(self):
        self.assertEqual(line_similarity("{", "}"), 0.0)

    def test_both_empty(self):
        self.assertEqual(line_similarity("", ""), 1.0)
        self.assertEqual(line_similarity("   ", "\t"), 1.0)

    def test_one_empty(self):
        self.assertEqual(line_similarity("", "foo"), 0.0)
        self.assertEqual(line_similarity("foo", "  "), 0.0)

    def test_reorder_scores_fixed_value(self):
        self.assertEqual(line_similarity("a b", "b a"), REORDER_SIMILARITY)
        self.assertEqual(line_similarity("use std::{HashMap, HashSet};", "use std::{HashSet, HashMap};"),
                         REORDER_SIMILARITY)
        self.assertEqual(REORDER_SIMILARITY, 0.95)

    def test_symmetric(self):
        pairs = [
            ("foo bar", "foo baz"),
            ("a b c d", "a b c e"),
            ("fn run(x: i32)", "fn run(x: u64, y: u64)"),
            ("a b", "b a"),
            ("", "x"),
        ]
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                self.assertEqual(line_similarity(a, b), line_similarity(b, a))

    def test_bounds(self):
        pairs = [
            ("x", "y"),
            ("return a + b;", "return a - b;"),
            ("if (x) {", "} else {"),
            ("    // comment", "/* comment */"),
        ]
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                score = line_similarity(a, b)
                self.assertGreaterEqual(score, 0.0)
                self.assertLessEqual(score, 1.0)

    def test_threshold_boundary_counts_as_modified(self):
        self.assertEqual(MODIFIED_THRESHOLD, 0.5)
        self.assertGreaterEqual(line_similarity("foo bar", "foo baz"), MODIFIED_THRESHOLD)
        self.assertLess(line_similarity("a b c", "a x y"), MODIFIED_THRESHOLD)


class TestSimilarityHelpers(unittest.TestCase):

    def test_whitespace_only_change(self):
        self.assertTrue(is_whitespace_only_change("    foo", "\tfoo"))
        self.assertTrue(is_whitespace_only_change("foo  ", "foo"))
        self.assertTrue(is_whitespace_only_change("", "   "))
        self.assertFalse(is_whitespace_only_change("foo bar", "foo  bar"))
        self.assertFalse(is_whitespace_only_change("foo", "bar"))
        self.assertTrue(is_whitespace_only_change("\u3000foo\xa0", "foo"))
        self.assertFalse(is_whitespace_only_change("\x1cfoo", "foo"))

    def test_same_tokens_reordered(self):
        self.assertTrue(is_same_tokens_reordered(["a", "b", "c"], ["c", "a", "b"]))
        self.assertFalse(is_same_tokens_reordered(["a", "b"], ["a", "b", "b"]))
        self.assertFalse(is_same_tokens_reordered(["a", "a", "b"], ["a", "b", "b"]))


if __name__ == '__main__':
    unittest.main()
