#!/usr/bin/env python3
"""
Boundary tests for interleave.
"""

import unittest
from lazyqueries import Sequence, ExhaustedCursorError, queries as q


class TestInterleave(unittest.TestCase):
    """Test alternation and fallback once one side is exhausted."""

    def assertInterleaves(self, left, right, expected):
        self.assertEqual(q.collect(q.interleave(left, right)), expected)

    def test_equal_lengths(self):
        self.assertInterleaves([1, 2, 3], [7, 8, 9], [1, 7, 2, 8, 3, 9])

    def test_left_longer(self):
        self.assertInterleaves([1, 2, 3, 4], [9, 8], [1, 9, 2, 8, 3, 4])

    def test_right_longer(self):
        self.assertInterleaves([1, 2], [9, 8, 7, 6], [1, 9, 2, 8, 7, 6])

    def test_off_by_one(self):
        self.assertInterleaves([1, 2, 3], [9, 8], [1, 9, 2, 8, 3])
        self.assertInterleaves([1, 2], [9, 8, 7], [1, 9, 2, 8, 7])

    def test_one_side_empty(self):
        self.assertInterleaves([], [9, 8], [9, 8])
        self.assertInterleaves([1, 2], [], [1, 2])

    def test_both_empty(self):
        self.assertInterleaves([], [], [])
        cursor = q.interleave([], []).cursor()
        self.assertFalse(cursor.has_next())
        with self.assertRaises(ExhaustedCursorError):
            cursor.next()

    def test_single_elements(self):
        self.assertInterleaves([1], [9], [1, 9])
        self.assertInterleaves([1], [], [1])
        self.assertInterleaves([], [9], [9])

    def test_side_empties_after_filtering(self):
        """A side that runs dry mid-traversal is drained from the other side."""
        left = q.filter(range(10), lambda x: x < 2)
        right = q.map(range(5), lambda x: x * 100)
        self.assertInterleaves(left, right, [0, 0, 1, 100, 200, 300, 400])

    def test_none_elements(self):
        self.assertInterleaves([None, None], [0], [None, 0, None])

    def test_count_is_sum(self):
        for n in range(5):
            for m in range(5):
                seq = q.interleave(range(n), range(m))
                self.assertEqual(q.count(seq), n + m)

    def test_with_infinite_side(self):
        ones = Sequence.generate(lambda: 1)
        seq = q.limit(q.interleave([5, 6], ones), 6)
        self.assertEqual(q.collect(seq), [5, 1, 6, 1, 1, 1])

    def test_has_next_idempotent(self):
        cursor = q.interleave([1], [2]).cursor()
        for expected in (1, 2):
            self.assertTrue(cursor.has_next())
            self.assertTrue(cursor.has_next())
            self.assertEqual(cursor.next(), expected)
        self.assertFalse(cursor.has_next())

    def test_retraversal(self):
        seq = q.interleave([1, 2, 3], "ab")
        self.assertEqual(q.collect(seq), [1, "a", 2, "b", 3])
        self.assertEqual(q.collect(seq), [1, "a", 2, "b", 3])


if __name__ == "__main__":
    unittest.main()
