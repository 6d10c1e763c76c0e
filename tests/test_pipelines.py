#!/usr/bin/env python3
"""
Tests for composed pipelines, re-traversal and file-backed sources.
"""

import os
import random
import shutil
import tempfile
import unittest
from lazyqueries import Sequence, FileSequence, queries as q


class TestPipelineLaws(unittest.TestCase):
    """Relations between views and reducers over random inputs."""

    def setUp(self):
        self.rng = random.Random(1234)
        self.samples = [
            [self.rng.randint(0, 20) for _ in range(self.rng.randint(0, 40))]
            for _ in range(25)
        ]

    def test_filter_law(self):
        pred = lambda x: x % 3 == 0
        for data in self.samples:
            expected = [x for x in data if pred(x)]
            self.assertEqual(q.collect(q.filter(data, pred)), expected)
            self.assertEqual(q.count(q.filter(data, pred)), len(expected))

    def test_map_law(self):
        f = lambda x: x * x - 1
        for data in self.samples:
            mapped = q.collect(q.map(data, f))
            self.assertEqual(len(mapped), q.count(data))
            self.assertEqual(mapped, [f(x) for x in data])

    def test_skip_law(self):
        for data in self.samples:
            for n in (0, 1, 5, 50):
                self.assertEqual(q.count(q.skip(data, n)), max(len(data) - n, 0))
            self.assertEqual(q.collect(q.skip(data, 0)), data)

    def test_limit_law(self):
        for data in self.samples:
            for n in (0, 1, 5, 50):
                self.assertEqual(q.count(q.limit(data, n)), min(len(data), n))
        for n in (0, 1, 17):
            self.assertEqual(q.count(q.limit(q.generate(self.rng.random), n)), n)

    def test_distinct_law(self):
        for data in self.samples:
            result = q.collect(q.distinct(data))
            self.assertEqual(len(result), len(set(result)))
            self.assertEqual(result, list(dict.fromkeys(data)))
            self.assertLessEqual(len(result), len(data))

    def test_concat_law(self):
        for a, b in zip(self.samples, reversed(self.samples)):
            self.assertEqual(q.collect(q.concat(a, b)), a + b)
            self.assertEqual(q.count(q.concat(a, b)), len(a) + len(b))

    def test_retraversal_is_deterministic(self):
        for data in self.samples:
            seq = q.distinct(q.interleave(q.skip(data, 2), q.map(data, lambda x: -x)))
            self.assertEqual(q.collect(seq), q.collect(seq))

    def test_filter_over_bounded_generator_terminates(self):
        seq = q.filter(q.limit(q.generate(self.rng.random), 200), lambda x: x > 0.5)
        self.assertLessEqual(q.count(seq), 200)


class TestQueryFunctions(unittest.TestCase):
    """The function API documents itself where it shadows builtins."""

    def test_public_functions_documented(self):
        for name in q.__all__:
            func = getattr(q, name)
            self.assertTrue(func.__doc__ and func.__doc__.strip(), name)

    def test_shadowing_functions_are_lazy(self):
        calls = []
        seq = q.map(q.filter([1, 2], lambda x: calls.append(x) or True), str)
        self.assertEqual(calls, [])
        self.assertEqual(q.max(seq), "2")
        self.assertIn("lazy", q.filter.__doc__)
        self.assertIn("lazy", q.map.__doc__)
        self.assertIn("EmptySequenceError", q.max.__doc__)


class TestFluentPipelines(unittest.TestCase):

    def test_chained(self):
        result = Sequence.range(20) \
            .filter(lambda x: x % 2 == 0) \
            .map(lambda x: x // 4) \
            .distinct() \
            .skip(1) \
            .limit(3) \
            .collect()
        self.assertEqual(result, [1, 2, 3])

    def test_concat_and_interleave_accept_collections(self):
        self.assertEqual(Sequence.of(1).concat([2, 3]).collect(), [1, 2, 3])
        self.assertEqual(Sequence.of(1, 2).interleave((9,)).collect(), [1, 9, 2])

    def test_for_loop_retraversal(self):
        seq = Sequence.of("x", "y").map(str.upper)
        self.assertEqual([s for s in seq], ["X", "Y"])
        self.assertEqual([s for s in seq], ["X", "Y"])

    def test_sequence_reflects_source_changes_between_traversals(self):
        data = [1, 2]
        seq = q.map(data, lambda x: x + 1)
        self.assertEqual(q.collect(seq), [2, 3])
        data.append(3)
        self.assertEqual(q.collect(seq), [2, 3, 4])


class TestFileSequence(unittest.TestCase):
    """Test one-record-per-line text sources."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.temp_dir, "weather.csv")
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("date,tempC\n")
            f.write("2019-01-01,14\n")
            f.write("2019-01-02,11\r\n")
            f.write("2019-01-03,17")

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_lines(self):
        lines = Sequence.from_file(self.path).collect()
        self.assertEqual(lines, ["date,tempC", "2019-01-01,14", "2019-01-02,11", "2019-01-03,17"])

    def test_records_pipeline(self):
        temps = FileSequence(self.path) \
            .skip(1) \
            .map(lambda line: int(line.split(",")[1]))
        self.assertEqual(temps.max(), 17)
        self.assertEqual(temps.count(), 3)

    def test_missing_file_fails_on_traversal(self):
        seq = FileSequence(os.path.join(self.temp_dir, "missing.txt"))
        with self.assertRaises(FileNotFoundError):
            seq.count()

    def test_file_reread_per_cursor(self):
        seq = FileSequence(self.path)
        self.assertEqual(seq.count(), 4)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write("\n2019-01-04,9\n")
        self.assertEqual(seq.count(), 5)


if __name__ == "__main__":
    unittest.main()
