#!/usr/bin/env python3
"""
Basic usage examples for LazyQueries.
"""

import os
import random
import tempfile
from lazyqueries import (
    Sequence,
    LazyQueriesConfig,
    EmptySequenceError,
    queries as q,
)


def example_fluent_pipeline():
    """Example: Chain views fluently over an in-memory collection."""
    print("\n=== Fluent Pipeline Example ===")

    data = [
        {'name': 'Alice', 'age': 25, 'score': 85},
        {'name': 'Bob', 'age': 30, 'score': 90},
        {'name': 'Charlie', 'age': 25, 'score': 78},
        {'name': 'David', 'age': 30, 'score': 92},
        {'name': 'Eve', 'age': 25, 'score': 88},
    ]

    graded = Sequence.from_iterable(data) \
        .filter(lambda x: x['age'] == 25) \
        .map(lambda x: {'name': x['name'], 'grade': 'A' if x['score'] >= 85 else 'B'})

    print("Filtered and transformed data:")
    for item in graded:
        print(f"  {item}")

    # Same pipeline, second independent traversal
    print(f"Students aged 25: {graded.count()}")


def example_text_records():
    """Example: Parse one record per line of a text file."""
    print("\n=== Text Records Example ===")

    lines = [
        "date,tempC,precipMM,desc",
        "2019-01-01,14,0.0,Sunny",
        "2019-01-02,11,2.3,Light rain",
        "2019-01-03,9,5.1,Moderate rain",
        "2019-01-04,15,0.0,Sunny",
        "2019-01-05,12,0.4,Patchy rain",
    ]
    fd, path = tempfile.mkstemp(suffix=".csv")
    with os.fdopen(fd, "w") as f:
        f.write("\n".join(lines) + "\n")

    try:
        days = Sequence.from_file(path) \
            .skip(1) \
            .map(lambda line: line.split(",")) \
            .map(lambda cols: {'date': cols[0], 'temp': int(cols[1]),
                               'precip': float(cols[2]), 'desc': cols[3]})

        rainy = days.filter(lambda d: d['precip'] > 0)
        print(f"Rainy days: {rainy.count()}")
        print(f"Hottest temperature: {days.map(lambda d: d['temp']).max()}")
        print(f"Distinct descriptions: {days.map(lambda d: d['desc']).distinct().collect()}")
    finally:
        os.remove(path)


def example_infinite_source():
    """Example: Bound an infinite generator before reducing it."""
    print("\n=== Infinite Source Example ===")

    rolls = q.limit(q.generate(lambda: random.randint(1, 6)), 1000)
    sixes = q.count(q.filter(rolls, lambda r: r == 6))
    print(f"Sixes in 1000 rolls: {sixes}")
    print(f"Distinct faces seen: {sorted(q.collect(q.distinct(rolls)))}")


def example_combining():
    """Example: Concatenate and interleave sequences."""
    print("\n=== Combining Example ===")

    print(f"concat:     {q.collect(q.concat([1, 2, 3], [4, 5]))}")
    print(f"interleave: {q.collect(q.interleave([1, 2, 3, 4], [9, 8]))}")

    try:
        q.max([])
    except EmptySequenceError as e:
        print(f"max([]) failed as expected: {e}")


def main():
    """Run all examples."""
    print("=== LazyQueries Examples ===")

    LazyQueriesConfig.set_defaults(
        distinct_check_interval=1000,
    )

    example_fluent_pipeline()
    example_text_records()
    example_infinite_source()
    example_combining()

    print("\n=== All examples completed! ===")


if __name__ == "__main__":
    main()
