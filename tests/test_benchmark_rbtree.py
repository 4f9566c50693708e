import random

import pytest

from redblack import RedBlackTree

SIZE = 10000


@pytest.fixture(scope="module")
def values():
    rng = random.Random(7)
    return [rng.random() for _ in range(SIZE)]


@pytest.fixture(scope="module")
def filled(values):
    return RedBlackTree(values)


@pytest.mark.benchmark
def test_insert(benchmark, values):
    benchmark(RedBlackTree, values)


@pytest.mark.benchmark
def test_insert_remove(benchmark, values):
    def churn():
        tree = RedBlackTree(values)
        for val in values:
            tree.remove(val)
        return tree

    tree = benchmark(churn)
    assert tree.is_empty()


@pytest.mark.benchmark
def test_iterate(benchmark, filled):
    result = benchmark(list, filled)
    assert len(result) == SIZE
