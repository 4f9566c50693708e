from redblack import Direction, RedBlackTree, TreeIterator


def test_empty_tree():
    iterator = RedBlackTree().iter()

    assert next(iterator, None) is None
    assert list(iterator) == []


def test_iterates_in_ascending_order():
    tree = RedBlackTree([3])
    assert list(tree.iter()) == [3]

    expected = [3]
    for val in [9, 1, 10, 2, 4]:
        tree.insert(val)
        expected.append(val)
        assert list(tree.iter()) == sorted(expected)


def test_exhausted_iterator_stays_exhausted():
    tree = RedBlackTree([1, 2, 3, 4])
    iterator = tree.iter()

    assert list(iterator) == [1, 2, 3, 4]
    assert next(iterator, None) is None
    assert next(iterator, None) is None
    # a fresh iterator starts over
    assert list(tree) == [1, 2, 3, 4]


def test_step_by_step():
    iterator = iter(RedBlackTree([5, 2, 8]))

    assert iter(iterator) is iterator
    assert next(iterator) == 2
    assert next(iterator) == 5
    assert next(iterator) == 8
    assert next(iterator, None) is None


def test_independent_iterators():
    tree = RedBlackTree(range(10))
    first = tree.iter()
    second = tree.iter()

    assert [next(first) for _ in range(3)] == [0, 1, 2]
    assert list(second) == list(range(10))
    assert list(first) == list(range(3, 10))


def test_reversed():
    tree = RedBlackTree([4, 1, 7, 3, 9, 3])

    assert list(reversed(tree)) == [9, 7, 4, 3, 3, 1]


def test_iterator_over_bare_subtree():
    tree = RedBlackTree(range(1, 8))
    right = tree.root.right

    assert list(TreeIterator(right)) == [v for v in range(1, 8) if v > tree.root.value]
    assert list(TreeIterator(right, Direction.RIGHT)) == sorted(
        (v for v in range(1, 8) if v > tree.root.value), reverse=True
    )


def test_large_tree_does_not_recurse():
    values = list(range(20000))
    tree = RedBlackTree(values)

    assert list(tree) == values
