import random

from algokit.sorting import merge_sort


def test_descending_one_to_ten():
    assert merge_sort(range(10, 0, -1)) == list(range(1, 11))


def test_empty_and_single():
    assert merge_sort([]) == []
    assert merge_sort([7]) == [7]


def test_matches_sorted_on_random_data():
    rng = random.Random(1)
    for size in range(40):
        data = [rng.randint(-50, 50) for _ in range(size)]
        assert merge_sort(data) == sorted(data)


def test_input_is_not_modified():
    data = [3, 1, 2]
    merge_sort(data)
    assert data == [3, 1, 2]


def test_equal_items_keep_their_order():
    class Item:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __lt__(self, other):
            return self.key < other.key

    items = [Item(2, "a"), Item(1, "b"), Item(2, "c"), Item(1, "d")]
    result = merge_sort(items)
    expected = sorted(items, key=lambda it: it.key)
    assert [it.tag for it in result] == [it.tag for it in expected]