import random

import pytest

from algokit.mo import weighted_square_sums


def test_worked_example():
    assert weighted_square_sums([1, 2, 1], [(0, 2)]) == [6]


def test_single_positions_give_the_value():
    values = [4, 9, 1, 7, 7, 3]
    queries = [(i, i) for i in range(len(values))]
    assert weighted_square_sums(values, queries) == values


def test_constant_run():
    values = [5] * 6
    assert weighted_square_sums(values, [(0, 5)]) == [6 * 6 * 5]


def test_answers_follow_query_order():
    rng = random.Random(7)
    values = [rng.randint(1, 5) for _ in range(40)]
    queries = []
    for _ in range(30):
        lo = rng.randrange(40)
        queries.append((lo, rng.randrange(lo, 40)))
    forward = weighted_square_sums(values, queries)
    backward = weighted_square_sums(values, list(reversed(queries)))
    assert backward == list(reversed(forward))
    singles = [weighted_square_sums(values, [q])[0] for q in queries]
    assert forward == singles


def test_no_queries():
    assert weighted_square_sums([1, 2, 3], []) == []


@pytest.mark.parametrize("query", [(2, 1), (-1, 0), (0, 3)])
def test_invalid_range(query):
    with pytest.raises(IndexError):
        weighted_square_sums([1, 2, 3], [query])