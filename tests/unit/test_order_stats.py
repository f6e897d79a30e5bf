from __future__ import annotations

import itertools
import random

import pytest

from skintrack.errors import UsageError
from skintrack.filters.order_stats import (
    lower_quartile,
    mean,
    median,
    partition,
    quick_sort,
    select,
    standard_deviation,
    upper_quartile,
)


def _check_partitioned(data, j):
    assert all(v <= data[j] for v in data[:j])
    assert all(v > data[j] for v in data[j + 1:])


def test_quartiles_of_five_values():
    assert lower_quartile(bytearray([40, 10, 30, 20, 50])) == 20
    assert median(bytearray([40, 10, 30, 20, 50])) == 30
    assert upper_quartile(bytearray([40, 10, 30, 20, 50])) == 40


def test_single_element_is_every_quartile():
    for fn in (lower_quartile, median, upper_quartile):
        assert fn(bytearray([7])) == 7


def test_empty_sample_is_rejected():
    for fn in (lower_quartile, median, upper_quartile, mean, standard_deviation):
        with pytest.raises(UsageError):
            fn(bytearray())


def test_order_statistics_ignore_input_order():
    values = [9, 3, 3, 200, 0, 3, 17]
    expected = None
    for perm in itertools.permutations(values):
        got = (lower_quartile(bytearray(perm)), median(bytearray(perm)), upper_quartile(bytearray(perm)))
        if expected is None:
            expected = got
        assert got == expected
    assert expected == (3, 3, 9)


def test_partition_places_pivot():
    rng = random.Random(1)
    for _ in range(200):
        data = bytearray(rng.randrange(0, 6) for _ in range(rng.randrange(2, 30)))
        pivot = data[0]
        j = partition(data, 0, len(data) - 1)
        assert data[j] == pivot
        _check_partitioned(data, j)


def test_partition_all_equal():
    data = bytearray([5] * 10)
    j = partition(data, 0, 9)
    assert j == 9
    assert data == bytearray([5] * 10)


def test_partition_sub_range_leaves_rest_alone():
    data = bytearray([99, 4, 1, 3, 2, 0])
    j = partition(data, 1, 4)
    assert data[0] == 99 and data[5] == 0
    assert data[j] == 4
    assert sorted(data[1:j]) == [1, 2, 3]


def test_quick_sort_matches_sorted():
    rng = random.Random(7)
    for _ in range(100):
        data = bytearray(rng.randrange(256) for _ in range(rng.randrange(0, 80)))
        expected = sorted(data)
        quick_sort(data)
        assert list(data) == expected


def test_quick_sort_long_equal_run():
    data = bytearray([128] * 5000)
    quick_sort(data)
    assert data == bytearray([128] * 5000)


def test_select_matches_sorted_index():
    rng = random.Random(3)
    data = [rng.randrange(0, 10) for _ in range(121)]
    for rank in range(len(data)):
        assert select(bytearray(data), rank) == sorted(data)[rank]


def test_select_rejects_bad_rank():
    with pytest.raises(UsageError):
        select(bytearray([1, 2, 3]), 3)


def test_mean_and_population_std():
    data = bytearray([2, 4, 4, 4, 5, 5, 7, 9])
    assert mean(data) == 5.0
    assert standard_deviation(data) == 2.0
