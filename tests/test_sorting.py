'''
Sorting algorithm tests
'''

from functools import partial
from random import Random

from sorting import (GAPS, AverageSortResult, SortResult, bubble_sort,
                     generate, hibbard, insertion_sort, is_sorted, knuth,
                     pratt, quick_sort, selection_sort, shell_sort)

from pytest import mark, raises


SORTS = [bubble_sort, insertion_sort, selection_sort, quick_sort] + \
    [partial(shell_sort, gaps=gaps) for gaps in GAPS.values()]


@mark.parametrize('sort', SORTS)
@mark.parametrize('data', [
    [],
    [1],
    [2, 1],
    [3, 1, 2],
    [5, 5, 5, 5],
    [1, 2, 3, 4, 5, 6],
    [6, 5, 4, 3, 2, 1],
    [4, -1, 4, 0, -1, 9, 2, 2],
])
def test_sorts(sort, data):
    data = list(data)
    expected = sorted(data)
    result = sort(data)
    assert data == expected
    assert isinstance(result, SortResult)
    assert result.time >= 0


@mark.parametrize('sort', SORTS)
def test_sorts_random(sort):
    data = generate(500, -1000, 1000, Random(42))
    expected = sorted(data)
    sort(data)
    assert data == expected


def test_quick_sort_on_sorted_input():
    # Deeper than the recursion limit if partitions recursed
    data = list(range(2000))
    quick_sort(data)
    assert is_sorted(data)


@mark.parametrize('sort,expected', [
    (insertion_sort, (3, 3)),
    (selection_sort, (3, 1)),
    (bubble_sort, (3, 3)),
])
def test_counts_on_reversed(sort, expected):
    result = sort([3, 2, 1])
    assert (result.comparisons, result.swaps) == expected


def test_counts_on_sorted():
    assert insertion_sort(list(range(10)))[:2] == (9, 0)
    assert bubble_sort(list(range(10)))[:2] == (45, 0)
    assert selection_sort(list(range(10)))[:2] == (45, 0)


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([1, 1, 2])
    assert not is_sorted([2, 1])


@mark.parametrize('gaps,size,expected', [
    (hibbard, 100, [63, 31, 15, 7, 3, 1]),
    (knuth, 100, [40, 13, 4, 1]),
    (pratt, 10, [9, 8, 6, 4, 3, 2, 1]),
    (hibbard, 1, [1]),
    (knuth, 0, [1]),
    (pratt, 1, [1]),
])
def test_gaps(gaps, size, expected):
    assert gaps(size) == expected


def test_average():
    average = AverageSortResult([SortResult(2, 4, 1.0),
                                 SortResult(4, 0, 3.0)])
    assert list(average) == [3, 2, 2.0]
    assert average.comparisons == 3


def test_average_of_nothing():
    with raises(ValueError):
        AverageSortResult([])


def test_generate():
    data = generate(1000, 5, 10, Random(1))
    assert len(data) == 1000
    assert set(data) == set(range(5, 11))
    assert generate(10, 0, 100, Random(7)) == generate(10, 0, 100, Random(7))
