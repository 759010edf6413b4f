'''
In-place sorting algorithms, instrumented for benchmarking.

Each sort works on a mutable sequence of mutually comparable items and
returns a SortResult counting the comparisons and swaps it made and the time
it took, in milliseconds.
'''

from collections import namedtuple
from time import perf_counter


class SortResult(namedtuple('SortResult', ['comparisons', 'swaps', 'time'])):
    __slots__ = ()


class AverageSortResult:
    '''
    Average statistics amongst a collection of sort results.
    '''

    def __init__(self, results):
        results = list(results)
        if not results:
            raise ValueError('Nothing to average')
        self.comparisons = sum(r.comparisons for r in results) / len(results)
        self.swaps = sum(r.swaps for r in results) / len(results)
        self.time = sum(r.time for r in results) / len(results)

    def __iter__(self):
        yield self.comparisons
        yield self.swaps
        yield self.time


def _elapsed(start):
    return (perf_counter() - start) * 1000


def _swap(data, a, b):
    data[a], data[b] = data[b], data[a]


def insertion_sort(data):
    start = perf_counter()
    comparisons = swaps = 0

    for offset in range(1, len(data)):
        # Sink the next item into the sorted partition
        for index in range(offset, 0, -1):
            comparisons += 1
            if data[index] < data[index - 1]:
                swaps += 1
                _swap(data, index, index - 1)
            else:
                break

    return SortResult(comparisons, swaps, _elapsed(start))


def selection_sort(data):
    start = perf_counter()
    comparisons = swaps = 0

    for offset in range(len(data) - 1):
        smallest = offset
        for index in range(offset + 1, len(data)):
            comparisons += 1
            if data[index] < data[smallest]:
                smallest = index
        if smallest != offset:
            swaps += 1
            _swap(data, offset, smallest)

    return SortResult(comparisons, swaps, _elapsed(start))


def bubble_sort(data):
    start = perf_counter()
    comparisons = swaps = 0

    end = len(data) - 1
    for offset in range(end):
        # Walk back from the end, carrying the smallest item down to offset
        for index in range(end, offset, -1):
            comparisons += 1
            if data[index] < data[index - 1]:
                swaps += 1
                _swap(data, index, index - 1)

    return SortResult(comparisons, swaps, _elapsed(start))


def quick_sort(data):
    '''
    Quick sort pivoting on the first item of each partition.

    Partitions wait on an explicit stack rather than the call stack, so
    already sorted input cannot exhaust the recursion limit.
    '''
    start = perf_counter()
    comparisons = swaps = 0

    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue

        pivot = data[low]
        left, right = low, high + 1
        # Move the pointers towards each other until they cross
        while True:
            while True:
                left += 1
                comparisons += 1
                if left > high or not data[left] < pivot:
                    break
            while True:
                right -= 1
                comparisons += 1
                # data[low] is the pivot, so this stops at low at the latest
                if not data[right] > pivot:
                    break
            if left >= right:
                break
            swaps += 1
            _swap(data, left, right)

        # right is where the pivot belongs
        if right != low:
            swaps += 1
            _swap(data, low, right)
        pending.append((low, right - 1))
        pending.append((right + 1, high))

    return SortResult(comparisons, swaps, _elapsed(start))


def shell_sort(data, gaps):
    '''
    Shell sort over the gap sequence ``gaps(len(data))``.

    :param gaps: Function of the data size returning descending gaps,
                 ending in 1.
    '''
    start = perf_counter()
    comparisons = swaps = 0

    for gap in gaps(len(data)):
        for offset in range(len(data) - gap):
            index = offset
            while index >= 0:
                comparisons += 1
                if data[index] <= data[index + gap]:
                    break
                swaps += 1
                _swap(data, index, index + gap)
                index -= gap

    return SortResult(comparisons, swaps, _elapsed(start))


def is_sorted(data):
    '''
    Return True iff every item is no greater than the next.
    '''
    return all(data[i] <= data[i + 1] for i in range(len(data) - 1))
