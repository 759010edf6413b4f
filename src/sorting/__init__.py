'''
Instrumented in-place sorting algorithms and their benchmark harness.
'''

from .cli import CLI, generate
from .engine import (AverageSortResult, SortResult, bubble_sort,
                     insertion_sort, is_sorted, quick_sort, selection_sort,
                     shell_sort)
from .gaps import GAPS, hibbard, knuth, pratt


__all__ = ('SortResult', 'AverageSortResult', 'insertion_sort',
           'selection_sort', 'bubble_sort', 'quick_sort', 'shell_sort',
           'is_sorted', 'hibbard', 'knuth', 'pratt', 'GAPS', 'generate',
           'CLI')
