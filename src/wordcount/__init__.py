'''
Word frequency counters.

Four linked list disciplines counting the same words: unsorted, sorted,
move-to-front and bubble-up. Each tallies the comparisons and reference
assignments it makes.
'''

from .cli import CLI
from .counters import (COUNTERS, BubbleSelfAdjustingWordCounter,
                       FrontSelfAdjustingWordCounter, SortedWordCounter,
                       UnsortedWordCounter, Word, WordCounter)


__all__ = ('WordCounter', 'Word', 'UnsortedWordCounter', 'SortedWordCounter',
           'FrontSelfAdjustingWordCounter', 'BubbleSelfAdjustingWordCounter',
           'COUNTERS', 'CLI')
