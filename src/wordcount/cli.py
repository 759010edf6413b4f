from argparse import ArgumentParser, FileType
from sys import stdin
from time import perf_counter
import logging

import regex

from .counters import COUNTERS


logger = logging.getLogger(__name__)

# Punctuation hugging either end of a word
PUNCTUATION = regex.compile(r"^[^\w']+|[^\w']+$")


def words(lines):
    '''
    Yield normalized, whitespace delimited words.

    Words are lower-cased and stripped of surrounding punctuation; what is
    left empty is skipped.
    '''
    for line in lines:
        for raw in line.split():
            word = PUNCTUATION.sub('', raw.lower())
            if word:
                yield word


class CLI:
    '''
    Command line benchmark of the word counters.
    '''

    HEADER = ('Counter', 'Words', 'Distinct', 'Comparisons',
              'Reference Changes', 'Time (ms)')

    def __init__(self):
        self.argument_parser = ArgumentParser(
            description='Count words with each counter and compare the cost')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-c', '--counter',
                                          action='append',
                                          choices=sorted(COUNTERS),
                                          dest='counters',
                                          help='counter to run; repeatable, '
                                               'default all')
        self.argument_parser.add_argument('-t', '--top',
                                          type=int,
                                          default=0,
                                          help='also list the N most '
                                               'frequent words')
        self.argument_parser.add_argument('-d', '--delimiter',
                                          default='\t')
        self.argument_parser.add_argument('files',
                                          nargs='*',
                                          type=FileType('r'),
                                          default=[stdin])

    def run(self, *, args=None):
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING)
        text = []
        for fp in self.args.files:
            try:
                text.extend(words(fp))
            finally:
                if fp is not stdin:
                    fp.close()
        logger.debug('Read %d words', len(text))

        delimiter = self.args.delimiter
        print(*self.HEADER, sep=delimiter)
        last = None
        for name in self.args.counters or COUNTERS:
            counter = COUNTERS[name]()
            start = perf_counter()
            counter.encounter_all(text)
            elapsed = (perf_counter() - start) * 1000
            print(name,
                  counter.word_count,
                  counter.distinct_word_count,
                  counter.comparisons,
                  counter.reference_changes,
                  '{:.3f}'.format(elapsed),
                  sep=delimiter)
            last = counter

        if self.args.top and last is not None:
            print()
            for word in last.most_common(self.args.top):
                print(word.value, word.count, sep=delimiter)
        return 0
