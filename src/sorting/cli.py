from argparse import ArgumentParser
from functools import partial
from random import Random
from time import perf_counter
import logging

from .engine import (AverageSortResult, bubble_sort, insertion_sort,
                     quick_sort, selection_sort, shell_sort)
from .gaps import GAPS


logger = logging.getLogger(__name__)

# Column order of the results table. Slow sorts only run the slow rounds.
ALGORITHMS = [
    ('Bubble', bubble_sort, True),
    ('Insertion', insertion_sort, True),
    ('Selection', selection_sort, True),
    ('Quick', quick_sort, False),
] + [(name, partial(shell_sort, gaps=gaps), False)
     for name, gaps in GAPS.items()]
STATISTICS = ('Comparisons', 'Swaps', 'Time')


def generate(size, low, high, rng=None):
    '''
    Return ``size`` random integers from low to high, inclusive.
    '''
    rng = rng or Random()
    return [rng.randint(low, high) for _ in range(size)]


class CLI:
    '''
    Benchmark harness for the sorting algorithms.

    Prints a table of average comparisons, swaps and time per algorithm for
    each data size, optionally saving it to a file.
    '''

    def __init__(self):
        self.argument_parser = ArgumentParser(
            description='Benchmark the sorting algorithms')
        add = self.argument_parser.add_argument
        add('-v', '--verbose', action='store_true')
        add('-o', '--out-file',
            help='the path to save results to')
        add('-d', '--delimiter', default='\t',
            help='the delimiter to use when printing results (default: tab)')
        add('-m', '--gen-min', type=int, default=0,
            help='the minimum bound on the randomly generated data')
        add('-M', '--gen-max', type=int, default=9999999,
            help='the maximum bound on the randomly generated data')
        add('-i', '--initial-size', type=int, default=100,
            help='the initial size of the data to sort')
        add('-x', '--max-size', type=int, default=2000,
            help='the maximum size of the data to sort')
        add('-s', '--step', type=int, default=100,
            help='the amount to increment the size of the data to sort by')
        add('-r', '--slow-rounds', type=int, default=3,
            help='the number of rounds to average all algorithms by')
        add('-R', '--fast-rounds', type=int, default=10,
            help='the number of rounds to average quick sort and all shell '
                 'sorts by')
        add('-w', '--warmup', type=int, default=10,
            help='the number of rounds to run each algorithm before '
                 'starting the benchmark')
        add('--seed', type=int,
            help='seed for the random data')

    def _check(self):
        args = self.args
        if args.gen_min > args.gen_max:
            self.argument_parser.error('--gen-min is above --gen-max')
        for name in ('initial_size', 'max_size', 'step',
                     'slow_rounds', 'fast_rounds'):
            if getattr(args, name) < 1:
                self.argument_parser.error('--{} must be positive'
                                           .format(name.replace('_', '-')))
        if args.warmup < 0:
            self.argument_parser.error('--warmup must not be negative')
        if args.fast_rounds < args.slow_rounds:
            logger.warning('The number of rounds for the faster sorts is '
                           'lower than that for the slow sorts! The faster '
                           'sorts will still run as many rounds as the slow '
                           'sorts!')

    def configuration(self):
        '''
        Return the configuration header, as comment lines.
        '''
        args = self.args
        return [
            '# Configuration: ',
            '# \tWill generate random numbers from {} to {}'
            .format(args.gen_min, args.gen_max),
            '# \tData size ranges from {} to {} in steps of {}'
            .format(args.initial_size, args.max_size, args.step),
            '# \tSlower sorts will have {} rounds to average results for '
            'each size'.format(args.slow_rounds),
            '# \tFaster sorts will have {} rounds to average results for '
            'each size'.format(max(args.fast_rounds, args.slow_rounds)),
            '# \tWarming up over {} rounds for each algorithm'
            .format(args.warmup),
        ]

    def header(self):
        return self.args.delimiter.join(
            ['Data Size'] + ['{} {}'.format(name, statistic)
                             for name, _, _ in ALGORITHMS
                             for statistic in STATISTICS])

    def generate(self, size):
        return generate(size, self.args.gen_min, self.args.gen_max, self.rng)

    def warmup(self):
        start = perf_counter()
        for _ in range(self.args.warmup):
            data = self.generate(self.args.initial_size)
            for _, sort, _ in ALGORITHMS:
                sort(list(data))
        return (perf_counter() - start) * 1000

    def benchmark(self, size):
        '''
        Return one table row for data of ``size``.
        '''
        slow_rounds = self.args.slow_rounds
        fast_rounds = max(self.args.fast_rounds, slow_rounds)
        results = {name: [] for name, _, _ in ALGORITHMS}
        for round_ in range(fast_rounds):
            data = self.generate(size)
            for name, sort, slow in ALGORITHMS:
                if slow and round_ >= slow_rounds:
                    continue
                result = sort(list(data))
                results[name].append(result)
                self.totals[name] += result.time

        row = [str(size)]
        for name, _, _ in ALGORITHMS:
            row.extend('{:.3f}'.format(value)
                       for value in AverageSortResult(results[name]))
        return self.args.delimiter.join(row)

    def run(self, *, args=None):
        '''
        Run the benchmarks. Return exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING)
        self._check()
        self.rng = Random(self.args.seed)
        self.totals = {name: 0 for name, _, _ in ALGORITHMS}

        configuration = self.configuration()
        print(*configuration, sep='\n')
        print('Warming up...{}ms'.format(round(self.warmup())))
        print('\n\nResults:\n\n')

        table = [self.header()]
        print(table[0])
        for size in range(self.args.initial_size, self.args.max_size + 1,
                          self.args.step):
            logger.debug('Benchmarking size %d', size)
            table.append(self.benchmark(size))
            print(table[-1], flush=True)

        status = 0
        if self.args.out_file:
            try:
                with open(self.args.out_file, 'w') as fp:
                    print(*configuration + table, sep='\n', file=fp)
            except OSError as e:
                logger.error('Encountered an error when writing benchmark '
                             'results to %s: %s', self.args.out_file, e)
                status = 1

        print('\n\nBenchmarks complete. Total runtime per algorithm:')
        for name, _, _ in ALGORITHMS:
            print('\t{}: {}ms'.format(name, round(self.totals[name])))
        return status
