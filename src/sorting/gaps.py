'''
Gap (delta) sequences for shell sort.

Each function takes the size of the data and returns the gaps to use,
largest first, always ending in 1.
'''


def hibbard(size):
    '''
    2**k - 1 below size.
    '''
    gaps = []
    k = 1
    while (1 << k) - 1 < size:
        gaps.append((1 << k) - 1)
        k += 1
    return gaps[::-1] or [1]


def knuth(size):
    '''
    (3**k - 1) / 2 below size: 1, 4, 13, 40, ...
    '''
    gaps = []
    gap = 1
    while gap < size:
        gaps.append(gap)
        gap = 3 * gap + 1
    return gaps[::-1] or [1]


def pratt(size):
    '''
    Every 2**p * 3**q below size.
    '''
    gaps = []
    power_of_three = 1
    while power_of_three < size:
        gap = power_of_three
        while gap < size:
            gaps.append(gap)
            gap *= 2
        power_of_three *= 3
    return sorted(gaps, reverse=True) or [1]


GAPS = {
    'Hibbard': hibbard,
    'Knuth': knuth,
    'Pratt': pratt,
}
