'''
Operators and the registry mapping tokens to them.

Operators work on plain Python integers, which never wrap; it is the engine's
job to check the final result against its bounds.
'''

from collections import namedtuple
from inspect import signature as getsignature, Parameter
from threading import Lock
from types import MappingProxyType
import logging
import math
import operator

import regex

from .util import UndefinedOperatorError, describe, wrap_user_errors


logger = logging.getLogger(__name__)

# Stands in for whitespace in simplified infix text. Never an operator.
SEPARATOR = '_'
# A single integer, positive or negative
NUMERIC = regex.compile(r'^-?[0-9]+$')
# Largest result, in bits, that ^ and < will build
BIT_LIMIT = 1 << 16


class Unary(namedtuple('Unary', ['function'])):
    '''
    Operator taking one operand.
    '''
    __slots__ = ()
    arity = 1

    @wrap_user_errors('Undefined result for operand {1}')
    def __call__(self, operand):
        return self.function(operand)


class Binary(namedtuple('Binary', ['function'])):
    '''
    Operator taking a left and a right operand, in that order.
    '''
    __slots__ = ()
    arity = 2

    @wrap_user_errors('Undefined result for operands {1} and {2}')
    def __call__(self, left, right):
        return self.function(left, right)


unary = Unary
binary = Binary


def _arity(f):
    '''
    Return number of non-default positional arguments.
    '''
    signature = getsignature(f)
    positionals = [parameter
                   for parameter
                   in signature.parameters.values()
                   if parameter.kind in (Parameter.POSITIONAL_ONLY,
                                         Parameter.POSITIONAL_OR_KEYWORD) and
                      parameter.default is Parameter.empty]
    return len(positionals)


def as_operator(f):
    '''
    Return ``f`` as a Unary or Binary, inferring arity from its signature.
    '''
    if isinstance(f, (Unary, Binary)):
        return f
    if not callable(f):
        raise ValueError('Not callable: {!r}'.format(f))
    try:
        arity = _arity(f)
    except (TypeError, ValueError) as e:
        raise ValueError('Cannot infer arity of {!r}; '
                         'wrap it in unary() or binary()'.format(f)) from e
    if arity == 1:
        return Unary(f)
    elif arity == 2:
        return Binary(f)
    raise ValueError('Operators take one or two operands, {!r} takes {}'
                     .format(f, arity))


def check_token(token):
    '''
    Raise ValueError if ``token`` could never be lexed as an operator.
    '''
    if not isinstance(token, str) or not token:
        raise ValueError('Operator token must be a non-empty string')
    if token == SEPARATOR or NUMERIC.match(token):
        raise ValueError('Reserved token: {!r}'.format(token))
    if regex.search(r'[\s()]', token):
        raise ValueError('Operator token may not contain whitespace or '
                         'parentheses: {!r}'.format(token))


def truncdiv(a, b):
    '''
    Integer division, truncating toward zero.
    '''
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def truncmod(a, b):
    '''
    Remainder of truncdiv; takes the sign of the dividend.
    '''
    return a - b * truncdiv(a, b)


def power(base, exponent):
    '''
    Exponentiation, rounded toward zero to an integer.
    '''
    if exponent < 0:
        if base == 0:
            raise ZeroDivisionError('0 raised to a negative power')
        elif base == 1:
            return 1
        elif base == -1:
            return -1 if exponent % 2 else 1
        return 0
    # bit_length() * exponent bounds the bits of the result from above
    if abs(base) > 1 and abs(base).bit_length() * exponent > BIT_LIMIT:
        raise ValueError('Result too large: {} ^ {}'
                         .format(describe(base), exponent))
    return base ** exponent


def lshift(a, b):
    if a and a.bit_length() + b > BIT_LIMIT:
        raise ValueError('Result too large: {} < {}'.format(describe(a), b))
    return a << b


def icbrt(n):
    '''
    Integer cube root, truncated toward zero.
    '''
    magnitude = abs(n)
    root = magnitude
    if magnitude > 1:
        # Newton's method from above converges on the floor
        root = 1 << ((magnitude.bit_length() + 2) // 3)
        while True:
            smaller = (2 * root + magnitude // (root * root)) // 3
            if smaller >= root:
                break
            root = smaller
    return root if n >= 0 else -root


# Registered with every new engine.
BUILTINS = {
    # Arithmetic
    '+': binary(operator.__add__),
    '-': binary(operator.__sub__),
    'x': binary(operator.__mul__),
    '*': binary(operator.__mul__),
    '/': binary(truncdiv),
    '%': binary(truncmod),
    '^': binary(power),

    # Bitwise, not comparison
    '<': binary(lshift),
    '>': binary(operator.__rshift__),

    # Roots
    'Q': unary(math.isqrt),
    'C': unary(icbrt),
}


class Registry:
    '''
    Token to operator mapping.

    Writers hold the lock; readers take a snapshot and work from that, so an
    in-flight conversion or evaluation never sees a registration.
    '''

    def __init__(self, operators=BUILTINS):
        self._operators = dict(operators)
        self._lock = Lock()

    def register(self, token, operator):
        '''
        Map ``token`` to ``operator``, replacing any earlier mapping.
        '''
        check_token(token)
        operator = as_operator(operator)
        with self._lock:
            replaced = token in self._operators
            self._operators[token] = operator
        logger.debug('%s %s operator %r',
                     'Replaced' if replaced else 'Registered',
                     'unary' if operator.arity == 1 else 'binary',
                     token)

    def is_valid_operator(self, token):
        with self._lock:
            return token in self._operators

    def lookup(self, token):
        with self._lock:
            try:
                return self._operators[token]
            except KeyError:
                raise UndefinedOperatorError(token) from None

    def supported_operators(self):
        with self._lock:
            return frozenset(self._operators)

    def snapshot(self):
        '''
        Return a read-only copy of the current mapping.
        '''
        with self._lock:
            return MappingProxyType(dict(self._operators))

    def __contains__(self, token):
        return self.is_valid_operator(token)

    def __len__(self):
        with self._lock:
            return len(self._operators)
