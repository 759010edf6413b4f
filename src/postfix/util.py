from enum import Enum
from functools import wraps


# Integers wider than this are described rather than printed in full
PRINTABLE_BITS = 1 << 10


def describe(value):
    '''
    Return a short printable form of ``value``.

    Huge integers print as their width, since str() refuses them.
    '''
    if isinstance(value, int) and abs(value).bit_length() > PRINTABLE_BITS:
        return '<{}-bit integer>'.format(abs(value).bit_length())
    return value


class PostfixError(Exception):
    '''
    Base of every error the engine raises on bad user input.

    ``args[0]`` is always a human readable message.
    '''
    pass


class Reason(Enum):
    '''
    Why an infix expression was rejected.
    '''
    EMPTY = 'empty expression'
    UNMATCHED_PARENTHESIS = 'unmatched parenthesis'
    MISSING_UNARY_OPERAND = 'missing unary operand'
    MISSING_BINARY_OPERAND = 'missing binary operand'
    UNRECOGNIZED_TOKEN = 'unrecognized token'


class Malformation(Enum):
    '''
    Why a postfix expression could not be evaluated.
    '''
    EMPTY = 'empty expression'
    NOT_ENOUGH_LITERALS = 'not enough literals'
    TOO_MANY_LITERALS = 'too many literals'
    UNRECOGNIZED_TOKEN = 'unrecognized token'


class InvalidExpressionError(PostfixError):
    def __init__(self, reason, expression, detail=None):
        self.reason = reason
        self.expression = expression
        what = reason.value
        if detail is not None:
            what = '{} {}'.format(what, detail)
        super().__init__('Invalid infix expression ({}): {!r}'
                         .format(what, expression))


class UndefinedOperatorError(PostfixError):
    def __init__(self, token):
        self.token = token
        super().__init__('Undefined operator: {!r}'.format(token))


class MalformedExpressionError(PostfixError):
    def __init__(self, reason, expression, detail=None):
        self.reason = reason
        self.expression = expression
        what = reason.value
        if detail is not None:
            what = '{} {}'.format(what, detail)
        super().__init__('Malformed postfix expression ({}): {!r}'
                         .format(what, expression))


class BoundsError(PostfixError, ArithmeticError):
    '''
    Result fell outside the engine's integer domain.

    ``value`` holds the true, unbounded result.
    '''
    DIRECTION = 'out of bounds'

    def __init__(self, value, expression, bound):
        self.value = value
        self.expression = expression
        self.bound = bound
        super().__init__('Integer {} ({} exceeds {}): {!r}'
                         .format(self.DIRECTION, describe(value), bound,
                                 expression))


class ResultOverflowError(BoundsError):
    DIRECTION = 'overflow'


class ResultUnderflowError(BoundsError):
    DIRECTION = 'underflow'


class UndefinedResultError(PostfixError, ArithmeticError):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts operator failures to UndefinedResultError.

    Passes through PostfixErrors. ``fmt`` is formatted with the call's
    arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except PostfixError:
                raise
            except Exception as e:
                raise UndefinedResultError(
                    fmt.format(*map(describe, args),
                               **{key: describe(value)
                                  for key, value in kwargs.items()}),
                    e) from e
        return wrapper
    return decorator
