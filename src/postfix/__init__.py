'''
Postfix engine.

Evaluates integer expressions written in postfix (RPN) notation, and infix
expressions by converting them to postfix first. Operators are looked up in a
per-engine registry, so new unary and binary operators can be added at run
time and are understood by both notations.

Conversion from infix deliberately ignores operator precedence: ``3 + 4 * 2``
is ``(3 + 4) * 2``. Use parentheses to group.

Results are bounded to a signed integer domain, 32 bits unless asked
otherwise; anything outside it raises rather than wraps.
'''

from .cli import CLI
from .engine import PostfixEngine
from .lexer import Lexer
from .machine import Machine
from .operators import Binary, Registry, Unary, binary, unary
from .util import (BoundsError, InvalidExpressionError,
                   MalformedExpressionError, Malformation, PostfixError,
                   Reason, ResultOverflowError, ResultUnderflowError,
                   UndefinedOperatorError, UndefinedResultError)


__all__ = ('PostfixEngine', 'Machine', 'Lexer', 'CLI',
           'Registry', 'Unary', 'Binary', 'unary', 'binary',
           'PostfixError', 'InvalidExpressionError', 'UndefinedOperatorError',
           'MalformedExpressionError', 'BoundsError', 'ResultOverflowError',
           'ResultUnderflowError', 'UndefinedResultError',
           'Reason', 'Malformation')
