'''
Infix validation, simplification and conversion to postfix.

Whitespace runs are first collapsed into the separator placeholder, so that
``3+4``, ``3 + 4`` and ``3\t+  4`` all lex alike, and the operand checks can
tell separators apart from operands by looking at a single character.
'''

from string import digits

import regex

from .operators import SEPARATOR
from .util import InvalidExpressionError, Reason


WHITESPACE = regex.compile(r'\s+')

# What may come right before a binary operator
BINARY_LEFT = frozenset(digits + ')' + SEPARATOR)
# What may come right after a unary operator, besides a negative literal
UNARY_RIGHT = frozenset(digits + '(' + SEPARATOR)


def check_parentheses(expression):
    '''
    Raise InvalidExpressionError unless every '(' is closed, in order.
    '''
    depth = 0
    for char in expression:
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
            if depth < 0:
                break
    if depth:
        raise InvalidExpressionError(Reason.UNMATCHED_PARENTHESIS, expression)


def simplify(expression):
    '''
    Replace every whitespace run with a single separator.
    '''
    return WHITESPACE.sub(SEPARATOR, expression.strip())


def _starts_negative_literal(lexer, line, pos):
    match = lexer.pattern.match(line, pos)
    return match is not None and lexer.kind(match) == 'literal'


def validate_and_simplify(expression, lexer):
    '''
    Validate an infix expression, returning its simplified form.

    :param expression: Infix expression, as typed.
    :param lexer: Lexer bound to the operators in effect.
    :raises InvalidExpressionError: With the first problem found.
    '''
    if expression is None or not expression.strip():
        raise InvalidExpressionError(Reason.EMPTY, expression)
    check_parentheses(expression)
    simplified = simplify(expression)

    for match in lexer.lex(simplified, source=expression):
        arity = lexer.arity(match)
        token = match.group(0)
        if arity == 1:
            after = simplified[match.end():match.end() + 1]
            if not (after and after in UNARY_RIGHT or
                    after == '-' and
                    _starts_negative_literal(lexer, simplified, match.end())):
                raise InvalidExpressionError(Reason.MISSING_UNARY_OPERAND,
                                             expression,
                                             detail='for {!r}'.format(token))
        elif arity == 2:
            before = simplified[match.start() - 1] if match.start() else ''
            if not (before and before in BINARY_LEFT):
                raise InvalidExpressionError(Reason.MISSING_BINARY_OPERAND,
                                             expression,
                                             detail='for {!r}'.format(token))
    return simplified


def to_postfix(simplified, lexer, source=None):
    '''
    Rewrite a simplified infix expression in postfix.

    Operator precedence is not considered: an incoming operator flushes
    every pending operator up to the enclosing parenthesis, so ``3 + 4 * 2``
    becomes ``3 4 + 2 *``.
    '''
    source = simplified if source is None else source
    output = []
    stack = []
    for kind, token in lexer.tokens(simplified, source):
        if kind == 'operator':
            while stack and stack[-1] != '(':
                output.append(stack.pop())
            stack.append(token)
        elif kind == 'open':
            stack.append(token)
        elif kind == 'close':
            while stack and stack[-1] != '(':
                output.append(stack.pop())
            if not stack:
                raise InvalidExpressionError(Reason.UNMATCHED_PARENTHESIS,
                                             source)
            stack.pop()
        else:
            output.append(token)

    while stack:
        token = stack.pop()
        if token == '(':
            raise InvalidExpressionError(Reason.UNMATCHED_PARENTHESIS, source)
        output.append(token)
    return ' '.join(output)
