import logging

import regex

from .infix import to_postfix, validate_and_simplify
from .lexer import Lexer
from .machine import Machine
from .operators import Registry
from .util import (MalformedExpressionError, Malformation,
                   ResultOverflowError, ResultUnderflowError)


logger = logging.getLogger(__name__)


class PostfixEngine:
    '''
    A math engine evaluating integer expressions in postfix notation.

    All literals must be integers, and every operation yields an integer.
    Infix expressions are converted to postfix first; the conversion ignores
    operator precedence, grouping only by parentheses.

    The following binary operators are registered by default:

    - ``+``          Addition
    - ``-``          Subtraction
    - ``x`` or ``*`` Multiplication
    - ``/``          Division, truncating
    - ``%``          Modulus, sign of the dividend
    - ``^``          Exponentiation
    - ``<``          Left shift
    - ``>``          Right shift

    and these unary ones:

    - ``Q``          Square root
    - ``C``          Cube root

    More may be added with register(), passing a Unary, a Binary, or a plain
    function of one or two arguments.

    Results outside a signed ``bits`` wide integer raise ResultOverflowError
    or ResultUnderflowError, carrying the true value.
    '''

    DEFAULT_BITS = 32
    # Postfix tokens are separated by any whitespace
    TOKEN_SEPARATOR = regex.compile(r'\s+')

    def __init__(self, bits=None):
        '''
        Create an engine with the default operators.

        :param bits: Width of the signed integer result domain.
        '''
        if bits is None:
            bits = type(self).DEFAULT_BITS
        if bits < 2:
            raise ValueError('Need at least 2 bits, got {}'.format(bits))
        self.bits = bits
        self.registry = Registry()

    @property
    def MIN_VALUE(self):
        return -(1 << (self.bits - 1))

    @property
    def MAX_VALUE(self):
        return (1 << (self.bits - 1)) - 1

    def register(self, token, operator):
        '''
        Registers ``token`` to ``operator``, overwriting any earlier one.
        '''
        self.registry.register(token, operator)

    def is_valid_operator(self, token):
        return self.registry.is_valid_operator(token)

    def get_supported_operators(self):
        '''
        Return the frozen set of all registered operator tokens.
        '''
        return self.registry.supported_operators()

    def lookup(self, token):
        return self.registry.lookup(token)

    def lexer(self):
        '''
        Return an infix lexer for the operators currently registered.
        '''
        return Lexer(self.registry.snapshot())

    def validate_and_simplify(self, expression):
        '''
        Check an infix expression, returning it with whitespace simplified.
        '''
        return validate_and_simplify(expression, self.lexer())

    def convert_infix_expression(self, expression):
        '''
        Converts a valid infix expression to postfix notation.
        '''
        return self._convert(expression, self.registry.snapshot())

    def evaluate(self, expression):
        '''
        Evaluates a postfix expression.

        :raises MalformedExpressionError: If tokens and operands don't add up.
        :raises BoundsError: If the result does not fit in ``bits``.
        '''
        return self._evaluate(expression, self.registry.snapshot())

    def evaluate_infix(self, expression):
        '''
        Evaluates an infix expression by converting it to postfix first.
        '''
        operators = self.registry.snapshot()
        return self._evaluate(self._convert(expression, operators), operators,
                              source=expression)

    def _convert(self, expression, operators):
        lexer = Lexer(operators)
        simplified = validate_and_simplify(expression, lexer)
        converted = to_postfix(simplified, lexer, source=expression)
        logger.debug('Converted %r to %r', expression, converted)
        return converted

    def _evaluate(self, expression, operators, source=None):
        '''
        Evaluate postfix ``expression``, quoting ``source`` (or the postfix)
        in errors.
        '''
        source = expression if source is None else source
        if expression is None or not expression.strip():
            raise MalformedExpressionError(Malformation.EMPTY, source)
        machine = Machine(operators, source)
        for token in self.TOKEN_SEPARATOR.split(expression.strip()):
            machine.feed(token)
        value = machine.result()
        if value > self.MAX_VALUE:
            raise ResultOverflowError(value, source, self.MAX_VALUE)
        elif value < self.MIN_VALUE:
            raise ResultUnderflowError(value, source, self.MIN_VALUE)
        logger.debug('Evaluated %r to %d', expression, value)
        return value
