from .operators import NUMERIC
from .util import MalformedExpressionError, Malformation, UndefinedResultError


class Machine:
    '''
    Integer stack machine (postfix evaluator).

    Holds the operand stack of a single expression. Feed it tokens left to
    right, then take the result.
    '''

    def __init__(self, operators, expression=None):
        '''
        :param operators: Mapping of token to Unary/Binary operator.
        :param expression: Expression being evaluated, quoted in errors.
        '''
        self.operators = operators
        self.expression = expression
        self.stack = []

    def feed(self, token):
        '''
        Stack a literal or apply an operator.
        '''
        operator = self.operators.get(token)
        if operator is not None:
            self._apply(operator)
        elif NUMERIC.match(token):
            self._pshstack(int(token))
        else:
            raise MalformedExpressionError(Malformation.UNRECOGNIZED_TOKEN,
                                           self.expression,
                                           detail=repr(token))

    def _apply(self, operator):
        '''
        Apply operator to the stack, popping as many operands as it takes.
        '''
        # If you don't reverse, you'll do 2**9 when you say 9 2 ^ instead of
        # 9**2.
        args = reversed(self._popstack(operator.arity))
        res = operator(*args)
        if type(res) is not int:
            raise UndefinedResultError('Operator result is not an integer: '
                                       '{!r}'.format(res))
        self._pshstack(res)

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of operands from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise MalformedExpressionError(Malformation.NOT_ENOUGH_LITERALS,
                                           self.expression)
        return [self.stack.pop() for _ in range(n)]

    def result(self):
        '''
        Return the one value left on the stack.
        '''
        if len(self.stack) != 1:
            raise MalformedExpressionError(Malformation.TOO_MANY_LITERALS,
                                           self.expression)
        return self.stack[-1]
