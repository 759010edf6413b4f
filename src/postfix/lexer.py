from functools import reduce
import operator

import regex

from .operators import SEPARATOR
from .util import InvalidExpressionError, Reason


class Lexer:
    '''
    Lexer for the simplified infix *regular* grammar.

    Bound to a snapshot of operators, since those can be registered at any
    time. Only single character operators take part in infix expressions.
    '''
    # Integer literal. The minus sign belongs to the literal only where an
    # operand is expected: not right after a digit or a closing parenthesis,
    # separators notwithstanding. Variable length lookbehind; needs regex.
    LITERAL = r'''
               (?:
                   (?<! [0-9)] _* )
                   -
               )?
               [0-9]+
               '''
    OPEN = r'\('
    CLOSE = r'\)'
    SPACE = regex.escape(SEPARATOR) + r'+'
    # Matches nothing; stands in for an empty operator set
    NOTHING = r'(?!)'

    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self, operators):
        '''
        :param operators: Mapping of token to Unary/Binary operator.
        '''
        self.operators = operators
        singles = sorted(token for token in operators if len(token) == 1)
        if singles:
            escaped = (regex.escape(token, special_only=False)
                       for token in singles)
            self.OPERATOR = r'(?:' + r'|'.join(escaped) + r')'
        else:
            self.OPERATOR = type(self).NOTHING
        # All possible lexemes.
        self.LEXEME = r'(?<literal>' + self.LITERAL + r')|' \
                      r'(?<open>' + self.OPEN + r')|' \
                      r'(?<close>' + self.CLOSE + r')|' \
                      r'(?<operator>' + self.OPERATOR + r')|' \
                      r'(?<space>' + self.SPACE + r')'
        self.pattern = regex.compile(self.LEXEME, flags=type(self).FLAGS)

    def lex(self, line, source=None):
        '''
        Take a simplified line and yield all lexemes.

        Stops on the first character that starts no lexeme, raising
        InvalidExpressionError quoting ``source`` (or ``line``).
        '''
        pos = 0
        while pos < len(line):
            match = self.pattern.match(line, pos)
            if match is None:
                raise InvalidExpressionError(Reason.UNRECOGNIZED_TOKEN,
                                             line if source is None else source,
                                             detail=repr(line[pos]))
            yield match
            pos = match.end()

    def tokens(self, line, source=None):
        '''
        Yield (kind, text) of every lexeme but separators.
        '''
        for match in self.lex(line, source):
            if self.isfeedable(match):
                yield self.kind(match), match.group(0)

    def kind(self, match):
        '''
        Return name of the group the lexeme matched: literal, open, close,
        operator or space.
        '''
        return match.lastgroup

    def isfeedable(self, match):
        '''
        Return True if lexeme is more than a separator.
        '''
        return self.kind(match) != 'space'

    def arity(self, match):
        '''
        Return number of operands of an operator lexeme, None otherwise.
        '''
        if self.kind(match) != 'operator':
            return None
        return self.operators[match.group(0)].arity
