'''
Infix validation and conversion tests
'''

from postfix.infix import check_parentheses, simplify, to_postfix, \
    validate_and_simplify
from postfix.util import InvalidExpressionError, Reason

from pytest import mark, raises


@mark.parametrize('expression,expected', [
    ('3 + 4', '3_+_4'),
    (' 3\t+   4 ', '3_+_4'),
    ('3+4', '3+4'),
    ('( 3 + 4 )\n* 2', '(_3_+_4_)_*_2'),
])
def test_simplify(expression, expected):
    assert simplify(expression) == expected


@mark.parametrize('expression', ['()', '(())', '(3)+(4)', 'no parentheses'])
def test_balanced_parentheses(expression):
    check_parentheses(expression)


@mark.parametrize('expression', ['(3+4', '3+4)', ')3+4(', '(()'])
def test_unbalanced_parentheses(expression, lexer):
    with raises(InvalidExpressionError) as excinfo:
        validate_and_simplify(expression, lexer)
    assert excinfo.value.reason is Reason.UNMATCHED_PARENTHESIS


@mark.parametrize('expression', [None, '', '   ', '\t\n'])
def test_empty(expression, lexer):
    with raises(InvalidExpressionError) as excinfo:
        validate_and_simplify(expression, lexer)
    assert excinfo.value.reason is Reason.EMPTY


@mark.parametrize('expression,expected', [
    ('3 + 4', '3_+_4'),
    ('Q16', 'Q16'),
    ('Q 16', 'Q_16'),
    ('Q(16)', 'Q(16)'),
    ('Q-16', 'Q-16'),
    ('-3 + 4', '-3_+_4'),
    ('3 + -4', '3_+_-4'),
    ('3+-4', '3+-4'),
    ('(3 + 4) x 2', '(3_+_4)_x_2'),
])
def test_valid(expression, expected, lexer):
    assert validate_and_simplify(expression, lexer) == expected


@mark.parametrize('expression', ['Q', '3 + Q', 'QQ16', '(Q)'])
def test_missing_unary_operand(expression, lexer):
    with raises(InvalidExpressionError) as excinfo:
        validate_and_simplify(expression, lexer)
    assert excinfo.value.reason is Reason.MISSING_UNARY_OPERAND


@mark.parametrize('expression', ['+3', '(+3)', '3 + (* 4)', 'x 2'])
def test_missing_binary_operand(expression, lexer):
    with raises(InvalidExpressionError) as excinfo:
        validate_and_simplify(expression, lexer)
    assert excinfo.value.reason is Reason.MISSING_BINARY_OPERAND


@mark.parametrize('expression', ['3 $ 4', '3.5 + 1', 'a + b'])
def test_unrecognized_token(expression, lexer):
    with raises(InvalidExpressionError) as excinfo:
        validate_and_simplify(expression, lexer)
    assert excinfo.value.reason is Reason.UNRECOGNIZED_TOKEN
    assert repr(expression) in str(excinfo.value)


@mark.parametrize('simplified,expected', [
    ('3_+_4', '3 4 +'),
    ('(_3_+_4_)_*_2', '3 4 + 2 *'),
    # No precedence: flushed in order of arrival
    ('3_+_4_*_2', '3 4 + 2 *'),
    ('3_*_(4_+_2)', '3 4 2 + *'),
    ('2_^_3_^_2', '2 3 ^ 2 ^'),
    ('Q_16_+_9', '16 Q 9 +'),
    ('Q(16_+_9)', '16 9 + Q'),
    ('-3_+_4', '-3 4 +'),
    ('3-4', '3 4 -'),
    ('((7))', '7'),
])
def test_to_postfix(simplified, expected, lexer):
    assert to_postfix(simplified, lexer) == expected


@mark.parametrize('simplified', ['3)', '(3', '1_+_2)_*_(3'])
def test_to_postfix_unmatched(simplified, lexer):
    with raises(InvalidExpressionError) as excinfo:
        to_postfix(simplified, lexer)
    assert excinfo.value.reason is Reason.UNMATCHED_PARENTHESIS
