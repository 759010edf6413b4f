from pytest import Item, fixture

from postfix import Lexer, PostfixEngine
from postfix.operators import BUILTINS


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases. Only called with enable_assertion_pass_hook set.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def engine() -> PostfixEngine:
    '''
    Engine with only the default operators, 32 bits.
    '''
    return PostfixEngine()


@fixture
def lexer() -> Lexer:
    return Lexer(BUILTINS)
