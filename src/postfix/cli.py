from os import isatty, path
import sys
from sys import stdin, stdout
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .engine import PostfixEngine
from .infix import simplify
from .util import PostfixError


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=self.history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the postfix engine.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.postfix_history'

    def _lines(self):
        for line in self.args.expressions:
            line = line.strip()
            if line:
                yield line

    def _report(self, error):
        '''
        Print a user error and remember that something failed.
        '''
        self.failed = True
        logger.debug('Failed', exc_info=error)
        print(error.args[0], file=sys.stderr)

    def evaluator(self):
        '''
        Evaluate every line, printing each result.
        '''
        evaluate = (self.engine.evaluate_infix if self.args.infix
                    else self.engine.evaluate)
        for line in self._lines():
            try:
                print(evaluate(line))
            # Abort the line, carry on with the next
            except PostfixError as e:
                self._report(e)

    def converter(self):
        '''
        Print the postfix form of every infix line.
        '''
        for line in self._lines():
            try:
                print(self.engine.convert_infix_expression(line))
            except PostfixError as e:
                self._report(e)

    def dumper(self):
        '''
        Dump all infix lexemes, their kind, and arity.
        '''
        lexer = self.engine.lexer()
        print('<kind>\t<repr>\t<arity>')
        for line in self._lines():
            try:
                for match in lexer.lex(simplify(line), source=line):
                    print(lexer.kind(match),
                          repr(match.group(0)),
                          lexer.arity(match),
                          sep='\t')
            except PostfixError as e:
                self._report(e)

    def raw_grammar(self):
        '''
        Print the infix grammar for the operators currently registered.
        '''
        print(self.engine.lexer().LEXEME)

    def operators(self):
        '''
        Print every supported operator and its arity.
        '''
        for token in sorted(self.engine.get_supported_operators()):
            print(token, self.engine.lookup(token).arity, sep='\t')

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Postfix engine')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-i', '--infix',
                                          action='store_true',
                                          help='expressions are infix')
        self.argument_parser.add_argument('-b', '--bits',
                                          type=int,
                                          default=PostfixEngine.DEFAULT_BITS,
                                          help='width of the signed result')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-c', '--convert', self.converter),
                                      ('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper),
                                      ('-O', '--operators', self.operators)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.evaluator,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Return exit status: 1 if any expression failed.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING)
        try:
            self.engine = PostfixEngine(bits=self.args.bits)
        except ValueError as e:
            self.argument_parser.error(str(e))
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        self.failed = False
        try:
            self.args.action()
        except KeyboardInterrupt:
            return 1
        return 1 if self.failed else 0
