from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import InMemoryHistory

from .calculator import Assigned, Calculator, Failed, Printed
from .infix import validate
from .tokens import live
from .util import CalcError
from .variables import VariableStore


BANNER = '''\
               Simple calculator
<-- Type expression below to get its result   -->
<-- Available commands : sqrt, expN, logN     -->
<--    where: N - base parameter (default: 2) -->'''

ERROR_STYLE = 'ansired bold underline'


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    # Session only; variables don't persist
                                    # either.
                                    history=InMemoryHistory(),
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '$ '
    QUIT = 'quit'

    def report(self, outcome):
        '''
        Print outcome of one line: value, nothing, or error.
        '''
        if isinstance(outcome, Printed):
            print('{:g}'.format(outcome.value), flush=True)
        elif isinstance(outcome, Assigned):
            if self.args.verbose:
                print('{} = {:g}'.format(*outcome), file=sys.stderr)
        elif isinstance(outcome, Failed):
            self.error('{} ({})'.format(outcome.kind.message,
                                        outcome.kind.name))

    def error(self, message):
        '''
        Print error message, in colour on a terminal.
        '''
        if sys.stderr.isatty():
            print_formatted_text(FormattedText([(ERROR_STYLE, message)]),
                                 file=sys.stderr)
        else:
            print(message, file=sys.stderr)

    def listvars(self):
        '''
        Print every variable, oldest first.
        '''
        for name, value in self.calculator.variables:
            print('{} = {:g}'.format(name, value))

    def printhelp(self):
        print(BANNER)

    # In-session commands, besides quit.
    COMMANDS = {
        'vars': listvars,
        'help': printhelp,
    }

    def lines(self):
        '''
        Yield stripped, non-blank input lines until quit.
        '''
        for line in self.args.expressions:
            line = line.strip()
            if not line:
                continue
            if line == self.QUIT:
                return
            yield line

    def dumper(self):
        '''
        Dump assignment target, normalized infix and RPN of each line,
        without evaluating.
        '''
        print('[target]\t<infix>\t<rpn>')
        for line in self.lines():
            try:
                infix = validate(self.calculator.lexer.tokenize(line))
                target, rpn = self.calculator.parse(line)
            except CalcError as e:
                self.error('{} ({})'.format(e, e.kind.name))
                continue
            print(target or '-', ' '.join(map(str, live(infix))),
                  ' '.join(map(str, live(rpn))), sep='\t')

    def executor(self):
        '''
        Evaluate each line, printing results and errors.
        '''
        if self._interactive():
            self.printhelp()
        for line in self.lines():
            command = type(self).COMMANDS.get(line)
            if command is not None:
                command(self)
                continue
            self.report(self.calculator.evaluate(line))

    def _prompting_input(self):
        '''
        Return the line source: an interactive prompt, or plain stdin.

        Prompt if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix calculator with variables')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log every evaluation stage')
        self.argument_parser.add_argument('--max-variables',
                                          type=int,
                                          default=VariableStore.CAPACITY,
                                          metavar='N')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('-D', '--dump',
                                          action='store_const',
                                          const=self.dumper,
                                          dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING,
                            format='%(levelname)s %(name)s: %(message)s',
                            stream=sys.stderr)
        if self.args.max_variables < 1:
            self.argument_parser.error('--max-variables must be positive')
        self.calculator = Calculator(VariableStore(self.args.max_variables))
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
        finally:
            self.calculator.variables.clear()
