from collections import namedtuple
import logging

from .converter import Converter
from .infix import validate
from .lexer import Lexer
from .machine import Machine
from .tokens import Kind
from .util import CalcError
from .variables import VariableStore


log = logging.getLogger(__name__)


# Outcomes of evaluating one line.
Printed = namedtuple('Printed', 'value')
Assigned = namedtuple('Assigned', 'name value')
Failed = namedtuple('Failed', 'kind')


class Calculator:
    '''
    Evaluates infix expression lines, one at a time, against its variables.

    One Calculator is one session: variables assigned by a line are visible
    to every later line.
    '''

    def __init__(self, variables=None, *, max_tokens=None, stack_size=None):
        '''
        :param variables: VariableStore; a fresh default sized one if None.
        :param max_tokens: Most tokens a line may have.
        :param stack_size: Capacity of the converter and machine stacks.
        '''
        self.variables = VariableStore() if variables is None else variables
        self.lexer = Lexer(max_tokens=max_tokens)
        self.converter = Converter(self.variables, stack_size=stack_size)
        self.machine = Machine(stack_size=stack_size)

    def parse(self, line):
        '''
        Tokenize and validate line.

        Return the assignment target name (or None) and the expression's RPN
        token list.
        '''
        tokens = validate(self.lexer.tokenize(line))
        target = None
        if tokens[0].kind is Kind.VARIABLE and tokens[1].kind is Kind.EQUALS:
            # Assignment target is not part of the expression.
            target = tokens[0].value
            tokens = tokens[2:]
        return target, self.converter.convert(tokens)

    def calculate(self, line):
        '''
        Evaluate line, returning Printed or Assigned, raising CalcError.

        Variables are only written once the whole line succeeded.
        '''
        target, rpn = self.parse(line)
        value = self.machine.run(rpn)
        if target is None:
            return Printed(value)
        self.variables.set(target, value)
        return Assigned(target, value)

    def evaluate(self, line):
        '''
        Evaluate line, returning Printed, Assigned or Failed.

        Never raises for bad input; the session carries on either way.
        '''
        try:
            return self.calculate(line)
        except CalcError as e:
            log.debug('%r failed: %s', line, e)
            return Failed(e.kind)
