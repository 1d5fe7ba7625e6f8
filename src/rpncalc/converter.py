import logging

from .stack import Stack
from .tokens import Kind, Token
from .util import ConversionError, ErrorKind, StackError, VariableNotFound


log = logging.getLogger(__name__)


class Converter:
    '''
    Infix to RPN converter (shunting-yard).

    Variables are looked up while converting, and end up in the RPN sequence
    as plain numbers.
    '''

    # Binding power of each operator. '(' sits on the operator stack too, and
    # must never be popped by an operator.
    PRIORITIES = {
        '(': 0,
        '+': 1,
        '-': 1,
        '*': 2,
        '/': 2,
        '^': 3,
    }
    RIGHT_ASSOCIATIVE = frozenset('^')

    MAX_STACK_SIZE = 1000

    def __init__(self, variables, stack_size=None):
        '''
        :param variables: VariableStore to resolve names against. Only read.
        :param stack_size: Capacity of the operator stack.
        '''
        self.variables = variables
        self.stack_size = type(self).MAX_STACK_SIZE \
            if stack_size is None else stack_size

    def dominates(self, top, current):
        '''
        Return True if operator top has to be output before current is pushed.
        '''
        priorities = type(self).PRIORITIES
        if current in type(self).RIGHT_ASSOCIATIVE:
            return priorities[top] > priorities[current]
        return priorities[top] >= priorities[current]

    def convert(self, tokens):
        '''
        Convert normalized infix tokens to an RPN token list.

        The result is terminated by an EMPTY sentinel, like the input.
        '''
        try:
            stack = Stack(self.stack_size)
        except (ValueError, MemoryError) as e:
            raise ConversionError(ErrorKind.OUT_OF_MEMORY, str(e)) from e
        output = []
        for token in tokens:
            if token.kind is Kind.EMPTY:
                break
            handler = self.HANDLERS.get(token.kind)
            if handler is None:
                raise ConversionError(ErrorKind.UNDEFINED_NODE,
                                      repr(token))
            try:
                handler(self, token, stack, output)
            except StackError as e:
                if e.kind is ErrorKind.FULL:
                    raise ConversionError(ErrorKind.STACK_FULL) from e
                raise
        while stack:
            output.append(Token(*stack.pop_struct()))
        output.append(Token.empty())
        log.debug('rpn: %s', ' '.join(map(str, output[:-1])))
        return output

    def _number(self, token, stack, output):
        output.append(Token.number(token.value))

    def _variable(self, token, stack, output):
        try:
            value = self.variables.get(token.value)
        except VariableNotFound as e:
            raise ConversionError(ErrorKind.UNDEFINED_VARIABLE,
                                  token.value) from e
        output.append(Token.number(value))

    def _function(self, token, stack, output):
        stack.push(Kind.FUNCTION, token.value)

    def _operator(self, token, stack, output):
        current = token.value
        while stack and stack.peek().kind is Kind.OPERATOR and \
                self.dominates(stack.peek().value, current):
            output.append(Token.operator(stack.pop(Kind.OPERATOR)))
        stack.push(Kind.OPERATOR, current)

    def _bracket_left(self, token, stack, output):
        stack.push(Kind.OPERATOR, '(')

    def _bracket_right(self, token, stack, output):
        while True:
            try:
                top = stack.pop(Kind.OPERATOR)
            except StackError as e:
                raise ConversionError(ErrorKind.MISSING_BRACKET) from e
            if top == '(':
                break
            output.append(Token.operator(top))
        # Bracket was a function's argument list.
        if stack and stack.peek().kind is Kind.FUNCTION:
            output.append(Token(Kind.FUNCTION, stack.pop(Kind.FUNCTION)))

    def _deleted(self, token, stack, output):
        pass

    HANDLERS = {
        Kind.NUMBER: _number,
        Kind.VARIABLE: _variable,
        Kind.FUNCTION: _function,
        Kind.OPERATOR: _operator,
        Kind.BRACKET_LEFT: _bracket_left,
        Kind.BRACKET_RIGHT: _bracket_right,
        Kind.DELETED: _deleted,
    }
