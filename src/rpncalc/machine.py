import logging
import math
import operator

import regex

from .stack import Stack
from .tokens import Kind
from .util import ErrorKind, EvaluationError, StackError, wrap_math_errors


log = logging.getLogger(__name__)


def checked_pow(base, exponent, range_):
    '''
    math.pow, failing with range_ on a pole (zero to a negative power) or
    when a nonzero finite result underflows to zero.
    '''
    if base == 0 and exponent < 0:
        raise EvaluationError(range_, 'pole at zero')
    result = math.pow(base, exponent)
    if result == 0 and base != 0 and \
       math.isfinite(base) and math.isfinite(exponent):
        raise EvaluationError(range_, 'underflow')
    return result


@wrap_math_errors(ErrorKind.POW_DOMAIN, ErrorKind.POW_RANGE)
def power(base, exponent):
    return checked_pow(base, exponent, ErrorKind.POW_RANGE)


def divide(left, right):
    if right == 0:
        raise EvaluationError(ErrorKind.DIVIDE_BY_ZERO)
    return left / right


@wrap_math_errors(ErrorKind.FUNCTION_DOMAIN, ErrorKind.FUNCTION_RANGE)
def sqrt(x, base):
    return math.sqrt(x)


@wrap_math_errors(ErrorKind.FUNCTION_DOMAIN, ErrorKind.FUNCTION_RANGE)
def log_(x, base):
    '''
    Logarithm of x in base, 2 unless given (log10, log3, ...).

    log(0) is a pole, so out of range rather than out of domain.
    '''
    if x == 0 or base == 0:
        raise EvaluationError(ErrorKind.FUNCTION_RANGE, 'pole at zero')
    return math.log(x) / math.log(base)


@wrap_math_errors(ErrorKind.FUNCTION_DOMAIN, ErrorKind.FUNCTION_RANGE)
def exp(x, base):
    '''
    base raised to x, 2 unless given (exp10, exp3, ...). Not e**x.
    '''
    return checked_pow(base, x, ErrorKind.FUNCTION_RANGE)


class Machine:
    '''
    Arithmetic stack machine (RPN evaluator).

    Takes an RPN token sequence and reduces it to a single number.
    '''

    # Binary operators, called with (left, right).
    OPERATORS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': divide,
        '^': power,
    }

    # Unary functions, called with (argument, base).
    FUNCTIONS = {
        'sqrt': sqrt,
        'log': log_,
        'exp': exp,
    }
    DEFAULT_BASE = 2.0

    # Function name, then optional numeric base: log, log10, exp1e3
    FUNCTION_NAME = regex.compile(r'(?<name>[A-Za-z]+)(?<base>.*)',
                                  flags=regex.VERSION1)

    MAX_STACK_SIZE = 1000

    def __init__(self, stack_size=None):
        self.stack_size = type(self).MAX_STACK_SIZE \
            if stack_size is None else stack_size

    def run(self, tokens):
        '''
        Evaluate an RPN token list and return its value.
        '''
        try:
            stack = Stack(self.stack_size)
        except (ValueError, MemoryError) as e:
            raise EvaluationError(ErrorKind.OUT_OF_MEMORY, str(e)) from e
        for token in tokens:
            if token.kind is Kind.EMPTY:
                break
            elif token.kind is Kind.NUMBER:
                self._push(stack, token.value)
            elif token.kind is Kind.OPERATOR:
                # If you don't reverse, you'll do 3-2 when you say 2 3 -.
                right = self._pop(stack)
                left = self._pop(stack)
                self._push(stack, self.operate(token.value, left, right))
            elif token.kind is Kind.FUNCTION:
                argument = self._pop(stack)
                self._push(stack, self.call(token.value, argument))
            else:
                raise EvaluationError(ErrorKind.UNDEFINED_NODE, repr(token))
        result = self._pop(stack)
        if stack:
            raise EvaluationError(ErrorKind.INVALID_EXPRESSION,
                                  '{} value(s) left over'.format(len(stack)))
        log.debug('result: %g', result)
        return result

    def operate(self, symbol, left, right):
        '''
        Apply binary operator symbol.
        '''
        try:
            f = type(self).OPERATORS[symbol]
        except KeyError:
            raise EvaluationError(ErrorKind.UNDEFINED_OPERATOR,
                                  repr(symbol)) from None
        return f(left, right)

    def call(self, name, argument):
        '''
        Apply function name, including its optional numeric base suffix.
        '''
        f, base = self.resolve(name)
        return f(argument, base)

    def resolve(self, name):
        '''
        Split a function name into its callable and base.
        '''
        match = type(self).FUNCTION_NAME.fullmatch(name)
        if match is None or match.group('name') not in type(self).FUNCTIONS:
            raise EvaluationError(ErrorKind.UNDEFINED_FUNCTION, name)
        suffix = match.group('base')
        if not suffix:
            return type(self).FUNCTIONS[match.group('name')], \
                type(self).DEFAULT_BASE
        try:
            base = float(suffix)
        except ValueError:
            raise EvaluationError(ErrorKind.UNDEFINED_FUNCTION,
                                  name) from None
        if not math.isfinite(base):
            raise EvaluationError(ErrorKind.FUNCTION_RANGE, name)
        return type(self).FUNCTIONS[match.group('name')], base

    def _push(self, stack, value):
        try:
            stack.push(Kind.NUMBER, value)
        except StackError as e:
            raise EvaluationError(ErrorKind.STACK_FULL) from e

    def _pop(self, stack):
        try:
            return stack.pop(Kind.NUMBER)
        except StackError as e:
            raise EvaluationError(ErrorKind.NOT_ENOUGH_ARGUMENTS) from e
