from enum import Enum
from functools import wraps


class ErrorKind(Enum):
    '''
    Every way a line can fail, grouped by the stage that reports it.

    Each kind is an (error code, message) pair. Codes are distinct; messages
    may be shared by kinds the user can't tell apart.
    '''
    # Lexer
    UNDEFINED_CHARACTER = 2, 'Improper character found in input'
    NUMBER_TOO_LARGE = 3, 'Number in input is too big'
    TOO_MANY_TOKENS = 23, 'Too many symbols in input'

    # Infix validation
    INVALID_EQUALS = 4, 'Invalid use of equals sign'
    TOO_MANY_OPEN_BRACKETS = 5, 'Too many opening brackets'
    TOO_MANY_CLOSE_BRACKETS = 6, 'Too many closing brackets'

    # Conversion to RPN
    OUT_OF_MEMORY = 1, 'Out of memory!'
    STACK_FULL = 10, 'Stack overflow'
    UNDEFINED_VARIABLE = 8, 'Undefined variable found in input'
    MISSING_BRACKET = 11, 'Missing brackets in expression'
    UNDEFINED_NODE = 9, 'Invalid expression'

    # RPN evaluation
    NOT_ENOUGH_ARGUMENTS = 17, 'More operators than arguments in expression'
    DIVIDE_BY_ZERO = 18, 'Attempted to divide by zero!'
    POW_DOMAIN = 19, 'Computation of function failed: incorrect domain'
    POW_RANGE = 20, 'Computation of function failed: out of range'
    UNDEFINED_OPERATOR = 21, 'Undefined operation found in input'
    UNDEFINED_FUNCTION = 14, 'Undefined function found in input'
    FUNCTION_DOMAIN = 12, 'Computation of function failed: incorrect domain'
    FUNCTION_RANGE = 13, 'Computation of function failed: out of range'
    INVALID_EXPRESSION = 24, 'More arguments than operators in expression'

    # Variable store
    NOT_FOUND = -100, 'Undefined variable used in input'
    NO_FREE_SPACE = -102, 'Maximum number of variables exceeded'

    # Stack
    FULL = -202, 'Stack is full'
    EMPTY = -203, 'Stack is empty'
    UNKNOWN_TYPE = -204, 'Unsupported stack frame type'
    INVALID_TYPE = -205, 'Unexpected stack frame type'

    def __init__(self, code, message):
        self.code = code
        self.message = message


class CalcError(Exception):
    '''
    Base of every user-facing calculator failure.

    Carries the ErrorKind so callers can branch without parsing messages.
    '''
    def __init__(self, kind, detail=None):
        self.kind = kind
        self.detail = detail
        message = kind.message
        if detail is not None:
            message = '{}: {}'.format(message, detail)
        super().__init__(message)


class LexError(CalcError):
    pass


class ValidationError(CalcError):
    pass


class ConversionError(CalcError):
    pass


class EvaluationError(CalcError):
    pass


class VariableError(CalcError):
    pass


class VariableNotFound(VariableError):
    def __init__(self, name):
        super().__init__(ErrorKind.NOT_FOUND, name)
        self.name = name


class NoFreeSpace(VariableError):
    pass


class StackError(CalcError):
    pass


def wrap_math_errors(domain, range_):
    '''
    Decorator that converts math module faults into EvaluationErrors.

    ValueError (and division by zero inside a formula) means the argument was
    outside the function's domain; OverflowError means the result was out of
    range. CalcErrors pass through untouched.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except (ValueError, ZeroDivisionError) as e:
                raise EvaluationError(domain, str(e)) from e
            except OverflowError as e:
                raise EvaluationError(range_, str(e)) from e
        return wrapper
    return decorator
