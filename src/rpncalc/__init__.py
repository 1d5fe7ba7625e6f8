'''
Infix calculator.

Evaluates lines like ``2 + 3 * 4``, ``x = sqrt(16) ^ 2`` or ``log10(x)``:
numbers, + - * / ^ (or **), brackets, the sqrt, logN and expN functions, and
variables.

Each line is lexed into tokens, validated, converted to RPN with the
shunting-yard algorithm, and run on a small stack machine. Variables are
resolved while converting, so the RPN only ever holds numbers.
'''

from .calculator import Assigned, Calculator, Failed, Printed
from .cli import CLI
from .converter import Converter
from .lexer import Lexer
from .machine import Machine
from .util import CalcError, ErrorKind
from .variables import VariableStore


__all__ = ('Calculator', 'Printed', 'Assigned', 'Failed', 'CalcError',
           'ErrorKind', 'VariableStore', 'Lexer', 'Converter', 'Machine',
           'CLI')
