from pytest import fixture

from rpncalc.calculator import Calculator
from rpncalc.lexer import Lexer
from rpncalc.variables import VariableStore


@fixture
def lexer():
    return Lexer()


@fixture
def store():
    '''
    Empty, default sized variable store.
    '''
    return VariableStore()


@fixture
def calculator(store):
    '''
    Fresh session, sharing the store fixture so tests can inspect it.
    '''
    return Calculator(store)
