'''
RPN machine tests
'''

from rpncalc.machine import Machine
from rpncalc.tokens import Kind, Token
from rpncalc.util import ErrorKind, EvaluationError

from pytest import approx, mark, raises


def program(*items):
    '''
    Build an RPN token list: numbers, operator symbols, function names.
    '''
    tokens = []
    for item in items:
        if isinstance(item, (int, float)):
            tokens.append(Token.number(item))
        elif item in Machine.OPERATORS or item == '%':
            tokens.append(Token.operator(item))
        else:
            tokens.append(Token(Kind.FUNCTION, item))
    tokens.append(Token.empty())
    return tokens


def run(*items, **kwargs):
    return Machine(**kwargs).run(program(*items))


def failure(*items, **kwargs):
    with raises(EvaluationError) as info:
        run(*items, **kwargs)
    return info.value.kind


@mark.parametrize('items, expected', [
    ((2, 3, '+'), 5),
    ((2, 3, '-'), -1),
    ((2, 3, '*'), 6),
    ((3, 2, '/'), 1.5),
    ((2, 10, '^'), 1024),
    ((2, 3, 4, '*', '+'), 14),
    ((-8, 3, '^'), -512),
])
def test_operators(items, expected):
    assert run(*items) == expected


@mark.parametrize('items, expected', [
    ((16, 'sqrt'), 4),
    ((8, 'log'), 3),
    ((1000, 'log10'), 3),
    ((81, 'log3'), 4),
    ((3, 'exp'), 8),
    ((2, 'exp10'), 100),
    ((0.5, 'exp4'), 2),
])
def test_functions(items, expected):
    assert run(*items) == approx(expected)


def test_divide_by_zero():
    assert failure(1, 0, '/') is ErrorKind.DIVIDE_BY_ZERO


def test_pow_domain():
    assert failure(-8, 0.5, '^') is ErrorKind.POW_DOMAIN


@mark.parametrize('items', [
    (10, 1000, '^'),
    # Pole
    (0, -1, '^'),
    # Underflow
    (10, -400, '^'),
])
def test_pow_range(items):
    assert failure(*items) is ErrorKind.POW_RANGE


def test_pow_exact_zero():
    assert run(0, 2, '^') == 0


@mark.parametrize('items', [(-1, 'sqrt'), (-8, 'log'), (8, 'log1')])
def test_function_domain(items):
    assert failure(*items) is ErrorKind.FUNCTION_DOMAIN


@mark.parametrize('items', [
    (2000, 'exp10'),
    (-2000, 'exp10'),
    (0, 'log'),
    (-1, 'exp0'),
    (1, 'exp1e400'),
    (8, 'log1e400'),
])
def test_function_range(items):
    assert failure(*items) is ErrorKind.FUNCTION_RANGE


@mark.parametrize('name', ['foo', 'log1b', 'sqr', 'logexp'])
def test_undefined_function(name):
    assert failure(4, name) is ErrorKind.UNDEFINED_FUNCTION


def test_undefined_operator():
    assert failure(4, 2, '%') is ErrorKind.UNDEFINED_OPERATOR


@mark.parametrize('items', [('+',), (1, '+'), ('sqrt',), ()])
def test_not_enough_arguments(items):
    assert failure(*items) is ErrorKind.NOT_ENOUGH_ARGUMENTS


def test_leftover_values():
    assert failure(1, 2) is ErrorKind.INVALID_EXPRESSION


def test_undefined_node():
    tokens = [Token(Kind.VARIABLE, 'x'), Token.empty()]
    with raises(EvaluationError) as info:
        Machine().run(tokens)
    assert info.value.kind is ErrorKind.UNDEFINED_NODE


def test_stack_full():
    assert run(1, 2, '+', stack_size=2) == 3
    assert failure(1, 2, 3, stack_size=2) is ErrorKind.STACK_FULL


def test_fresh_stack_per_run():
    machine = Machine()
    tokens = program(2, 3, '*')
    assert machine.run(tokens) == machine.run(tokens) == 6


def test_power_and_function_errors_share_messages():
    assert ErrorKind.POW_DOMAIN.message == ErrorKind.FUNCTION_DOMAIN.message \
        == 'Computation of function failed: incorrect domain'
    assert ErrorKind.POW_RANGE.message == ErrorKind.FUNCTION_RANGE.message \
        == 'Computation of function failed: out of range'
    assert ErrorKind.POW_DOMAIN is not ErrorKind.FUNCTION_DOMAIN
    assert ErrorKind.POW_RANGE is not ErrorKind.FUNCTION_RANGE


def test_error_codes_are_distinct():
    codes = [kind.code for kind in ErrorKind]
    assert len(codes) == len(set(codes))
    assert ErrorKind.POW_RANGE.code == 20
