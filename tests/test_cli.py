'''
Command line interface tests
'''

import io
import sys

from rpncalc.cli import CLI

from pytest import raises


def run(*args):
    CLI().run(args=list(args))


def test_expressions(capsys):
    run('-e', '2 + 3 * 4', 'x = 5', 'x * 2', '-1.5')
    assert capsys.readouterr().out == '14\n10\n-1.5\n'


def test_errors_go_to_stderr(capsys):
    run('-e', '1/0', '1 + 1')
    captured = capsys.readouterr()
    assert captured.out == '2\n'
    assert captured.err == \
        'Attempted to divide by zero! (DIVIDE_BY_ZERO)\n'


def test_quit_stops_reading(capsys):
    run('-e', '1', 'quit', '2')
    assert capsys.readouterr().out == '1\n'


def test_stdin(capsys, monkeypatch):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('1+1\n\n  \nz = 3\nz^2\n'))
    run()
    assert capsys.readouterr().out == '2\n9\n'


def test_vars_command(capsys):
    run('-e', 'b = 2.5', 'a = 1', 'vars')
    assert capsys.readouterr().out == 'b = 2.5\na = 1\n'


def test_help_command(capsys):
    run('-e', 'help')
    assert 'sqrt, expN, logN' in capsys.readouterr().out


def test_verbose_reports_assignment(capsys):
    run('-v', '-e', 'x = 2 ^ 4')
    assert 'x = 16' in capsys.readouterr().err


def test_dump(capsys):
    run('-D', '-e', '2+3*4', 'x = 2^3^2', 'y')
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        '[target]\t<infix>\t<rpn>',
        '-\t2 + 3 * 4\t2 3 4 * +',
        'x\tx = 2 ^ 3 ^ 2\t2 3 2 ^ ^',
    ]
    assert '(UNDEFINED_VARIABLE)' in captured.err


def test_max_variables(capsys):
    run('--max-variables', '1', '-e', 'a = 1', 'b = 2')
    assert 'NO_FREE_SPACE' in capsys.readouterr().err


def test_bad_max_variables():
    with raises(SystemExit):
        run('--max-variables', '0', '-e', '1')


def test_dump_shows_normalized_infix(capsys):
    run('-D', '-e', '2 ** -3 - log10(100)')
    assert capsys.readouterr().out.splitlines()[1] == \
        '-\t2 ^ -3 - log10 ( 100 )\t2 -3 ^ 100 log10 -'
