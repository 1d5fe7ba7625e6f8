'''
Validation and clean-up of infix token sequences, before conversion to RPN.
'''

import logging

from .tokens import Kind, live
from .util import ErrorKind, ValidationError


log = logging.getLogger(__name__)

# Kinds after which a '-' is binary subtraction rather than a sign.
OPERANDS = frozenset({Kind.NUMBER, Kind.VARIABLE, Kind.BRACKET_RIGHT})


def check_equals(tokens):
    '''
    Allow at most one '=', and only right after a leading variable name.
    '''
    if tokens[0].kind is Kind.EQUALS:
        raise ValidationError(ErrorKind.INVALID_EQUALS, 'nothing to assign to')
    if tokens[0].kind is not Kind.EMPTY and tokens[1].kind is Kind.EQUALS \
       and tokens[0].kind is not Kind.VARIABLE:
        raise ValidationError(ErrorKind.INVALID_EQUALS,
                              'can only assign to a variable name')
    for index, token in enumerate(tokens[2:], start=2):
        if token.kind is Kind.EMPTY:
            break
        if token.kind is Kind.EQUALS:
            raise ValidationError(ErrorKind.INVALID_EQUALS,
                                  'unexpected = at {}'.format(index))


def check_brackets(tokens):
    '''
    Check every ')' closes an earlier '(' and no '(' is left open.
    '''
    depth = 0
    for token in tokens:
        if token.kind is Kind.EMPTY:
            break
        elif token.kind is Kind.BRACKET_LEFT:
            depth += 1
        elif token.kind is Kind.BRACKET_RIGHT:
            depth -= 1
            if depth < 0:
                raise ValidationError(ErrorKind.TOO_MANY_CLOSE_BRACKETS)
    if depth:
        raise ValidationError(ErrorKind.TOO_MANY_OPEN_BRACKETS,
                              '{} left open'.format(depth))


def normalize(tokens):
    '''
    Rewrite syntactic sugar in place.

    - Unary '-' right before a number is folded into the number.
    - '**' becomes '^'.
    - A variable name right before '(' is a function call.

    Removed tokens are marked DELETED, not dropped, so indices stay valid.
    '''
    previous = None
    for index, token in enumerate(tokens):
        if token.kind is Kind.EMPTY:
            break
        following = tokens[index + 1]
        if token.isoperator('-') and following.kind is Kind.NUMBER and \
           (previous is None or previous.kind not in OPERANDS):
            following.value = -following.value
            token.delete()
            continue
        elif token.isoperator('*') and following.isoperator('*'):
            following.value = '^'
            token.delete()
            continue
        elif token.kind is Kind.VARIABLE and \
                following.kind is Kind.BRACKET_LEFT:
            token.kind = Kind.FUNCTION
        previous = token


def validate(tokens):
    '''
    Check, then normalize, an infix token list in place.
    '''
    check_equals(tokens)
    check_brackets(tokens)
    normalize(tokens)
    log.debug('normalized: %s', ' '.join(map(str, live(tokens))))
    return tokens
