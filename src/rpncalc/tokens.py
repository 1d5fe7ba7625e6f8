from enum import Enum


class Kind(Enum):
    '''
    Kind of a node, shared by infix and RPN sequences and stack frames.
    '''
    EMPTY = 'empty'
    NUMBER = 'number'
    OPERATOR = 'operator'
    BRACKET_LEFT = 'bracket_left'
    BRACKET_RIGHT = 'bracket_right'
    FUNCTION = 'function'
    VARIABLE = 'variable'
    EQUALS = 'equals'
    DELETED = 'deleted'


class Token:
    '''
    One classified unit of an expression.

    value is a float for NUMBER, the one character symbol for OPERATOR,
    brackets and EQUALS, the name for FUNCTION and VARIABLE, and None for
    EMPTY and DELETED.
    '''
    __slots__ = 'kind', 'value'

    def __init__(self, kind, value=None):
        self.kind = kind
        self.value = value

    @classmethod
    def number(cls, value):
        return cls(Kind.NUMBER, float(value))

    @classmethod
    def operator(cls, symbol):
        return cls(Kind.OPERATOR, symbol)

    @classmethod
    def empty(cls):
        return cls(Kind.EMPTY)

    def isoperator(self, symbol=None):
        '''
        Return True if an OPERATOR token, optionally only for symbol.
        '''
        return self.kind is Kind.OPERATOR and \
            (symbol is None or self.value == symbol)

    def delete(self):
        '''
        Mark token as removed, keeping its slot in the sequence.
        '''
        self.kind = Kind.DELETED
        self.value = None

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __repr__(self):
        if self.value is None:
            return 'Token({})'.format(self.kind.name)
        return 'Token({}, {!r})'.format(self.kind.name, self.value)

    def __str__(self):
        if self.kind is Kind.NUMBER:
            return '{:g}'.format(self.value)
        if self.value is None:
            return '<{}>'.format(self.kind.value)
        return str(self.value)


def live(tokens):
    '''
    Yield tokens up to the EMPTY sentinel, skipping DELETED holes.
    '''
    for token in tokens:
        if token.kind is Kind.EMPTY:
            return
        if token.kind is not Kind.DELETED:
            yield token
