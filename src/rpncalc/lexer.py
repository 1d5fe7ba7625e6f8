from functools import reduce
import logging
import math
import operator

import regex

from .tokens import Kind, Token
from .util import ErrorKind, LexError


log = logging.getLogger(__name__)


class Lexer:
    '''
    Lexer for infix expression lines.

    Holds no state between lines besides its token limit.
    '''
    # Number, of any kind supported by grammar.
    NUMBER = r'''
              (?:
                  # 1, 12, 1. (notice trailing dot), 1.3
                  [0-9]+
                  (?:
                      \.
                      [0-9]*
                  )?
              |
                  # .2
                  \.
                  [0-9]+
              )
              # Optional exponent, 1e5, 2.5E-3. A bare 2e is 2 times e.
              (?:
                  [eE]
                  [+\-]?
                  [0-9]+
              )?
              '''
    # A letter, then any letters and digits: x, log10, a1b.
    IDENTIFIER = r'[A-Za-z][A-Za-z0-9]*'

    OPERATORS = '+-*/^'
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    EQUALS = r'='
    BRACKET_LEFT = r'\('
    BRACKET_RIGHT = r'\)'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<variable>' + IDENTIFIER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<equals>' + EQUALS + r')|' \
             r'(?<bracket_left>' + BRACKET_LEFT + r')|' \
             r'(?<bracket_right>' + BRACKET_RIGHT + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)
    SPACE = regex.compile(r'\s+')

    # Maximum number of tokens in one line, sentinel excluded.
    MAX_TOKENS = 10000

    def __init__(self, max_tokens=None):
        self.max_tokens = type(self).MAX_TOKENS \
            if max_tokens is None else max_tokens
        self.pattern = regex.compile(type(self).LEXEME,
                                     flags=type(self).FLAGS)

    def strip(self, line):
        '''
        Return line up to its first newline, with all whitespace removed.
        '''
        return type(self).SPACE.sub('', line.partition('\n')[0])

    def lex(self, line):
        '''
        Take a stripped line and yield its tokens, left to right.

        Stops with a LexError on the first character no lexeme starts with.
        '''
        position = 0
        while position < len(line):
            match = self.pattern.match(line, position)
            if match is None:
                raise LexError(ErrorKind.UNDEFINED_CHARACTER,
                               repr(line[position]))
            yield self.classify(match)
            position = match.end()

    def classify(self, match):
        '''
        Turn a lexeme match into a Token.
        '''
        kind = Kind(match.lastgroup)
        text = match.group(0)
        if kind is Kind.NUMBER:
            value = float(text)
            if math.isinf(value):
                raise LexError(ErrorKind.NUMBER_TOO_LARGE, text)
            return Token(kind, value)
        return Token(kind, text)

    def tokenize(self, line):
        '''
        Return the infix token list of line, terminated by an EMPTY sentinel.
        '''
        tokens = []
        for token in self.lex(self.strip(line)):
            if len(tokens) >= self.max_tokens:
                raise LexError(ErrorKind.TOO_MANY_TOKENS,
                               'more than {}'.format(self.max_tokens))
            tokens.append(token)
        tokens.append(Token.empty())
        log.debug('infix: %s', ' '.join(map(str, tokens[:-1])))
        return tokens
