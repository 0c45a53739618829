from functools import reduce
import operator

import regex

from .tokens import Number, SYMBOLS
from .util import LexError


class Lexer:
    '''
    Lexer for the infix arithmetic *regular* grammar.

    For consistency with the other stages, needs to be instantiated, despite
    holding no internal state.
    '''
    # Spaces only. Tabs and newlines are as foreign as any other character.
    SPACE = r'\x20+'
    # Any run of digits and dots. Deliberately lax: 1.2.3 is lexed as one
    # literal and rejected on conversion, naming the whole literal.
    NUMBER = r'''
              (?:
                  # ASCII digits only; \d would let in other scripts' digits,
                  # which float() happily accepts.
                  [0-9.]+
              )
              '''
    assert not [symbol
                for symbol
                in SYMBOLS
                if len(symbol) != 1]
    SYMBOL = r'(?:' + r'|'.join(map(regex.escape, SYMBOLS)) + r')'

    # All possible lexemes, optionally preceded by spaces. Both alternatives
    # optional, so that trailing spaces match as nothing but space.
    LEXEME = r'(?<space>' + SPACE + r')?' \
             r'(?:' \
             r'(?<number>' + NUMBER + r')|' \
             r'(?<symbol>' + SYMBOL + r')' \
             r')?'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def next_token(self, text, pos=0):
        '''
        Return next token in text from pos, and the position past it.

        Returns None when nothing but spaces is left.
        '''
        match = regex.match(type(self).LEXEME, text, pos=pos,
                            flags=type(self).FLAGS)
        end = match.end()
        if match.group('number') is not None:
            return self._number(match.group('number')), end
        elif match.group('symbol') is not None:
            return SYMBOLS[match.group('symbol')], end
        elif end < len(text):
            raise LexError('Invalid character "{}"'.format(text[end]),
                           text[end])
        else:
            return None

    def lex(self, text):
        '''
        Take a line and yield all tokens.

        Stops at the first bad character or literal, raising LexError.
        '''
        pos = 0
        while True:
            found = self.next_token(text, pos)
            if found is None:
                return
            token, pos = found
            yield token

    def _number(self, literal):
        '''
        Convert literal to Number token.
        '''
        try:
            return Number(float(literal))
        except ValueError:
            raise LexError('Invalid number "{}"'.format(literal),
                           literal) from None
