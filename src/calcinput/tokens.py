'''
Tokens shared by the lexer, converter and machine.
'''

from collections import namedtuple
from enum import Enum


class Number(namedtuple('Number', 'value')):
    __slots__ = ()

    def __str__(self):
        return repr(self.value)


class Operator(Enum):
    '''
    Arithmetic operators, with their priority for the shunting-yard.

    NEGATE is the unary minus. It never comes out of the lexer, only out of
    the converter, so that the machine can tell it apart from subtraction.
    '''
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    # Same trick as dc: underscore for negation.
    NEGATE = '_'

    @property
    def priority(self):
        return PRIORITIES[self]

    @property
    def unary(self):
        return self is Operator.NEGATE

    def __str__(self):
        return self.value


class Paren(Enum):
    OPEN = '('
    CLOSE = ')'

    @property
    def priority(self):
        return PRIORITIES[self]

    def __str__(self):
        return self.value


# Higher binds tighter.
PRIORITIES = {
    Paren.OPEN: 1,
    Paren.CLOSE: 1,
    Operator.ADD: 2,
    Operator.SUBTRACT: 2,
    Operator.NEGATE: 2,
    Operator.MULTIPLY: 3,
    Operator.DIVIDE: 3,
}

# Single characters the lexer turns straight into a token.
SYMBOLS = {
    str(token): token
    for token
    in (Operator.ADD, Operator.SUBTRACT, Operator.MULTIPLY, Operator.DIVIDE,
        Paren.OPEN, Paren.CLOSE)
}
