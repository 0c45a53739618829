'''
Random formulas, for testing the engine.

Everything generated is syntactically valid; it may still divide by zero.
'''

from enum import Enum
import random as _random


class Kind(Enum):
    NUMBER = 1
    ARITHMETIC = 2
    PARENTHESIS = 3


class FormulaGenerator:
    '''
    Recursive generator over a weighted grammar.

    :param max_operands: Most operands in one arithmetic group (at least 2).
    :param max_depth: Nesting depth at which only numbers are generated.
    :param max_number: Literals are drawn from [0, max_number).
    :param fixed_digits: Decimal digits each literal is formatted with.
    :param random: random.Random to draw from; seed it for repeatable runs.
    '''

    DEFAULT_MAX_OPERANDS = 4
    DEFAULT_MAX_DEPTH = 3
    DEFAULT_MAX_NUMBER = 10
    DEFAULT_FIXED_DIGITS = 0

    # Upper bounds of the draw for each kind, tried in order. Top level is
    # mostly arithmetic; deeper down, mostly plain numbers.
    THRESHOLDS = {
        'top': ((Kind.NUMBER, .1),
                (Kind.ARITHMETIC, .9),
                (Kind.PARENTHESIS, 1)),
        'inner': ((Kind.NUMBER, .5),
                  (Kind.ARITHMETIC, 1),
                  (Kind.PARENTHESIS, 1)),
    }
    # Infix sign: '-' half the time, '+' a tenth, otherwise none.
    SIGNS = (('-', .5), ('+', .6), ('', 1))
    OPERATIONS = (('+', .3), ('-', .6), ('*', .8), ('/', 1))

    def __init__(self, max_operands=None, max_depth=None, max_number=None,
                 fixed_digits=None, random=None):
        cls = type(self)
        self.max_operands = (cls.DEFAULT_MAX_OPERANDS
                             if max_operands is None else max_operands)
        self.max_depth = (cls.DEFAULT_MAX_DEPTH
                          if max_depth is None else max_depth)
        self.max_number = (cls.DEFAULT_MAX_NUMBER
                           if max_number is None else max_number)
        self.fixed_digits = (cls.DEFAULT_FIXED_DIGITS
                             if fixed_digits is None else fixed_digits)
        if self.max_operands < 2:
            raise ValueError('max_operands must be at least 2, got {}'
                             .format(self.max_operands))
        self.random = random if random is not None else _random.Random()

    def generate(self, depth=0):
        '''
        Return a random formula, as if nested depth levels deep.
        '''
        if depth >= self.max_depth:
            return self.generate_number()
        kind = self._random_kind(depth)
        if kind is Kind.NUMBER:
            sign = self.generate_infix_sign() if depth == 0 else ''
            return sign + self.generate_number()
        elif kind is Kind.ARITHMETIC:
            return self.generate_arithmetic(depth)
        else:
            return self.generate_parenthesis(depth)

    def generate_number(self):
        number = self.random.random() * self.max_number
        return '{:.{}f}'.format(number, self.fixed_digits)

    def generate_infix_sign(self):
        return self._pick(type(self).SIGNS)

    def generate_operation(self):
        return self._pick(type(self).OPERATIONS)

    def generate_arithmetic(self, depth):
        '''
        Operands joined by operators, parenthesized unless at top level.
        '''
        operands = 2 + int(self.random.random() * (self.max_operands - 1))
        parts = ['(' if depth > 0 else '', self.generate_infix_sign()]
        for i in range(operands):
            if i:
                parts.append(self.generate_operation())
            parts.append(self.generate(depth + 1))
        if depth > 0:
            parts.append(')')
        return ''.join(parts)

    def generate_parenthesis(self, depth):
        return ('(' + self.generate_infix_sign() +
                self.generate(depth + 1) + ')')

    def _random_kind(self, depth):
        thresholds = type(self).THRESHOLDS['top' if depth == 0 else 'inner']
        return self._pick(thresholds)

    def _pick(self, choices):
        draw = self.random.random()
        for choice, bound in choices:
            if draw < bound:
                return choice
        return choices[-1][0]


def generate(max_depth=None, max_operands=None, max_number=None,
             fixed_digits=None, random=None):
    '''
    Return one random formula.
    '''
    return FormulaGenerator(max_operands=max_operands,
                            max_depth=max_depth,
                            max_number=max_number,
                            fixed_digits=fixed_digits,
                            random=random).generate()
