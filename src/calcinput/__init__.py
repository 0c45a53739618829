'''
Formula calculator.

Evaluates arithmetic formulas: numbers, + - * /, unary signs, and
parentheses. The formula is lexed, converted to Reverse Polish notation with
the shunting-yard algorithm, and run on a stack machine.

Usage:

    >>> from calcinput import Engine
    >>> engine = Engine()
    >>> engine.set_text('-2*(3+4)+5/5')
    Value(-13.0)

Comes with a random formula generator, for testing, and headless models of
the number and formula input boxes built on top.
'''

from .cli import CLI
from .converter import Converter
from .engine import Engine, evaluate
from .generator import FormulaGenerator, generate
from .inputs import (ExpressionInterpreter, Input, NumericInterpreter,
                     calc_input, numeric_input)
from .lexer import Lexer
from .machine import Machine
from .notifier import Event, Notifier
from .result import InvalidValue, NoValue, Result, Value
from .util import CalcError, LexError, StructureError


__all__ = ('Engine', 'evaluate', 'Result', 'NoValue', 'InvalidValue',
           'Value', 'Lexer', 'Converter', 'Machine', 'FormulaGenerator',
           'generate', 'Input', 'NumericInterpreter', 'ExpressionInterpreter',
           'numeric_input', 'calc_input', 'Event', 'Notifier', 'CLI',
           'CalcError', 'LexError', 'StructureError')
