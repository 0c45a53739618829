import logging
import math

from .converter import Converter
from .lexer import Lexer
from .machine import Machine
from .result import InvalidValue, NoValue, Value
from .util import CalcError


logger = logging.getLogger(__name__)


class Engine:
    '''
    Arithmetic formula calculator.

    Holds one text and the result of evaluating it, recomputed on every
    assignment: lex, convert to postfix, run on the stack machine.

    >>> engine = Engine()
    >>> engine.set_text('-2*(3+4)+5')
    Value(-9.0)
    '''

    def __init__(self, text=''):
        self.lexer = Lexer()
        self.converter = Converter()
        self.machine = Machine()
        self._text = ''
        self._result = NoValue()
        self._message = None
        if text:
            self.set_text(text)

    @property
    def text(self):
        return self._text

    @property
    def message(self):
        '''
        Why the current text didn't parse, or None.
        '''
        return self._message

    def set_text(self, text):
        '''
        Provide formula for calculation, and return its result.
        '''
        self._text = text
        self._message = None
        if not text:
            self._result = NoValue()
            return self._result
        try:
            postfix = self.converter.to_postfix(self.lexer.lex(text))
            value = self.machine.run(postfix)
        except CalcError as e:
            logger.debug('Rejected %r: %s', text, e.args[0])
            self._message = e.args[0]
            self._result = InvalidValue(self._message)
        else:
            if math.isfinite(value):
                self._result = Value(value)
            else:
                logger.debug('%r evaluates to %r', text, value)
                self._result = InvalidValue()
        return self._result

    def current_result(self):
        '''
        Return the result of the last set_text, without recomputing.
        '''
        return self._result


def evaluate(text):
    '''
    Evaluate text once, on a throwaway engine.
    '''
    return Engine().set_text(text)
