'''
Headless input boxes: a text, what it evaluates to, and focus styling.

What the text means is up to an interpreter, anything with an
``interpret(text) -> Result`` method. Two are provided: plain numbers and
arithmetic formulas.
'''

import math

from .engine import Engine
from .notifier import Event, Notifier
from .result import InvalidValue, NoValue, Value


class NumericInterpreter:
    '''
    Accepts a single number, in any notation float() does.
    '''

    def interpret(self, text):
        if not text:
            return NoValue()
        try:
            value = float(text)
        except ValueError:
            return InvalidValue('Invalid number "{}"'.format(text))
        if not math.isfinite(value):
            return InvalidValue()
        return Value(value)


class ExpressionInterpreter:
    def __init__(self, engine=None):
        self.engine = engine if engine is not None else Engine()

    def interpret(self, text):
        return self.engine.set_text(text)


class Input:
    '''
    Input box model.

    Setting text re-interprets it and notifies subscribers: TEXT_CHANGED
    always, VALUE_CHANGED and IS_VALID_CHANGED only on an actual change.
    A different message on a still invalid text is not a change.
    '''

    FOCUS_CLASS = 'custom-inputs_focus'
    INVALID_CLASS = 'custom-inputs_invalid'
    FOCUS_INVALID_CLASS = 'custom-inputs_focus-invalid'

    def __init__(self, interpreter):
        self.interpreter = interpreter
        self._notifier = Notifier(Event)
        self._text = ''
        self._result = NoValue()
        self._focused = False

    @property
    def text(self):
        return self._text

    @text.setter
    def text(self, text):
        was_valid = self.is_valid
        self._text = text
        result = self.interpreter.interpret(text)
        old, self._result = self._result, result
        if not _same_value(old, result):
            self._notifier.dispatch(Event.VALUE_CHANGED, result)
        if was_valid != self.is_valid:
            self._notifier.dispatch(Event.IS_VALID_CHANGED, self.is_valid)
        self._notifier.dispatch(Event.TEXT_CHANGED, text)

    @property
    def result(self):
        return self._result

    @property
    def value(self):
        '''
        The evaluated number, or None if there is none.
        '''
        if isinstance(self._result, Value):
            return self._result.value
        return None

    @value.setter
    def value(self, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError('Not a number: {!r}'.format(value))
        if value != self.value:
            self.text = str(value)

    @property
    def is_valid(self):
        return isinstance(self._result, Value)

    @property
    def focused(self):
        return self._focused

    def focus(self):
        self._focused = True

    def blur(self):
        self._focused = False

    @property
    def border_class(self):
        '''
        Style class for the box border, or None for the plain border.
        '''
        if self.is_valid or not self._text:
            return type(self).FOCUS_CLASS if self._focused else None
        elif self._focused:
            return type(self).FOCUS_INVALID_CLASS
        else:
            return type(self).INVALID_CLASS

    def subscribe(self, event, handler):
        return self._notifier.subscribe(event, handler)

    def unsubscribe(self, handle):
        return self._notifier.unsubscribe(handle)

    def destroy(self):
        self._notifier.destroy()


def _same_value(a, b):
    '''
    Same variant and, for a Value, same number. Messages don't count.
    '''
    if type(a) is not type(b):
        return False
    return not isinstance(a, Value) or a.value == b.value


def numeric_input():
    return Input(NumericInterpreter())


def calc_input(engine=None):
    return Input(ExpressionInterpreter(engine))
