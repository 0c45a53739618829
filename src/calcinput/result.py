'''
Outcome of evaluating a text: exactly one of NoValue, InvalidValue, Value.

Compare by variant, never by truthiness: Value(0.0) is a perfectly good
result.
'''


class Result:
    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self), self._key()))

    def _key(self):
        return ()


class NoValue(Result):
    '''
    Empty text.
    '''
    __slots__ = ()

    def __repr__(self):
        return 'NoValue()'


class InvalidValue(Result):
    '''
    Malformed text, or an arithmetic outcome that isn't a finite number.

    :param message: Why the text didn't parse; None when it parsed fine but
                    evaluated to an infinity or NaN.
    '''
    __slots__ = ('message',)

    def __init__(self, message=None):
        self.message = message

    def _key(self):
        return (self.message,)

    def __repr__(self):
        return 'InvalidValue({!r})'.format(self.message)


class Value(Result):
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = float(value)

    def _key(self):
        return (self.value,)

    def __repr__(self):
        return 'Value({!r})'.format(self.value)
