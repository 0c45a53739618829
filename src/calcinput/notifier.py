from enum import Enum
from itertools import count

from .util import CalcError


class Event(Enum):
    TEXT_CHANGED = 'textChanged'
    VALUE_CHANGED = 'valueChanged'
    IS_VALID_CHANGED = 'isValidChanged'


class Notifier:
    '''
    Handler registry, keyed by event kind.

    Subscribing returns a handle; unsubscribe with that handle, not with the
    handler. The same function may be subscribed more than once.

    :param events: Event kinds this notifier accepts subscriptions for.
    '''

    def __init__(self, events=Event):
        self._handlers = {event: {} for event in events}
        self._handles = count(1)
        self._destroyed = False

    def subscribe(self, event, handler):
        '''
        Register handler for event, returning its handle.
        '''
        if self._destroyed:
            raise CalcError('Notifier destroyed')
        handle = (event, next(self._handles))
        # Dicts keep insertion order: handlers run in subscription order.
        self._handlers[event][handle] = handler
        return handle

    def unsubscribe(self, handle):
        '''
        Remove a registration. Return False if it was already gone.
        '''
        event, _ = handle
        return self._handlers.get(event, {}).pop(handle, None) is not None

    def dispatch(self, event, detail=None):
        '''
        Call every handler registered for event with detail.
        '''
        for handler in list(self._handlers.get(event, {}).values()):
            handler(detail)

    def destroy(self):
        '''
        Drop all handlers. Nothing can subscribe afterwards.
        '''
        for handlers in self._handlers.values():
            handlers.clear()
        self._destroyed = True
