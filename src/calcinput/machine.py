from collections import deque
import math
import operator

from .tokens import Number, Operator
from .util import StructureError, wrap_user_errors


def _truediv(left, right):
    '''
    IEEE 754 division: x/0 is a signed infinity, 0/0 is NaN.

    Python raises ZeroDivisionError instead.
    '''
    try:
        return operator.__truediv__(left, right)
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


class Machine:
    '''
    Arithmetic stack machine.

    Takes a postfix sequence and runs it. The stack is reset at the start of
    every run, so one machine must not run two sequences at once.
    '''

    # Arithmetic operators on the items of a machine.
    BUILTINS = {
        Operator.ADD: operator.__add__,
        Operator.SUBTRACT: operator.__sub__,
        Operator.MULTIPLY: operator.__mul__,
        Operator.DIVIDE: _truediv,
        Operator.NEGATE: operator.__neg__,
    }

    def __init__(self):
        self.stack = deque()

    def run(self, postfix):
        '''
        Run postfix sequence, returning the single value left on the stack.

        The value may be infinite or NaN; judging that is up to the caller.

        :param postfix: Numbers and Operators, in postfix order.
        '''
        self.stack.clear()
        for item in postfix:
            if isinstance(item, Number):
                self._pshstack(item.value)
            else:
                self._apply(item)
        if len(self.stack) != 1:
            raise StructureError('Expected 1 value on stack, got {}'
                                 .format(len(self.stack)))
        return self.stack[-1]

    @wrap_user_errors('Cannot apply {1}')
    def _apply(self, op):
        '''
        Apply operator to stack, popping arguments as needed.
        '''
        f = type(self).BUILTINS[op]
        # If you don't reverse, you'll do 3 - 5 when you say 5 - 3.
        args = reversed(self._popstack(1 if op.unary else 2))
        self._pshstack(f(*args))

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise StructureError('Less than {} element(s) on stack'.format(n))
        return [self.stack.pop() for _ in range(n)]
