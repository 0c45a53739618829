'''
Infix to postfix (RPN) conversion.

Shunting-yard, with unary signs: a sign in leading position, or right after
an opening parenthesis, is unary. Unary minus becomes Operator.NEGATE,
unary plus is dropped.
'''

from collections import deque

from .tokens import Number, Operator, Paren
from .util import StructureError


class Converter:
    '''
    Converts a token sequence to postfix order.

    Like the lexer, stateless between calls; stacks live for one call.
    '''

    def to_postfix(self, tokens):
        '''
        Return the postfix list of Numbers and Operators for tokens.

        :param tokens: Iterable of tokens, in source order.
        '''
        stack = deque()
        out = []
        previous = None
        for token in tokens:
            if isinstance(token, Number):
                out.append(token)
            elif token is Paren.OPEN:
                stack.append(token)
            elif token is Paren.CLOSE:
                self._close(stack, out)
            elif previous is None or previous is Paren.OPEN:
                self._unary(token, stack)
            else:
                self._binary(token, stack, out)
            previous = token
        self._drain(stack, out)
        return out

    def _close(self, stack, out):
        '''
        Pop operators to out up to and including the matching (.
        '''
        while stack:
            top = stack.pop()
            if top is Paren.OPEN:
                return
            out.append(top)
        raise StructureError('")" has no matching "("')

    def _unary(self, token, stack):
        if token is Operator.SUBTRACT:
            stack.append(Operator.NEGATE)
        elif token is not Operator.ADD:
            raise StructureError('Invalid unary "{}"'.format(token))

    def _binary(self, token, stack, out):
        # Parentheses have the lowest priority, so this never pops past a (.
        while stack and (stack[-1] is Operator.NEGATE or
                         stack[-1].priority >= token.priority):
            out.append(stack.pop())
        stack.append(token)

    def _drain(self, stack, out):
        while stack:
            top = stack.pop()
            if top is Paren.OPEN:
                raise StructureError('"(" has no matching ")"')
            out.append(top)
