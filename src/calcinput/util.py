from functools import wraps


class CalcError(Exception):
    pass


class LexError(CalcError):
    '''
    Unrecognized character, or a literal that isn't a number.

    :param text: The offending character or literal.
    '''

    def __init__(self, message, text):
        super().__init__(message)
        self.text = text


class StructureError(CalcError):
    '''
    Unbalanced parentheses, misplaced operators, or leftover operands.
    '''


def wrap_user_errors(fmt):
    '''
    Decorator converting stray exceptions into CalcErrors.

    Passes through CalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise CalcError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator
