from functools import wraps


class RPNError(Exception):
    pass


class ConversionError(RPNError):
    '''
    Infix expression that can't be converted at all.

    :param component: Offending part of the expression.
    '''
    MESSAGE = 'Cannot convert {!r}'

    def __init__(self, component):
        super().__init__(self.MESSAGE.format(component))
        self.component = component


class UnbalancedParentheses(ConversionError):
    MESSAGE = 'Unbalanced parentheses in {!r}'


class InvalidOperand(ConversionError):
    MESSAGE = 'Invalid operand {!r}'


class MissingFunctionArgument(ConversionError):
    MESSAGE = 'Function argument not found for {!r}'


class UnknownSymbol(ConversionError):
    MESSAGE = 'Unknown operand/operator {!r}'


class StackMismatch(RPNError):
    '''
    Stack left with other than one value after evaluating a valid RPN
    expression. Machine and validator disagree; never a user error.
    '''


def wrap_user_errors(fmt):
    '''
    Ugly hack decorator that converts exceptions to RPNErrors.

    Passes through RPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise RPNError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator

