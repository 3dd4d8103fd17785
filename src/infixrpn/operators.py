'''
Function operators: named, fixed arity operators evaluated by a pluggable
function rather than a symbol.

Each function returns a Result, flagging undefined values instead of
raising, so that the machine can treat them all alike.
'''

from functools import partial, wraps
from types import MappingProxyType
from typing import Callable, NamedTuple
import math
import sys


class Result(NamedTuple):
    defined: bool
    value: float


UNDEFINED = Result(False, 0.0)


class OperatorSpec(NamedTuple):
    name: str
    arity: int
    # Offset above Precedence.FUNCTION_BASE
    precedence: int
    function: Callable[..., Result]

    def __call__(self, *args):
        return self.function(*args)


def domain_checked(f=None, *, vanishes=False):
    '''
    Make a plain math function report out of domain values instead of
    raising.

    The wrapped function returns a Result: undefined if f raised a math
    error, or if its value overflowed, underflowed or isn't a number.

    A zero value from non-zero finite arguments underflowed, unless f
    legitimately vanishes there (ln 1, acos 1).

    :param vanishes: f can be exactly zero for non-zero arguments.
    '''
    if f is None:
        return partial(domain_checked, vanishes=vanishes)

    @wraps(f)
    def wrapper(*args):
        try:
            value = f(*args)
        except (ValueError, OverflowError, ZeroDivisionError):
            return UNDEFINED
        if not math.isfinite(value):
            return UNDEFINED
        # Subnormal
        if value and abs(value) < sys.float_info.min:
            return UNDEFINED
        if not value and not vanishes and \
           all(arg and math.isfinite(arg) for arg in args):
            return UNDEFINED
        return Result(True, float(value))
    return wrapper


@domain_checked
def root(n, x):
    return math.pow(x, 1.0 / n)


@domain_checked
def sqrt(x):
    return math.pow(x, 1.0 / 2.0)


@domain_checked
def cbrt(x):
    return math.pow(x, 1.0 / 3.0)


@domain_checked
def power(base, exponent):
    # math.pow(0, 0) is 1
    if base == 0 and exponent == 0:
        raise ValueError('0 ^ 0')
    return math.pow(base, exponent)


@domain_checked
def sqr(x):
    return math.pow(x, 2.0)


@domain_checked
def cube(x):
    return math.pow(x, 3.0)


@domain_checked(vanishes=True)
def logb(base, x):
    return math.log(x) / math.log(base)


def _specs(*specs):
    '''
    Index operator specs by name. Later duplicates are rejected rather than
    shadowing earlier ones.
    '''
    table = dict()
    for name, arity, precedence, function in specs:
        if name in table:
            raise ValueError('Duplicate operator {!r}'.format(name))
        if arity < 1:
            raise ValueError('Operator {!r} needs operands'.format(name))
        table[name] = OperatorSpec(name, arity, precedence, function)
    return MappingProxyType(table)


OPERATORS = _specs(
    ('root', 2, 1, root),
    ('sqrt', 1, 1, sqrt),
    ('cbrt', 1, 1, cbrt),

    ('^', 2, 0, power),
    ('sqr', 1, 1, sqr),
    ('cube', 1, 1, cube),

    ('logb', 2, 1, logb),
    ('log', 1, 1, domain_checked(math.log10, vanishes=True)),
    ('ln', 1, 1, domain_checked(math.log, vanishes=True)),

    # Trigonometric
    ('sin', 1, 1, domain_checked(math.sin)),
    ('cos', 1, 1, domain_checked(math.cos)),
    ('tan', 1, 1, domain_checked(math.tan)),

    ('asin', 1, 1, domain_checked(math.asin)),
    ('acos', 1, 1, domain_checked(math.acos, vanishes=True)),
    ('atan', 1, 1, domain_checked(math.atan)),

    ('sinh', 1, 1, domain_checked(math.sinh)),
    ('cosh', 1, 1, domain_checked(math.cosh)),
    ('tanh', 1, 1, domain_checked(math.tanh)),

    ('asinh', 1, 1, domain_checked(math.asinh)),
    ('acosh', 1, 1, domain_checked(math.acosh, vanishes=True)),
    ('atanh', 1, 1, domain_checked(math.atanh)),
)
