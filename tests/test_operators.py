'''
Function operator registry tests
'''

import math

from infixrpn.operators import (OPERATORS, OperatorSpec, Result, UNDEFINED,
                                domain_checked)
from infixrpn.tokens import Precedence

from pytest import raises, approx


def test_registry_is_read_only():
    with raises(TypeError):
        OPERATORS['foo'] = OPERATORS['sqrt']


def test_specs():
    for name, spec in OPERATORS.items():
        assert isinstance(spec, OperatorSpec)
        assert spec.name == name
        assert spec.arity >= 1
        assert spec.precedence >= 0
    assert OPERATORS['^'].precedence < OPERATORS['sqrt'].precedence
    assert OPERATORS['root'].arity == 2
    assert OPERATORS['logb'].arity == 2


def test_functions_bind_tighter_than_basic_operators():
    for spec in OPERATORS.values():
        assert Precedence.FUNCTION_BASE + spec.precedence > \
            Precedence.MULTIPLICATION


def test_roots():
    assert OPERATORS['sqrt'](9.0) == (True, 3.0)
    assert OPERATORS['cbrt'](27.0) == (True, approx(3.0))
    assert OPERATORS['root'](4.0, 16.0) == (True, approx(2.0))
    assert OPERATORS['root'](0.0, 16.0) == UNDEFINED
    assert OPERATORS['sqrt'](-4.0) == UNDEFINED
    # Computed as a power, like the other roots
    assert OPERATORS['cbrt'](-8.0) == UNDEFINED


def test_powers():
    assert OPERATORS['^'](2.0, 10.0) == (True, 1024.0)
    assert OPERATORS['^'](0.0, 0.0) == UNDEFINED
    assert OPERATORS['^'](0.0, -1.0) == UNDEFINED
    assert OPERATORS['^'](0.0, 2.0) == (True, 0.0)
    assert OPERATORS['sqr'](-3.0) == (True, 9.0)
    assert OPERATORS['cube'](-2.0) == (True, -8.0)
    assert OPERATORS['sqr'](1e200) == UNDEFINED


def test_logarithms():
    assert OPERATORS['log'](1000.0) == (True, approx(3.0))
    assert OPERATORS['ln'](math.e) == (True, approx(1.0))
    assert OPERATORS['logb'](2.0, 1024.0) == (True, approx(10.0))
    assert OPERATORS['log'](0.0) == UNDEFINED
    assert OPERATORS['ln'](-1.0) == UNDEFINED
    assert OPERATORS['logb'](1.0, 5.0) == UNDEFINED


def test_trigonometric():
    assert OPERATORS['sin'](0.0) == (True, 0.0)
    assert OPERATORS['cos'](0.0) == (True, 1.0)
    assert OPERATORS['tan'](math.pi / 4) == (True, approx(1.0))
    assert OPERATORS['sinh'](0.0) == (True, 0.0)
    assert OPERATORS['cosh'](0.0) == (True, 1.0)
    assert OPERATORS['tanh'](0.0) == (True, 0.0)


def test_inverse_names():
    # Plain names are the inverse trigonometric functions
    assert OPERATORS['asin'](1.0) == (True, approx(math.pi / 2))
    assert OPERATORS['acos'](1.0) == (True, 0.0)
    assert OPERATORS['atan'](1.0) == (True, approx(math.pi / 4))
    assert OPERATORS['asin'](2.0) == UNDEFINED
    assert OPERATORS['asinh'](0.0) == (True, 0.0)
    assert OPERATORS['acosh'](1.0) == (True, 0.0)
    assert OPERATORS['acosh'](0.5) == UNDEFINED
    assert OPERATORS['atanh'](0.5) == (True, approx(math.atanh(0.5)))
    assert OPERATORS['atanh'](1.0) == UNDEFINED


def test_domain_checked():
    @domain_checked
    def identity(x):
        return x

    assert identity(2) == Result(True, 2.0)
    assert isinstance(identity(2).value, float)
    assert identity(math.nan) == UNDEFINED
    assert identity(math.inf) == UNDEFINED
    # Underflow
    assert identity(5e-324) == UNDEFINED
    assert identity(0.0) == (True, 0.0)

    @domain_checked
    def raising(x):
        return 1 / x

    assert raising(0) == UNDEFINED
