from pytest import fixture

from infixrpn import OPERANDS, OperandRegistry


@fixture
def operands():
    '''
    Fresh operand registry, for tests that shouldn't touch the process-wide
    one.
    '''
    return OperandRegistry()


@fixture(autouse=True)
def clean_operands():
    '''
    Leave the process-wide operand registry empty after every test.
    '''
    yield OPERANDS
    OPERANDS.clear()
