'''
Infix expression to RPN converter and RPN evaluator.

Supports + - * /, named function operators of any arity (sqrt, root, ^, ...),
named operands (variables) resolved at evaluation time, and any nesting of
parentheses, brackets and braces.

Same tier operators group to the right: 8 - 3 - 2 is 7, not 3.

Undefined arithmetic (division by zero, log 0, 0 ^ 0, ...) is reported in the
Result, never raised.
'''

import logging

from .cli import CLI
from .converter import Conversion, Converter
from .lexer import Lexer
from .machine import Machine
from .operands import OPERANDS, OperandRegistry
from .operators import OPERATORS, OperatorSpec, Result, UNDEFINED
from .signs import SignResolver
from .util import (RPNError, ConversionError, UnbalancedParentheses,
                   InvalidOperand, MissingFunctionArgument, UnknownSymbol,
                   StackMismatch)


logger = logging.getLogger(__name__)


def infix_to_rpn(line, operands=OPERANDS):
    '''
    Convert infix expression to RPN.

    Never raises for a bad expression: any failure is a Conversion with ok
    False and no RPN. Use Converter.convert for the cause.
    '''
    try:
        return Converter(operands=operands).convert(line)
    except ConversionError as e:
        logger.debug('%s', e)
        return Conversion(False, [])


def evaluate(rpn, operands=OPERANDS):
    '''
    Evaluate RPN expression, as returned by infix_to_rpn.
    '''
    return Machine(operands=operands).evaluate(rpn)


add_operand = OPERANDS.add
remove_operand = OPERANDS.remove
get_operand = OPERANDS.get
get_all_operands = OPERANDS.all
clear_all_operands = OPERANDS.clear


__all__ = (
    'infix_to_rpn', 'evaluate',
    'add_operand', 'remove_operand', 'get_operand', 'get_all_operands',
    'clear_all_operands',
    'Converter', 'Conversion', 'Lexer', 'SignResolver', 'Machine', 'CLI',
    'OperandRegistry', 'OPERANDS', 'OperatorSpec', 'OPERATORS',
    'Result', 'UNDEFINED',
    'RPNError', 'ConversionError', 'UnbalancedParentheses',
    'InvalidOperand', 'MissingFunctionArgument', 'UnknownSymbol',
    'StackMismatch',
)
