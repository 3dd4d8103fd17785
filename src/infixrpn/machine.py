import logging

import regex

from .operands import OPERANDS
from .operators import OPERATORS, Result, UNDEFINED
from .tokens import TokenType, Precedence, BASIC_OPERATORS, NUMBER
from .util import StackMismatch


logger = logging.getLogger(__name__)


class Machine:
    '''
    Arithmetic stack machine.

    Validates and evaluates RPN expressions, as sequences of lexemes, against
    operator and operand registries.
    '''

    def __init__(self, operators=OPERATORS, operands=OPERANDS):
        '''
        :param operators: Function operator registry.
        :param operands: Mapping of operand name to value.
        '''
        self.operators = operators
        self.operands = operands

    def isoperand(self, lexeme):
        return lexeme in self.operands or \
            regex.fullmatch(NUMBER, lexeme) is not None

    def precedence(self, token):
        '''
        Return precedence tier of token, OTHER if not an operator.
        '''
        if token.type is TokenType.FUNCTION_OPERATOR:
            return Precedence.FUNCTION_BASE + \
                self.operators[token.text].precedence
        elif token.type is TokenType.BASIC_OPERATOR:
            return BASIC_OPERATORS[token.text][0]
        return Precedence.OTHER

    def arity(self, lexeme):
        '''
        Return number of operands taken by operator, None if not an operator.
        '''
        if lexeme in BASIC_OPERATORS:
            return 2
        elif lexeme in self.operators:
            return self.operators[lexeme].arity
        return None

    def isvalid(self, rpn):
        '''
        Return True if rpn leaves exactly one value on the stack, never
        running short along the way.
        '''
        depth = 0
        for lexeme in rpn:
            if self.isoperand(lexeme):
                depth += 1
            elif self.arity(lexeme) is not None:
                depth -= self.arity(lexeme) - 1
            else:
                return False
            if depth <= 0:
                return False
        return depth == 1

    def evaluate(self, rpn):
        '''
        Evaluate RPN expression.

        :returns: Result, undefined if rpn isn't valid or any operation is
                  undefined for its operands.
        '''
        if not self.isvalid(rpn):
            logger.debug('Refusing to evaluate invalid RPN %r', rpn)
            return UNDEFINED
        stack = []
        for lexeme in rpn:
            if lexeme in self.operands:
                result = Result(True, float(self.operands[lexeme]))
            elif self.isoperand(lexeme):
                result = Result(True, float(lexeme))
            elif lexeme in BASIC_OPERATORS:
                right, left = self._popstack(stack, 2)
                result = self._arithmetic(lexeme, left, right)
            else:
                spec = self.operators[lexeme]
                # Last pushed is last argument
                result = spec(*reversed(self._popstack(stack, spec.arity)))
            if not result.defined:
                logger.debug('%r undefined in %r', lexeme, rpn)
                return UNDEFINED
            stack.append(result.value)
        if len(stack) != 1:
            raise StackMismatch('{} values left from {!r}'.format(len(stack),
                                                                   rpn))
        return Result(True, stack[0])

    def _arithmetic(self, symbol, left, right):
        '''
        Apply basic operator. Only division by exactly zero is undefined.
        '''
        if symbol == '/' and right == 0:
            return UNDEFINED
        return Result(True, BASIC_OPERATORS[symbol][1](left, right))

    def _popstack(self, stack, n=1):
        '''
        Pop specified number of values from stack, topmost first.
        '''
        return [stack.pop() for _ in range(n)]
