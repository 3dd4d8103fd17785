from typing import List, NamedTuple
import logging

from .lexer import Lexer
from .machine import Machine
from .operands import OPERANDS
from .operators import OPERATORS
from .signs import SignResolver
from .tokens import TokenType
from .util import UnbalancedParentheses


logger = logging.getLogger(__name__)


class Conversion(NamedTuple):
    ok: bool
    rpn: List[str]


class Converter:
    '''
    Infix to RPN converter (shunting-yard).

    Operators of the same precedence tier are never popped against each
    other, so chains of them group to the right: 8 - 3 - 2 is 8 - (3 - 2).
    '''

    def __init__(self, operators=OPERATORS, operands=OPERANDS):
        self.lexer = Lexer()
        self.resolver = SignResolver(operators, operands)
        self.machine = Machine(operators, operands)

    def convert(self, line):
        '''
        Convert infix expression to RPN.

        Raises a ConversionError if line can't be tokenized. Returns a
        failed, empty Conversion if the result isn't valid RPN.
        '''
        line = self.lexer.normalize(line)
        if not self.lexer.isbalanced(line):
            raise UnbalancedParentheses(line)
        tokens = [self.resolver.classify(lexeme)
                  for lexeme
                  in self.lexer.lex(line)]
        rpn = [token.text
               for token
               in self.shunt(self.resolver.resolve(tokens))]
        if not self.machine.isvalid(rpn):
            logger.debug('Invalid RPN %r from %r', rpn, line)
            return Conversion(False, [])
        return Conversion(True, rpn)

    def shunt(self, tokens):
        '''
        Yield resolved infix tokens in postfix order.

        Assumes balanced parentheses.
        '''
        stack = []
        for token in tokens:
            if token.isoperand():
                yield token
            elif token.isoperator():
                while stack and \
                      self.machine.precedence(token) < \
                      self.machine.precedence(stack[-1]):
                    yield stack.pop()
                stack.append(token)
            elif token.type is TokenType.OPEN_PARENTHESIS:
                stack.append(token)
            elif token.type is TokenType.CLOSE_PARENTHESIS:
                while stack and \
                      stack[-1].type is not TokenType.OPEN_PARENTHESIS:
                    yield stack.pop()
                if stack:
                    stack.pop()
        while stack:
            yield stack.pop()
