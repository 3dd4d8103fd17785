'''
Tokens of the infix grammar, as classified by the sign resolver.
'''

from enum import Enum, IntEnum
from typing import NamedTuple
import operator


class TokenType(Enum):
    NONE = 'none'
    NUMBER = 'number'
    OPERAND = 'operand'
    BASIC_OPERATOR = 'basic operator'
    FUNCTION_OPERATOR = 'function operator'
    OPEN_PARENTHESIS = 'open parenthesis'
    CLOSE_PARENTHESIS = 'close parenthesis'


class Precedence(IntEnum):
    '''
    Binding tiers. Function operators sit at FUNCTION_BASE plus their own
    offset.
    '''
    OTHER = 0
    SUM = 1
    MULTIPLICATION = 2
    FUNCTION_BASE = 3


class Token(NamedTuple):
    type: TokenType
    text: str

    def isoperand(self):
        return self.type in (TokenType.NUMBER, TokenType.OPERAND)

    def isoperator(self):
        return self.type in (TokenType.BASIC_OPERATOR,
                             TokenType.FUNCTION_OPERATOR)

    def issign(self):
        return self.type is TokenType.BASIC_OPERATOR and self.text in SIGNS


# Start of expression, for lookback
NO_TOKEN = Token(TokenType.NONE, '')
OPEN = Token(TokenType.OPEN_PARENTHESIS, '(')
CLOSE = Token(TokenType.CLOSE_PARENTHESIS, ')')

SIGNS = '+-'

# Symbol to (tier, implementation)
BASIC_OPERATORS = {
    '+': (Precedence.SUM, operator.__add__),
    '-': (Precedence.SUM, operator.__sub__),
    '*': (Precedence.MULTIPLICATION, operator.__mul__),
    '/': (Precedence.MULTIPLICATION, operator.__truediv__),
}

# Numeric literal, optionally signed once fused with a unary minus.
# 1, 1., 1.5, .5
NUMBER = r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)'
