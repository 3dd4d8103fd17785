'''
Sign resolution.

Decides whether each + or - is a binary operator or a sign, collapses runs
of signs, and rewrites unary minus before anything but a number into an
explicit (0 - ...) group.
'''

from collections import Counter
import logging

import regex

from .operands import OPERANDS
from .operators import OPERATORS
from .tokens import (Token, TokenType, BASIC_OPERATORS, NUMBER,
                     NO_TOKEN, OPEN, CLOSE)
from .util import MissingFunctionArgument, UnknownSymbol


logger = logging.getLogger(__name__)

# What may precede a unary sign
UNARY_CONTEXT = {
    TokenType.NONE,
    TokenType.BASIC_OPERATOR,
    TokenType.FUNCTION_OPERATOR,
    TokenType.OPEN_PARENTHESIS,
}
ZERO = Token(TokenType.NUMBER, '0')
MINUS = Token(TokenType.BASIC_OPERATOR, '-')


class SignResolver:
    '''
    Classifies lexemes and resolves signs among them.

    :param operators: Function operator registry, for names and arities.
    :param operands: Operand registry, for names.
    '''

    def __init__(self, operators=OPERATORS, operands=OPERANDS):
        self.operators = operators
        self.operands = operands

    def classify(self, lexeme):
        '''
        Return the token for a lexeme, as it stands alone.

        Operands take priority over function operators of the same name.
        '''
        if lexeme in self.operands:
            return Token(TokenType.OPERAND, lexeme)
        elif regex.fullmatch(NUMBER, lexeme):
            return Token(TokenType.NUMBER, lexeme)
        elif lexeme in BASIC_OPERATORS:
            return Token(TokenType.BASIC_OPERATOR, lexeme)
        elif lexeme in self.operators:
            return Token(TokenType.FUNCTION_OPERATOR, lexeme)
        elif lexeme == OPEN.text:
            return OPEN
        elif lexeme == CLOSE.text:
            return CLOSE
        raise UnknownSymbol(lexeme)

    def resolve(self, tokens):
        '''
        Yield tokens with every sign resolved.

        A sign is unary after an operator, an open parenthesis, or at the
        start. Unary plus is dropped. Unary minus fuses with a following
        number; before anything else it opens a (0 - ...) group, closed after
        the whole following operand, parenthesized block, or function call.

        Operand names are not fused: -x gives 0 x - in RPN rather than a
        single -x token, which would name no operand.

        :param tokens: Classified tokens, as from classify.
        '''
        tokens = tuple(tokens)
        # Position in tokens -> group closes due before it
        closes = Counter()
        previous = NO_TOKEN
        index = 0
        while True:
            for _ in range(closes.pop(index, 0)):
                previous = CLOSE
                yield previous
            if index >= len(tokens):
                break
            token = tokens[index]
            index += 1

            if not token.issign():
                previous = token
                yield token
                continue

            sign, index = self._collapse(token.text, tokens, index)
            following = tokens[index] if index < len(tokens) else None
            if previous.type not in UNARY_CONTEXT or following is None:
                previous = Token(TokenType.BASIC_OPERATOR, sign)
                yield previous
            elif sign == '+':
                continue
            elif following.type is TokenType.NUMBER:
                previous = Token(TokenType.NUMBER, sign + following.text)
                index += 1
                yield previous
            elif following.isoperand() or \
                 following.type in (TokenType.OPEN_PARENTHESIS,
                                    TokenType.FUNCTION_OPERATOR):
                end = self._group_end(tokens, index)
                logger.debug('Negating %r up to token %d',
                             following.text, end)
                closes[end] += 1
                yield OPEN
                yield ZERO
                previous = MINUS
                yield previous
            else:
                # Nothing to negate; left for validation to reject
                previous = MINUS
                yield previous

    def _collapse(self, sign, tokens, index):
        '''
        Fold the run of signs following tokens[index - 1] into one.

        :returns: Resulting sign and index of first token after the run.
        '''
        while index < len(tokens) and tokens[index].issign():
            sign = '+' if sign == tokens[index].text else '-'
            index += 1
        return sign, index

    def _group_end(self, tokens, index):
        '''
        Return index just past the operand starting at tokens[index].

        A function operator spans as many arguments as its arity, each a
        single operand or a parenthesized block. Anything else before an
        argument is skipped over.
        '''
        token = tokens[index]
        if token.type is TokenType.OPEN_PARENTHESIS:
            return self._skip_parentheses(tokens, index)
        elif token.isoperand():
            return index + 1

        index += 1
        for _ in range(self.operators[token.text].arity):
            while index < len(tokens) and \
                  not tokens[index].isoperand() and \
                  tokens[index].type is not TokenType.OPEN_PARENTHESIS:
                index += 1
            if index >= len(tokens):
                raise MissingFunctionArgument(token.text)
            if tokens[index].type is TokenType.OPEN_PARENTHESIS:
                index = self._skip_parentheses(tokens, index)
            else:
                index += 1
        return index

    def _skip_parentheses(self, tokens, index):
        '''
        Return index just past the parenthesis matching tokens[index].
        '''
        depth = 0
        for index in range(index, len(tokens)):
            if tokens[index].type is TokenType.OPEN_PARENTHESIS:
                depth += 1
            elif tokens[index].type is TokenType.CLOSE_PARENTHESIS:
                depth -= 1
                if not depth:
                    return index + 1
        return len(tokens)
