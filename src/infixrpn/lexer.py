from functools import reduce
import operator

import regex

from .tokens import NUMBER
from .util import InvalidOperand


class Lexer:
    '''
    Lexer for infix expressions.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Tabs are spaces, all brackets are parentheses
    TRANSLATION = str.maketrans({
        '\t': ' ',
        '{': '(',
        '[': '(',
        '}': ')',
        ']': ')',
    })
    SPACE = r' +'
    # Pairs of characters that would lex as one lexeme, were the space
    # between them dropped.
    # sin x, 12 34, 12 .5
    MERGING = r'[a-z][a-z]|[0-9][0-9.]'
    # All possible lexemes, longest first.
    LEXEME = r'''
              (?<name>
                  # Operand or function operator
                  [a-z]+
              )|(?<number>
                  # Validated separately, to tell bad numbers from symbols
                  [0-9.]+
              )|(?<space>
                  \x20
              )|(?<symbol>
                  # Basic operator, parenthesis or symbolic function operator
                  .
              )
              '''
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def normalize(self, line):
        '''
        Normalize brackets and whitespace.

        Only keeps one space, and only between characters that would
        otherwise merge into one lexeme.
        '''
        line = line.translate(type(self).TRANSLATION)
        return regex.sub(type(self).SPACE, self._space, line)

    def _space(self, match):
        line = match.string
        start, end = match.span()
        if 0 < start and end < len(line) and \
           regex.fullmatch(type(self).MERGING, line[start - 1] + line[end]):
            return ' '
        return ''

    def isbalanced(self, line):
        '''
        Return True if every parenthesis has a matching one.
        '''
        depth = 0
        for c in line:
            if c == '(':
                depth += 1
            elif c == ')':
                if not depth:
                    return False
                depth -= 1
        return depth == 0

    def lex(self, line):
        '''
        Take a normalized line and yield all lexemes, spaces excluded.

        Raises InvalidOperand on the first malformed number.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            line = line[len(match.group(0)):]
            if match.group('space'):
                continue
            lexeme = match.group(0)
            if match.group('number') and \
               regex.fullmatch(NUMBER, lexeme) is None:
                raise InvalidOperand(lexeme)
            yield lexeme

    def tokenize(self, line):
        '''
        Normalize line and return all its lexemes.
        '''
        return tuple(self.lex(self.normalize(line)))
