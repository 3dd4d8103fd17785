'''
Sign resolution tests
'''

from infixrpn.lexer import Lexer
from infixrpn.signs import SignResolver
from infixrpn.tokens import Token, TokenType
from infixrpn.util import MissingFunctionArgument, UnknownSymbol

from pytest import raises


def resolved(line, operands=None):
    resolver = SignResolver() if operands is None else \
        SignResolver(operands=operands)
    tokens = [resolver.classify(lexeme)
              for lexeme
              in Lexer().tokenize(line)]
    return [token.text for token in resolver.resolve(tokens)]


def test_classify(operands):
    operands.add('x', 1.0)
    s = SignResolver(operands=operands)
    assert s.classify('x') == Token(TokenType.OPERAND, 'x')
    assert s.classify('2.5') == Token(TokenType.NUMBER, '2.5')
    assert s.classify('-') == Token(TokenType.BASIC_OPERATOR, '-')
    assert s.classify('sqrt') == Token(TokenType.FUNCTION_OPERATOR, 'sqrt')
    assert s.classify('^') == Token(TokenType.FUNCTION_OPERATOR, '^')
    assert s.classify('(').type is TokenType.OPEN_PARENTHESIS
    assert s.classify(')').type is TokenType.CLOSE_PARENTHESIS


def test_classify_unknown():
    s = SignResolver()
    for lexeme in 'y', '%', 'X', ',':
        with raises(UnknownSymbol):
            s.classify(lexeme)


def test_operand_shadows_function(operands):
    operands.add('sin', 1.0)
    s = SignResolver(operands=operands)
    assert s.classify('sin').type is TokenType.OPERAND


def test_binary_signs():
    assert resolved('3 - 2 + 1') == ['3', '-', '2', '+', '1']
    assert resolved('(1) - 2') == ['(', '1', ')', '-', '2']


def test_collapse_runs():
    assert resolved('3 - - 2') == ['3', '+', '2']
    assert resolved('3 -+- 2') == ['3', '+', '2']
    assert resolved('3 +-+ 2') == ['3', '-', '2']
    assert resolved('3 --- 2') == ['3', '-', '2']


def test_unary_plus_dropped():
    assert resolved('+3') == ['3']
    assert resolved('2 * +3') == ['2', '*', '3']
    assert resolved('- - 3') == ['3']


def test_negative_number_fused():
    assert resolved('-3') == ['-3']
    assert resolved('2 * -3.5') == ['2', '*', '-3.5']
    assert resolved('(-1)') == ['(', '-1', ')']
    assert resolved('sqrt -4') == ['sqrt', '-4']


def test_negative_parentheses():
    assert resolved('-(2 + 3) * 4') == \
        ['(', '0', '-', '(', '2', '+', '3', ')', ')', '*', '4']


def test_negative_function():
    assert resolved('-sqrt(9)') == \
        ['(', '0', '-', 'sqrt', '(', '9', ')', ')']
    assert resolved('1 - -root 3 8 * 2') == \
        ['1', '+', 'root', '3', '8', '*', '2']
    assert resolved('1 * -root 3 8 * 2') == \
        ['1', '*', '(', '0', '-', 'root', '3', '8', ')', '*', '2']


def test_negative_function_skips_nested_functions():
    assert resolved('-sqrt sqrt 16') == \
        ['(', '0', '-', 'sqrt', 'sqrt', '16', ')']


def test_negative_function_of_negative():
    assert resolved('-sqrt -(4)') == \
        ['(', '0', '-', 'sqrt', '(', '0', '-', '(', '4', ')', ')', ')']


def test_nested_negative_groups():
    assert resolved('-(-(3))') == \
        ['(', '0', '-', '(', '(', '0', '-', '(', '3', ')', ')', ')', ')']


def test_negative_operand(operands):
    operands.add('x', 2.0)
    assert resolved('-x', operands) == ['(', '0', '-', 'x', ')']
    assert resolved('2 * -x', operands) == \
        ['2', '*', '(', '0', '-', 'x', ')']


def test_missing_function_argument():
    with raises(MissingFunctionArgument, match='sqrt'):
        resolved('-sqrt')
    with raises(MissingFunctionArgument, match='root'):
        resolved('-root 3')


def test_dangling_sign():
    assert resolved('3 -') == ['3', '-']
    assert resolved('-') == ['-']
    assert resolved('(-)') == ['(', '-', ')']
