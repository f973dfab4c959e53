import math

import pytest

from core import Lexer, LexDiagnostic, Token, TokenType, OpKind, FnKind
from core.lexer import parse_decimal

CONSTANTS = {'PI': math.pi, 'E': math.e}


def lex(text, diagnostics=None):
    return Lexer.tokenize(text, CONSTANTS, diagnostics)


def test_numbers_and_operators():
    toks = lex("12.5 + 3")
    assert toks == [Token.number(12.5), Token.operator(OpKind.ADD), Token.number(3)]


def test_whitespace_is_skipped():
    assert lex("  1\t*\n2 ") == lex("1*2")


def test_leading_minus_is_unary():
    toks = lex("-3")
    assert toks[0] == Token.operator(OpKind.UNARY_MINUS)


def test_minus_after_operator_and_open_paren_is_unary():
    toks = lex("2*-(-3)")
    kinds = [t.value for t in toks if t.type == TokenType.OPERATOR]
    assert kinds == [OpKind.MUL, OpKind.UNARY_MINUS, OpKind.UNARY_MINUS]


def test_minus_after_close_paren_is_binary():
    toks = lex("(2)-1")
    assert toks[3] == Token.operator(OpKind.SUB)


def test_implicit_multiplication_before_paren():
    toks = lex("2(3)")
    assert toks[:3] == [Token.number(2), Token.operator(OpKind.MUL), Token.paren('(')]


def test_implicit_multiplication_before_identifier():
    toks = lex("2x")
    assert toks == [Token.number(2), Token.operator(OpKind.MUL), Token.variable('x')]


def test_implicit_multiplication_before_number_after_variable_or_paren():
    assert lex("x2") == [Token.variable('x'), Token.operator(OpKind.MUL), Token.number(2)]
    assert lex("(1)2")[3] == Token.operator(OpKind.MUL)


def test_no_implicit_multiplication_between_numbers():
    assert lex("2 3") == [Token.number(2), Token.number(3)]


def test_functions_are_case_insensitive():
    assert lex("SIN")[0] == Token.function(FnKind.SIN)
    assert lex("Sqrt")[0] == Token.function(FnKind.SQRT)


def test_constants_substituted_case_insensitively():
    assert lex("pi") == [Token.number(math.pi)]
    assert lex("e") == [Token.number(math.e)]


def test_constant_wins_over_function_name():
    toks = Lexer.tokenize("sin", {'SIN': 5.0})
    assert toks == [Token.number(5.0)]


def test_zero_valued_constant_still_matches():
    assert Lexer.tokenize("z", {'Z': 0.0}) == [Token.number(0.0)]


def test_unknown_identifier_is_variable_with_case_preserved():
    assert lex("Foo") == [Token.variable('Foo')]


def test_comma_token_emitted():
    assert lex("1,2")[1] == Token.comma()


def test_unrecognized_characters_are_skipped_and_reported():
    diagnostics = []
    toks = lex("2 @ 3#", diagnostics)
    assert toks == [Token.number(2), Token.number(3)]
    assert diagnostics == [LexDiagnostic(2, '@'), LexDiagnostic(5, '#')]


def test_decimal_prefix_parsing():
    assert parse_decimal("1.2.3") == 1.2
    assert parse_decimal(".5") == 0.5
    assert parse_decimal("5.") == 5.0
    assert math.isnan(parse_decimal("."))


def test_tokens_are_immutable():
    tk = Token.number(1)
    with pytest.raises(AttributeError):
        tk.value = 2
