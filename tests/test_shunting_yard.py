from core import Lexer, ShuntingYard, Token
from core.token_system import format_tokens


def rpn(text, constants=None):
    return format_tokens(ShuntingYard.to_rpn(Lexer.tokenize(text, constants)))


def test_precedence():
    assert rpn("2+3*4") == "2.0 3.0 4.0 * +"


def test_left_associativity():
    assert rpn("8-3-2") == "8.0 3.0 - 2.0 -"


def test_power_is_right_associative():
    assert rpn("2^3^2") == "2.0 3.0 2.0 ^ ^"


def test_unary_minus_binds_looser_than_power():
    assert rpn("-3^2") == "3.0 2.0 ^ u-"


def test_unary_minus_binds_tighter_than_multiplication():
    assert rpn("-7%3") == "7.0 u- 3.0 %"


def test_parentheses():
    assert rpn("(2+3)*4") == "2.0 3.0 + 4.0 *"


def test_function_applied_after_its_group():
    assert rpn("sin(30+60)*2") == "30.0 60.0 + sin 2.0 *"


def test_function_without_parens_flushed_at_end():
    assert rpn("sqrt 4") == "4.0 sqrt"


def test_comma_is_ignored():
    assert rpn("1,2") == "1.0 2.0"


def test_leftover_open_paren_flushed_to_output():
    out = ShuntingYard.to_rpn(Lexer.tokenize("(2+3"))
    assert out[-1] == Token.paren('(')


def test_unmatched_close_paren_pops_pending_operators():
    assert rpn("2+3)*4") == "2.0 3.0 + 4.0 *"
