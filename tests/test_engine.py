import math

import pytest

from core import (
    AngleMode, Calculator, EngineConfig, ERROR, HistoryEntry, InvalidExpression,
    UnknownVariable, is_error
)


def test_precedence_and_associativity(calc):
    assert calc.evaluate("2+3*4") == 14
    assert calc.evaluate("2^3^2") == 512
    assert calc.evaluate("-3^2") == -9


def test_implicit_multiplication(calc):
    assert calc.evaluate("2(3+4)") == 14
    assert calc.evaluate("2sin(90)") == pytest.approx(2.0)
    assert calc.evaluate("(1+1)(2+2)") == 8


def test_parenthesization(calc):
    assert calc.evaluate("(2+3)*4") == 20


def test_variable_scope(calc):
    assert calc.evaluate("x+1", {'x': 5}) == 6
    assert is_error(calc.evaluate("x+1", {}))


def test_angle_mode_sensitivity(calc):
    assert calc.evaluate("sin(90)") == pytest.approx(1.0)
    calc.set_angle_mode("rad")
    assert calc.angle_mode == AngleMode.RADIANS
    assert calc.evaluate("sin(90)") == pytest.approx(0.8939966636)


def test_constants(calc):
    assert calc.evaluate("2*PI") == pytest.approx(6.283185307)
    assert calc.evaluate("2*pi") == pytest.approx(6.283185307)
    assert calc.evaluate("2PI") == pytest.approx(6.283185307)
    assert calc.constants['pi'] == pytest.approx(math.pi)


def test_user_defined_constant(calc):
    calc.constants['g'] = 9.81
    assert calc.evaluate("2G") == pytest.approx(19.62)


def test_malformed_input_degrades_to_error_marker(calc):
    assert is_error(calc.evaluate("2+"))
    assert is_error(calc.evaluate(""))
    assert is_error(calc.evaluate("(2+3"))
    assert math.isnan(ERROR)


def test_evaluate_result_preserves_error_kind(calc):
    result = calc.evaluate_result("y*2")
    assert not result.ok
    assert isinstance(result.error, UnknownVariable)
    result = calc.evaluate_result("2*")
    assert isinstance(result.error, InvalidExpression)
    result = calc.evaluate_result("2*3")
    assert result.ok and result.value == 6


def test_failures_are_logged(calc, caplog):
    calc.evaluate("2+")
    assert "Error evaluating '2+'" in caplog.text


def test_history_records_successful_unscoped_evaluations_in_order(calc):
    calc.evaluate("1+1")
    calc.evaluate("2*3")
    calc.evaluate("2+")
    assert calc.history == [("1+1", 2), ("2*3", 6)]
    assert isinstance(calc.history[0], HistoryEntry)


def test_scoped_evaluations_never_touch_history(calc):
    calc.evaluate("x+1", {'x': 1})
    calc.evaluate("x+", {'x': 1})
    calc.evaluate("y", {'x': 1})
    assert calc.history == []


def test_nan_result_still_recorded(calc):
    calc.evaluate("sqrt(-1)")
    assert len(calc.history) == 1
    assert math.isnan(calc.history[0].result)


def test_clear_history(calc):
    calc.memory_store(3)
    calc.evaluate("1+1")
    calc.clear_history()
    assert calc.history == []
    assert calc.memory == 3


def test_history_limit_keeps_most_recent():
    calc = Calculator(config=EngineConfig(), history_limit=2)
    for expr in ("1", "2", "3"):
        calc.evaluate(expr)
    assert [e.expression for e in calc.history] == ["2", "3"]


def test_history_frame(calc):
    calc.evaluate("1+2")
    calc.evaluate("3*3")
    frame = calc.history_frame()
    assert list(frame.columns) == ['expression', 'result']
    assert frame['result'].tolist() == [3, 9]
    calc.clear_history()
    assert calc.history_frame().empty


def test_memory_register(calc):
    assert calc.memory_recall() == 0
    calc.memory_add(calc.evaluate("2*5"))
    calc.memory_subtract(3)
    assert calc.memory_recall() == 7
    calc.memory_clear()
    assert calc.memory == 0


def test_tokenize_collects_diagnostics(calc):
    diagnostics = []
    calc.tokenize("1 $ 2", diagnostics)
    assert [d.char for d in diagnostics] == ['$']


def test_default_config_comes_from_settings():
    calc = Calculator()
    assert calc.angle_mode == AngleMode.DEGREES
    assert 'E' in calc.constants


def test_engine_config_rejects_unknown_angle_mode():
    with pytest.raises(ValueError):
        EngineConfig(angle_mode="grad")


def test_constants_pop_and_setdefault_ignore_case(calc):
    calc.constants['g'] = 9.81
    assert calc.constants.pop('g') == pytest.approx(9.81)
    assert 'G' not in calc.constants
    calc.constants.setdefault('c', 3)
    assert 'c' in calc.constants and 'C' in calc.constants
    assert calc.evaluate("2c") == 6
    assert calc.constants.setdefault('C', 5) == 3


def test_constants_copy_stays_case_insensitive(calc):
    copied = calc.constants.copy()
    copied['phi'] = 1.618
    assert copied['PHI'] == pytest.approx(1.618)
    assert 'phi' not in calc.constants
    assert sorted(calc.constants) == ['E', 'PI']


def test_history_entries_are_hashable(calc):
    calc.evaluate("1+1")
    calc.evaluate("1+1")
    assert len(set(calc.history)) == 1
    assert calc.history[0].expression == "1+1"


def test_zero_history_limit_is_respected():
    calc = Calculator(config=EngineConfig(), history_limit=0)
    calc.evaluate("1+1")
    assert calc.history == []


def test_history_limit_defaults_from_settings_with_explicit_config(monkeypatch):
    from config import config as settings
    monkeypatch.setitem(settings.ENGINE_CONFIG, 'history_limit', 1)
    calc = Calculator(config=EngineConfig())
    calc.evaluate("1")
    calc.evaluate("2")
    assert calc.history == [("2", 2)]
