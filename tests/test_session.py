import logging

import pandas as pd
import pytest

from session import ActionType, CalculatorAction, CalculatorSession, CalculatorState


def type_in(session, *parts):
    for part in parts:
        kind = ActionType.NUMBER if part[0].isdigit() or part[0] == '.' else ActionType.OPERATOR
        session.on_action(CalculatorAction(kind, part))


def test_calculate_records_history():
    session = CalculatorSession()
    type_in(session, "2", "+", "3")
    state = session.on_action(CalculatorAction(ActionType.CALCULATE))
    assert state.result == "5"
    assert state.expression == "2+3"
    assert state.history == ["2+3 = 5"]


def test_history_is_newest_first():
    session = CalculatorSession()
    for expr in ("1+1", "2*3"):
        session.clear()
        session.append(expr)
        session.calculate()
    assert session.history == ["2*3 = 6", "1+1 = 2"]


def test_malformed_literal_shows_error(caplog):
    session = CalculatorSession()
    session.append("1+1")
    session.calculate()
    session.clear()
    session.append("1.2.3+4")
    with caplog.at_level(logging.WARNING):
        assert session.calculate() == "Error"
    assert session.result == "Error"
    assert session.expression == "1.2.3+4"
    assert session.history == ["1+1 = 2"]
    assert "1.2.3" in caplog.text


def test_ieee_results_are_not_errors():
    session = CalculatorSession()
    session.append("5÷0")
    assert session.calculate() == "∞"
    assert session.history == ["5÷0 = ∞"]


def test_blank_expression_is_ignored():
    session = CalculatorSession()
    assert session.calculate() is None
    session.append("  ")
    assert session.calculate() is None
    assert session.state == CalculatorState(expression="  ")


def test_clear_keeps_history():
    session = CalculatorSession()
    session.append("2*4")
    session.calculate()
    session.on_action(CalculatorAction(ActionType.CLEAR))
    assert session.expression == ""
    assert session.result == ""
    assert session.history == ["2*4 = 8"]


def test_delete_drops_last_character():
    session = CalculatorSession()
    session.on_action(CalculatorAction(ActionType.DELETE))
    assert session.expression == ""
    type_in(session, "12", "+")
    session.on_action(CalculatorAction(ActionType.DELETE))
    assert session.expression == "12"


def test_toggle_and_clear_history():
    session = CalculatorSession()
    session.append("1")
    session.calculate()
    state = session.on_action(CalculatorAction(ActionType.TOGGLE_HISTORY))
    assert state.is_history_visible is True
    state = session.on_action(CalculatorAction(ActionType.CLEAR_HISTORY))
    assert state.history == []
    assert state.is_history_visible is True
    assert session.on_action(CalculatorAction(ActionType.TOGGLE_HISTORY)).is_history_visible is False


def test_state_is_a_copy():
    session = CalculatorSession()
    session.append("1")
    session.calculate()
    state = session.state
    state.history.append("tampered")
    state.expression = "x"
    assert session.history == ["1 = 1"]
    assert session.expression == "1"


def test_history_limit():
    session = CalculatorSession(history_limit=2)
    for expr in ("1", "2", "3"):
        session.clear()
        session.append(expr)
        session.calculate()
    assert session.history == ["3 = 3", "2 = 2"]


def test_invalid_history_limit():
    with pytest.raises(ValueError):
        CalculatorSession(history_limit=0)


def test_action_requires_text():
    with pytest.raises(ValueError):
        CalculatorAction(ActionType.NUMBER)
    assert CalculatorAction.operator("+").text == "+"


def test_unexpected_errors_propagate():
    def broken(expression):
        raise RuntimeError("boom")

    session = CalculatorSession(evaluate_func=broken)
    session.append("1")
    with pytest.raises(RuntimeError):
        session.calculate()


def test_history_frame_and_csv(tmp_path):
    session = CalculatorSession()
    for expr in ("2+3", "10/4"):
        session.clear()
        session.append(expr)
        session.calculate()

    frame = session.history_frame()
    assert list(frame.columns) == ['expression', 'result']
    assert frame['expression'].tolist() == ["10/4", "2+3"]
    assert frame['result'].tolist() == ["2.5", "5"]

    path = tmp_path / "history.csv"
    session.save_history(path)
    loaded = pd.read_csv(path, dtype=str)
    assert list(loaded.columns) == ['expression', 'result']
    assert loaded.values.tolist() == frame.values.tolist()


def test_empty_history_frame():
    frame = CalculatorSession().history_frame()
    assert frame.empty
    assert list(frame.columns) == ['expression', 'result']
