"""计算器会话 - 表达式输入、计算结果和历史记录"""
import logging
from enum import Enum

import pandas as pd

from config.config import DISPLAY_CONFIG, SESSION_CONFIG
from core import evaluate, EvaluationError
from utils.formatting import format_result, format_history_entry, parse_history_entry

logger = logging.getLogger(__name__)


class ActionType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    CLEAR = "clear"
    DELETE = "delete"
    CALCULATE = "calculate"
    TOGGLE_HISTORY = "toggle_history"
    CLEAR_HISTORY = "clear_history"


class CalculatorAction:
    """用户动作；NUMBER / OPERATOR 携带要追加的文本"""

    def __init__(self, action_type, text=None):
        if action_type in (ActionType.NUMBER, ActionType.OPERATOR) and not text:
            raise ValueError(f"{action_type.name} action requires text")
        self.type = action_type
        self.text = text

    @classmethod
    def number(cls, text):
        return cls(ActionType.NUMBER, text)

    @classmethod
    def operator(cls, text):
        return cls(ActionType.OPERATOR, text)

    def __repr__(self):
        if self.text is None:
            return f"CalculatorAction({self.type.name})"
        return f"CalculatorAction({self.type.name}, {self.text!r})"


class CalculatorState:
    """会话状态"""

    def __init__(self, expression="", result="", history=None, is_history_visible=False):
        self.expression = expression
        self.result = result
        self.history = list(history) if history else []  # 最新的在最前
        self.is_history_visible = is_history_visible

    def copy(self):
        return CalculatorState(self.expression, self.result, self.history, self.is_history_visible)

    def __eq__(self, other):
        if not isinstance(other, CalculatorState):
            return NotImplemented
        return (self.expression, self.result, self.history, self.is_history_visible) == \
               (other.expression, other.result, other.history, other.is_history_visible)

    def __repr__(self):
        return (f"CalculatorState(expression={self.expression!r}, result={self.result!r}, "
                f"history={len(self.history)} entries, visible={self.is_history_visible})")


class CalculatorSession:
    """单个用户的计算器会话（非线程安全）"""

    def __init__(self, history_limit=None, evaluate_func=None):
        self._state = CalculatorState()
        self.history_limit = history_limit if history_limit is not None else SESSION_CONFIG['history_limit']
        if self.history_limit is not None and self.history_limit <= 0:
            raise ValueError(f"history_limit must be positive, got {self.history_limit}")
        self._evaluate = evaluate_func or evaluate

    @property
    def state(self):
        return self._state.copy()

    @property
    def expression(self):
        return self._state.expression

    @property
    def result(self):
        return self._state.result

    @property
    def history(self):
        return list(self._state.history)

    def on_action(self, action):
        """分发用户动作"""
        if action.type in (ActionType.NUMBER, ActionType.OPERATOR):
            self.append(action.text)
        elif action.type == ActionType.CLEAR:
            self.clear()
        elif action.type == ActionType.DELETE:
            self.delete()
        elif action.type == ActionType.CALCULATE:
            self.calculate()
        elif action.type == ActionType.TOGGLE_HISTORY:
            self.toggle_history()
        elif action.type == ActionType.CLEAR_HISTORY:
            self.clear_history()
        else:
            raise ValueError(f"Unknown action: {action!r}")
        return self.state

    def append(self, text):
        self._state.expression += text

    def clear(self):
        """清空表达式和结果，保留历史"""
        self._state.expression = ""
        self._state.result = ""

    def delete(self):
        if self._state.expression:
            self._state.expression = self._state.expression[:-1]

    def calculate(self):
        """
        计算当前表达式
        Returns:
            格式化后的结果文本；表达式为空时返回 None
        """
        expr = self._state.expression
        if not expr.strip():
            return None

        try:
            value = self._evaluate(expr)
        except EvaluationError as e:
            logger.warning(f"Failed to evaluate {expr!r}: {e}")
            self._state.result = DISPLAY_CONFIG['error_text']
            return self._state.result

        formatted = format_result(value)
        self._state.result = formatted
        self._state.history.insert(0, format_history_entry(expr, formatted))
        if self.history_limit is not None and len(self._state.history) > self.history_limit:
            del self._state.history[self.history_limit:]
        return formatted

    def toggle_history(self):
        self._state.is_history_visible = not self._state.is_history_visible

    def clear_history(self):
        self._state.history = []

    def history_frame(self):
        """历史记录转为DataFrame（最新的在前）"""
        rows = [parse_history_entry(entry) for entry in self._state.history]
        return pd.DataFrame(rows, columns=['expression', 'result'])

    def save_history(self, path):
        frame = self.history_frame()
        frame.to_csv(path, index=False, encoding='utf-8')
        logger.info(f"Saved {len(frame)} history entries to {path}")
        return frame
