"""会话模块 - 计算器状态和历史"""
from .calculator_state import ActionType, CalculatorAction, CalculatorState, CalculatorSession

__all__ = ['ActionType', 'CalculatorAction', 'CalculatorState', 'CalculatorSession']
