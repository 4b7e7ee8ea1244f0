"""core/operators.py"""
import numpy as np

from config.config import EVALUATOR_CONFIG
from core.token_system import OperatorKind

PERCENT_DIVISOR = np.float64(EVALUATOR_CONFIG['percent_divisor'])


class Operators:
    """所有操作符的静态方法集合，全部按 IEEE-754 float64 计算，不抛异常"""

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        return np.negative(np.float64(operand))

    @staticmethod
    def sqrt(operand):
        """负数返回 NaN"""
        with np.errstate(invalid='ignore'):
            return np.sqrt(np.float64(operand))

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除零得到 ±inf 或 NaN"""
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return np.divide(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def pow(operand1, operand2):
        """负底数配小数指数得到 NaN，溢出得到 inf"""
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return np.power(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def percent(operand1, operand2):
        """a % b = a * (b / 100)"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) * (np.float64(operand2) / PERCENT_DIVISOR)


UNARY_OPERATIONS = {
    OperatorKind.NEG: Operators.neg,
    OperatorKind.SQRT: Operators.sqrt,
}

BINARY_OPERATIONS = {
    OperatorKind.ADD: Operators.add,
    OperatorKind.SUB: Operators.sub,
    OperatorKind.MUL: Operators.mul,
    OperatorKind.DIV: Operators.div,
    OperatorKind.POW: Operators.pow,
    OperatorKind.PERCENT: Operators.percent,
}
