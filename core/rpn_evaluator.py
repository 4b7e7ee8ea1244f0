"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

import numpy as np

from config.config import EVALUATOR_CONFIG
from core.token_system import TokenType, tokens_to_text
from core.operators import UNARY_OPERATIONS, BINARY_OPERATIONS

logger = logging.getLogger(__name__)


class EvaluationError(ValueError):
    """表达式求值失败"""


class NumericParseError(EvaluationError):
    """数字字面量无法解析（例如 1.2.3）"""

    def __init__(self, literal):
        super().__init__(f"Malformed numeric literal: {literal!r}")
        self.literal = literal


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def parse_number(literal):
        try:
            return np.float64(float(literal))
        except ValueError as e:
            raise NumericParseError(literal) from e

    @staticmethod
    def _pop(stack, token):
        if stack:
            return stack.pop()
        # 操作数不足：用默认值代替
        logger.debug(f"Missing operand for {token.name}, substituting 0.0")
        return np.float64(EVALUATOR_CONFIG['missing_operand_value'])

    @staticmethod
    def evaluate(token_sequence):
        """
        评估RPN表达式
        Args:
            token_sequence: to_postfix() 输出的Token序列
        Returns:
            float 结果；空序列返回 0.0
        Raises:
            NumericParseError: 数字token无法解析
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(RPNEvaluator.parse_number(token.value))

            elif token.type == TokenType.OPERATOR:
                # ================== 一元操作符处理 ==================
                if token.arity == 1:
                    operand = RPNEvaluator._pop(stack, token)
                    stack.append(UNARY_OPERATIONS[token.kind](operand))

                # ================== 二元操作符处理 ==================
                elif token.arity == 2:
                    operand2 = RPNEvaluator._pop(stack, token)
                    operand1 = RPNEvaluator._pop(stack, token)
                    stack.append(BINARY_OPERATIONS[token.kind](operand1, operand2))

                else:
                    raise AssertionError(f"Unexpected arity {token.arity} for {token.name}")

            else:
                # 括号不应出现在RPN中
                logger.debug(f"Ignoring {token.name} in RPN sequence")

        # 返回结果处理
        if not stack:
            return float(EVALUATOR_CONFIG['empty_result'])
        if len(stack) > 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, "
                         f"returning top. RPN expression: {tokens_to_text(token_sequence)}")
        return float(stack[-1])
