"""表达式求值入口：sanitize -> tokenize -> to_postfix -> RPN求值"""
import logging

from core.tokenizer import sanitize, tokenize
from core.shunting_yard import to_postfix
from core.rpn_evaluator import RPNEvaluator
from core.token_system import tokens_to_text

logger = logging.getLogger(__name__)


def evaluate(expression):
    """
    计算中缀表达式的值

    Args:
        expression: 用户输入的表达式，可以包含 × ÷ − 和空白

    Returns:
        float 结果。括号不匹配、缺少操作数、除零、负数开方都不报错，
        而是得到 0.0 / inf / NaN 等数值

    Raises:
        NumericParseError: 数字字面量格式错误
    """
    tokens = tokenize(sanitize(expression))
    rpn = to_postfix(tokens)
    logger.debug(f"{expression!r} -> RPN: {tokens_to_text(rpn)}")
    return RPNEvaluator.evaluate(rpn)
