"""中缀 -> 后缀(RPN) 转换，调度场算法"""
import logging

from core.token_system import TokenType

logger = logging.getLogger(__name__)


def to_postfix(tokens):
    """
    把中缀Token序列转为后缀序列
    Args:
        tokens: tokenize() 的输出
    Returns:
        RPN Token列表（括号已去除）
    """
    output = []
    stack = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type == TokenType.LEFT_PAREN:
            stack.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            while stack and stack[-1].type != TokenType.LEFT_PAREN:
                output.append(stack.pop())
            if stack:
                stack.pop()  # 丢弃 '('
            else:
                # 括号不匹配：静默忽略
                logger.debug("Unmatched ')' ignored")

        elif token.type == TokenType.OPERATOR:
            # 前缀一元操作符还没有操作数，不能弹出栈中任何操作符
            if not token.is_prefix:
                while (stack and stack[-1].type != TokenType.LEFT_PAREN
                       and stack[-1].precedence >= token.precedence):
                    output.append(stack.pop())
            stack.append(token)

    while stack:
        top = stack.pop()
        # 未闭合的 '(' 不进入输出
        if top.type == TokenType.LEFT_PAREN:
            logger.debug("Unmatched '(' ignored")
            continue
        output.append(top)

    return output
