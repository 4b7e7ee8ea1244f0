"""分词器 - 把输入字符串转换为Token序列"""
import re
import logging

from config.config import EVALUATOR_CONFIG
from core.token_system import TokenType, Token, TOKEN_DEFINITIONS, SYMBOL_TO_TOKEN

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r'\s+')


def sanitize(expression):
    """显示字符替换为标准运算符，并去掉所有空白。不做任何校验。"""
    if not isinstance(expression, str):
        raise TypeError(f"expression must be str, got {type(expression).__name__}")
    for glyph, symbol in EVALUATOR_CONFIG['glyph_replacements'].items():
        expression = expression.replace(glyph, symbol)
    return _WHITESPACE.sub('', expression)


def _is_number_char(ch):
    return ch.isdecimal() or ch == '.'


def _starts_operand(tokens):
    """下一个 '-' 是否为一元负号：序列开头、'(' 之后或任意操作符之后"""
    if not tokens:
        return True
    last = tokens[-1]
    return last.type in (TokenType.LEFT_PAREN, TokenType.OPERATOR)


def tokenize(sanitized):
    """
    单遍从左到右扫描
    Args:
        sanitized: 经过 sanitize 的表达式
    Returns:
        Token列表；无法识别的字符直接跳过
    """
    tokens = []
    i = 0
    n = len(sanitized)

    while i < n:
        ch = sanitized[i]

        if _is_number_char(ch):
            # 连续的数字和小数点合成一个数字token（不在这里校验格式）
            j = i
            while j < n and _is_number_char(sanitized[j]):
                j += 1
            tokens.append(Token.number(sanitized[i:j]))
            i = j
            continue

        if ch == '-' and _starts_operand(tokens):
            tokens.append(TOKEN_DEFINITIONS['neg'])
        elif ch in SYMBOL_TO_TOKEN:
            tokens.append(TOKEN_DEFINITIONS[SYMBOL_TO_TOKEN[ch]])
        else:
            logger.debug(f"Skipping unrecognized character {ch!r} at {i}")
        i += 1

    return tokens
