"""核心模块 - Token系统、分词器、调度场转换、RPN评估器和操作符"""
from .token_system import (
    TokenType, OperatorKind, Token, TOKEN_DEFINITIONS, SYMBOL_TO_TOKEN
)
from .tokenizer import sanitize, tokenize
from .shunting_yard import to_postfix
from .rpn_evaluator import RPNEvaluator, EvaluationError, NumericParseError
from .operators import Operators
from .expression import evaluate

__all__ = [
    'TokenType', 'OperatorKind', 'Token', 'TOKEN_DEFINITIONS', 'SYMBOL_TO_TOKEN',
    'sanitize', 'tokenize', 'to_postfix',
    'RPNEvaluator', 'EvaluationError', 'NumericParseError',
    'Operators', 'evaluate'
]
