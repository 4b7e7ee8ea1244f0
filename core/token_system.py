"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量
    OPERATOR = "operator"  # 操作符
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class OperatorKind(Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    POW = "pow"
    PERCENT = "percent"
    SQRT = "sqrt"
    NEG = "neg"


class Token:
    def __init__(self, token_type, name, value=None, kind=None, arity=0, precedence=0):
        self.type = token_type
        self.name = name
        self.value = value  # 数字token保存原始文本，求值时才解析
        self.kind = kind
        self.arity = arity
        self.precedence = precedence

    @classmethod
    def number(cls, text):
        return cls(TokenType.NUMBER, 'number', value=text)

    @property
    def is_prefix(self):
        """一元前缀操作符（sqrt, neg）"""
        return self.type == TokenType.OPERATOR and self.arity == 1

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.kind, self.value) == (other.type, other.kind, other.value)

    def __hash__(self):
        return hash((self.type, self.kind, self.value))

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token(number, {self.value!r})"
        return f"Token({self.name})"


# Token定义字典
TOKEN_DEFINITIONS = {
    # 括号
    '(': Token(TokenType.LEFT_PAREN, '('),
    ')': Token(TokenType.RIGHT_PAREN, ')'),

    # 二元操作符
    'add': Token(TokenType.OPERATOR, 'add', kind=OperatorKind.ADD, arity=2, precedence=1),  # +
    'sub': Token(TokenType.OPERATOR, 'sub', kind=OperatorKind.SUB, arity=2, precedence=1),  # -
    'mul': Token(TokenType.OPERATOR, 'mul', kind=OperatorKind.MUL, arity=2, precedence=2),  # *
    'div': Token(TokenType.OPERATOR, 'div', kind=OperatorKind.DIV, arity=2, precedence=2),  # /
    'percent': Token(TokenType.OPERATOR, 'percent', kind=OperatorKind.PERCENT, arity=2, precedence=2),  # %
    'pow': Token(TokenType.OPERATOR, 'pow', kind=OperatorKind.POW, arity=2, precedence=3),  # ^

    # 一元操作符
    'sqrt': Token(TokenType.OPERATOR, 'sqrt', kind=OperatorKind.SQRT, arity=1, precedence=3),  # √
    'neg': Token(TokenType.OPERATOR, 'neg', kind=OperatorKind.NEG, arity=1, precedence=3),  # 一元负号
}

# 输入字符 -> Token名称（'-' 由分词器按上下文区分 sub / neg）
SYMBOL_TO_TOKEN = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
    '^': 'pow',
    '%': 'percent',
    '√': 'sqrt',
    '(': '(',
    ')': ')',
}

OPERATOR_SYMBOLS = {
    OperatorKind.ADD: '+',
    OperatorKind.SUB: '-',
    OperatorKind.MUL: '*',
    OperatorKind.DIV: '/',
    OperatorKind.POW: '^',
    OperatorKind.PERCENT: '%',
    OperatorKind.SQRT: '√',
    OperatorKind.NEG: 'neg',
}


def token_to_text(token):
    """Token转为可读文本，用于日志"""
    if token.type == TokenType.NUMBER:
        return token.value
    if token.type == TokenType.OPERATOR:
        return OPERATOR_SYMBOLS[token.kind]
    return token.name


def tokens_to_text(tokens):
    return ' '.join(token_to_text(t) for t in tokens)
