"""rpn/token_system.py"""
import re
from enum import Enum

from config.config import TOKENIZER_CONFIG


class TokenType(Enum):
    OPERAND = "operand"  # 整数操作数
    OPERATOR = "operator"  # 操作符（或待校验的未知符号）


class Token:
    def __init__(self, token_type, name, value=None, arity=0):
        self.type = token_type
        self.name = name
        self.value = value
        self.arity = arity

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.name, self.value) == (other.type, other.name, other.value)

    def __hash__(self):
        return hash((self.type, self.name, self.value))

    def __repr__(self):
        return f"Token({self.type.name}, {self.name!r})"


class Operand(Token):
    """已解析的整数操作数"""

    def __init__(self, value):
        super().__init__(TokenType.OPERAND, str(int(value)), value=int(value))

    def __repr__(self):
        return f"Operand({self.value})"


class Operator(Token):
    """操作符候选：符号在求值时才校验"""

    def __init__(self, symbol):
        super().__init__(TokenType.OPERATOR, symbol, arity=2 if is_operator(symbol) else 0)

    def __repr__(self):
        return f"Operator({self.name!r})"


# 符号 -> Operators 方法名
OPERATOR_DEFINITIONS = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
}


def is_operator(symbol):
    """symbol 是否属于固定的四个二元操作符"""
    return symbol in OPERATOR_DEFINITIONS


def is_numeric(text):
    """
    宽松的数字判断：只要字符串中出现数字即视为操作数。
    注意 "1a" 也会被判为数字，随后在转换时失败。
    """
    return re.search(TOKENIZER_CONFIG["operand_pattern"], text) is not None
