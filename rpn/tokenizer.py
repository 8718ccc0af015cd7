"""rpn/tokenizer.py"""
import logging
import re

import numpy as np

from config.config import TOKENIZER_CONFIG
from rpn.errors import OperandConversionError
from rpn.token_system import Operand, Operator, is_numeric

logger = logging.getLogger(__name__)

# 转换时要求整个token为可选符号加ASCII数字
_INTEGER_LITERAL = re.compile(r'[+-]?[0-9]+')
_INT64 = np.iinfo(np.int64)


class RPNTokenizer:
    """把RPN字符串拆分为Token序列"""

    @staticmethod
    def to_integer(text):
        """把数字token转换为int64范围内的整数"""
        if _INTEGER_LITERAL.fullmatch(text) is None:
            raise OperandConversionError(text)
        value = int(text)
        if not _INT64.min <= value <= _INT64.max:
            raise OperandConversionError(text)
        return value

    @staticmethod
    def parse(seq, separator=None):
        """
        按单个空格拆分，不裁剪也不合并连续空格
        Args:
            seq: RPN表达式字符串
            separator: 分隔符，默认取 TOKENIZER_CONFIG
        Returns:
            Token列表；空字符串返回空列表
        """
        if separator is None:
            separator = TOKENIZER_CONFIG["separator"]
        if seq == "":
            return []

        tokens = []
        for text in seq.split(separator):
            if is_numeric(text):
                tokens.append(Operand(RPNTokenizer.to_integer(text)))
            else:
                tokens.append(Operator(text))

        logger.debug(f"Parsed {len(tokens)} tokens from {seq[:50]!r}")
        return tokens


def parse(seq, separator=None):
    return RPNTokenizer.parse(seq, separator)
