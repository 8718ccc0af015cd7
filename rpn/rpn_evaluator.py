"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

import numpy as np

from config.config import EVALUATOR_CONFIG
from rpn.errors import EmptySequenceError, InvalidOperatorError, InvalidSequenceError
from rpn.operators import Operators
from rpn.token_system import OPERATOR_DEFINITIONS, TokenType
from rpn.tokenizer import parse

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def handle_token(token, stack):
        """
        处理单个Token：操作数入栈；操作符弹出两个操作数，运算后把结果入栈
        Args:
            token: Token
            stack: 当前栈（原地修改）
        Returns:
            修改后的栈
        """
        if token.type == TokenType.OPERAND:
            stack.append(np.int64(token.value))
            return stack

        # 操作符候选：先查表，再检查栈深度
        method_name = OPERATOR_DEFINITIONS.get(token.name)
        if method_name is None:
            raise InvalidOperatorError(token.name)
        if len(stack) < token.arity:
            logger.debug(f"Insufficient operands for {token.name!r}: stack size {len(stack)}")
            raise InvalidSequenceError()

        operand2 = stack.pop()
        operand1 = stack.pop()
        stack.append(getattr(Operators, method_name)(operand1, operand2))
        return stack

    @staticmethod
    def evaluate(token_sequence, allow_empty=None):
        """
        单遍扫描求值，栈只在尾部压入/弹出
        Args:
            token_sequence: Token序列
            allow_empty: 栈为空时返回None而不是抛出 EmptySequenceError，默认取 EVALUATOR_CONFIG
        Returns:
            栈顶的整数结果
        """
        if allow_empty is None:
            allow_empty = EVALUATOR_CONFIG["allow_empty"]

        stack = []
        for token in token_sequence:
            RPNEvaluator.handle_token(token, stack)

        if len(stack) == 0:
            if allow_empty:
                return None
            raise EmptySequenceError()
        if len(stack) > 1:
            # 多余的操作数直接忽略，只返回栈顶
            logger.debug(f"Ignoring {len(stack) - 1} extra stack elements")
        return int(stack[-1])


def evaluate(token_sequence, allow_empty=None):
    return RPNEvaluator.evaluate(token_sequence, allow_empty)


def calculate(seq="", allow_empty=None):
    """解析并求值RPN字符串，例如 calculate("1 2 + 3 *") == 9"""
    return RPNEvaluator.evaluate(parse(seq), allow_empty)
