"""rpn/operators.py"""
import logging
import operator

import numpy as np

from rpn.errors import DivisionByZeroError, IntegerOverflowError

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合，操作数均为 np.int64"""

    @staticmethod
    def _checked(func, operand1, operand2):
        """在 errstate(raise) 下运算，把numpy的溢出转换为 IntegerOverflowError"""
        operand1, operand2 = np.int64(operand1), np.int64(operand2)
        try:
            with np.errstate(over='raise', divide='raise', invalid='raise'):
                return func(operand1, operand2)
        except FloatingPointError as e:
            logger.debug(f"Overflow in {func.__name__}({operand1}, {operand2}): {e}")
            raise IntegerOverflowError(f"Integer overflow: {operand1} {func.__name__} {operand2}") from e

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return Operators._checked(operator.add, operand1, operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符：operand1 - operand2"""
        return Operators._checked(operator.sub, operand1, operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return Operators._checked(operator.mul, operand1, operand2)

    @staticmethod
    def div(operand1, operand2):
        """整数除法：operand1 / operand2，向零截断"""
        if operand2 == 0:
            raise DivisionByZeroError(f"Division by zero: {operand1} / 0")

        quotient = Operators._checked(operator.floordiv, operand1, operand2)
        remainder = Operators._checked(operator.mod, operand1, operand2)
        # floor_divide 向下取整，异号且不整除时向零修正
        if remainder != 0 and (operand1 < 0) != (operand2 < 0):
            quotient = Operators._checked(operator.add, quotient, 1)
        return quotient
