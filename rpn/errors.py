"""rpn/errors.py"""


class RPNError(Exception):
    """所有RPN求值错误的基类"""


class InvalidSequenceError(RPNError):
    """操作符出现时栈中不足两个操作数"""

    def __init__(self, message="Invalid sequence"):
        super().__init__(message)


class InvalidOperatorError(RPNError):
    """既不是整数也不是 + - * / 的token被当作操作符使用"""

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Invalid operator: {symbol!r}")


class EmptySequenceError(RPNError):
    """求值结束后栈为空，没有结果"""

    def __init__(self, message="Empty sequence"):
        super().__init__(message)


class OperandConversionError(RPNError, ValueError):
    """含数字的token无法转换为int64整数"""

    def __init__(self, text):
        self.text = text
        super().__init__(f"Cannot convert operand: {text!r}")


class DivisionByZeroError(RPNError, ZeroDivisionError):
    """整数除法的右操作数为0"""


class IntegerOverflowError(RPNError, OverflowError):
    """运算结果超出int64范围"""
