"""核心模块 - Token系统、分词器、RPN评估器和操作符"""
from .errors import (
    RPNError, InvalidSequenceError, InvalidOperatorError, EmptySequenceError,
    OperandConversionError, DivisionByZeroError, IntegerOverflowError
)
from .token_system import (
    TokenType, Token, Operand, Operator, OPERATOR_DEFINITIONS,
    is_operator, is_numeric
)
from .tokenizer import RPNTokenizer, parse
from .operators import Operators
from .rpn_evaluator import RPNEvaluator, evaluate, calculate

__all__ = [
    'RPNError', 'InvalidSequenceError', 'InvalidOperatorError', 'EmptySequenceError',
    'OperandConversionError', 'DivisionByZeroError', 'IntegerOverflowError',
    'TokenType', 'Token', 'Operand', 'Operator', 'OPERATOR_DEFINITIONS',
    'is_operator', 'is_numeric',
    'RPNTokenizer', 'parse', 'Operators', 'RPNEvaluator', 'evaluate', 'calculate'
]
