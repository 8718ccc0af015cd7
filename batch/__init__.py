"""批量求值模块 - 带缓存的表达式评估"""
from .evaluator import ExpressionEvaluator

__all__ = ['ExpressionEvaluator']
