import logging
from collections import OrderedDict
from typing import Dict, Iterable, Optional

import pandas as pd

from config.config import BATCH_CONFIG
from rpn import RPNError, calculate

logger = logging.getLogger(__name__)


class ExpressionEvaluator:

    def __init__(self, cache_size: Optional[int] = None):
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = cache_size if cache_size is not None else BATCH_CONFIG["cache_size"]
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self) -> Dict[str, int]:
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
            'capacity': self.cache_size,
        }

    def evaluate(self, expression: str) -> Optional[int]:
        """
        Args:
            expression: RPN表达式字符串
        Returns:
            整数结果；错误直接抛出，不写入缓存
        """
        if expression in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(expression)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return self._result_cache[expression]

        self._cache_misses += 1
        result = calculate(expression)

        self._result_cache[expression] = result
        self._manage_cache()
        return result

    def evaluate_many(self, expressions: Iterable[str]) -> pd.Series:
        """
        Args:
            expressions: RPN表达式列表
        Returns:
            以表达式为索引的 Int64 Series，失败的表达式为 <NA>
        """
        expressions = list(expressions)
        results = []
        for expression in expressions:
            try:
                result = self.evaluate(expression)
            except RPNError as e:
                logger.error(f"Error evaluating expression '{expression[:50]}': {type(e).__name__}: {e}")
                results.append(pd.NA)
                continue

            if result is None:
                logger.error(f"Expression '{expression[:50]}' yielded no result")
                results.append(pd.NA)
            else:
                results.append(result)

        return pd.Series(results, index=pd.Index(expressions, dtype=object), dtype='Int64')
