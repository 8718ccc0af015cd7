"""配置文件"""
import logging
import re

logger = logging.getLogger(__name__)

# 分词参数
TOKENIZER_CONFIG = {
    "separator": " ",  # 只按单个空格拆分，不合并连续空格
    "operand_pattern": r"[0-9]+",  # 包含数字即视为操作数（search，不是fullmatch）
}

# 求值参数
EVALUATOR_CONFIG = {
    "allow_empty": False,  # 栈为空时 True 返回None，False 抛出 EmptySequenceError
}

# 批量求值参数
BATCH_CONFIG = {
    "cache_size": 1000,
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert len(TOKENIZER_CONFIG["separator"]) == 1, "分隔符必须是单个字符"
    assert BATCH_CONFIG["cache_size"] > 0, "缓存大小必须为正数"
    assert isinstance(EVALUATOR_CONFIG["allow_empty"], bool)
    re.compile(TOKENIZER_CONFIG["operand_pattern"])
    logger.info("Configuration validated successfully!")


def setup_logging(level=None):
    """设置日志"""
    logging.basicConfig(
        level=level or LOGGING_CONFIG["level"],
        format=LOGGING_CONFIG["format"]
    )
