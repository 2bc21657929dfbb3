"""
日志配置

--verbose 时在 stderr 上输出 DEBUG 日志，标准输出只保留提取结果。
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "md2xk6"


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """配置 md2xk6 根日志器"""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    
    # 重复调用时避免重复输出
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    
    return logger
