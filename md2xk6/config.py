"""
配置模块 - 提取流程的运行参数

CLI 选项和 MD2XK6_* 环境变量最终都汇总到 ExtractConfig。
"""

from dataclasses import dataclass
from enum import Enum


# 默认读取的文档
DEFAULT_SOURCE = "README.md"

# 从标准输入读取时使用的文件名
STDIN_SOURCE = "-"

# xk6 build 的模块参数
WITH_FLAG = "--with"


class OutputFormat(str, Enum):
    """输出格式"""
    ARGS = "args"    # " --with mod" 拼接，直接作为 xk6 build 参数
    JSON = "json"
    LINES = "lines"


@dataclass
class ExtractConfig:
    """
    提取配置
    
    Attributes:
        source: 文档路径，"-" 表示标准输入
        encoding: 文档编码
        output_format: 输出格式
        with_flag: args 格式下每个模块前的参数名
        verbose: 是否输出调试日志
    """
    source: str = DEFAULT_SOURCE
    encoding: str = "utf-8"
    output_format: OutputFormat = OutputFormat.ARGS
    with_flag: str = WITH_FLAG
    verbose: bool = False
