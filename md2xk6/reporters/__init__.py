"""
Reporters Layer - 报告层

包含 xk6 参数、逐行和 JSON 三种输出格式。
"""

from md2xk6.config import OutputFormat
from md2xk6.reporters.base import Reporter
from md2xk6.reporters.text_reporter import ArgsReporter, LinesReporter, WITH_FLAG
from md2xk6.reporters.json_reporter import JsonReporter


def get_reporter(output_format: OutputFormat, with_flag: str = WITH_FLAG) -> Reporter:
    """根据输出格式获取报告器"""
    if output_format is OutputFormat.JSON:
        return JsonReporter()
    if output_format is OutputFormat.LINES:
        return LinesReporter()
    return ArgsReporter(flag=with_flag)


__all__ = [
    "Reporter",
    "ArgsReporter",
    "LinesReporter",
    "JsonReporter",
    "WITH_FLAG",
    "get_reporter",
]
