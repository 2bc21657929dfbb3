"""
报告器基类 - 定义报告器接口
"""

from typing import Protocol


class Reporter(Protocol):
    """报告器协议"""
    
    def report(self, modules: list[str]) -> None:
        """输出模块列表"""
        ...
