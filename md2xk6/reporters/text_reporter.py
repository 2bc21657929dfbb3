"""
文本报告器 - 输出 xk6 build 参数或逐行列表
"""

import sys
from typing import TextIO

from md2xk6.config import WITH_FLAG


class ArgsReporter:
    """
    参数报告器
    
    每个模块输出为 " --with MODULE"，直接拼接，
    不带分隔符和结尾换行，便于嵌入 `xk6 build$(md2xk6)`。
    """
    
    def __init__(self, output: TextIO | None = None, flag: str = WITH_FLAG):
        self.output = output or sys.stdout
        self.flag = flag
    
    def report(self, modules: list[str]) -> None:
        for module in modules:
            self.output.write(f" {self.flag} {module}")
        self.output.flush()


class LinesReporter:
    """逐行报告器，每行一个模块"""
    
    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout
    
    def report(self, modules: list[str]) -> None:
        for module in modules:
            print(module, file=self.output)
