"""
JSON 报告器 - 输出 JSON 数组
"""

import json
import sys
from typing import TextIO


class JsonReporter:
    """JSON 报告器"""
    
    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout
    
    def report(self, modules: list[str]) -> None:
        """生成 JSON 格式输出"""
        json_str = json.dumps(modules, indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
