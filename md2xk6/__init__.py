"""
md2xk6 - 从 Markdown 文档中提取 k6 扩展模块列表

读取 README 中第一个“每项恰好一个链接”的列表，
将 GitHub / GitLab 链接转换为 xk6 可用的模块路径。
"""

__version__ = "0.1.0"

from md2xk6.core import extract, extract_file

__all__ = [
    "__version__",
    "extract",
    "extract_file",
]
