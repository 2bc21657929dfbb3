"""
CLI Layer - 命令行接口层
"""

from md2xk6.cli.app import app, run

__all__ = [
    "app",
    "run",
]
