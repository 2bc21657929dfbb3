"""
错误类型定义

读取文档失败和遍历失败都是致命错误，由 CLI 层统一处理。
"""


class Md2xk6Error(Exception):
    """md2xk6 错误基类"""
    pass


class SourceUnavailableError(Md2xk6Error):
    """文档内容无法读取或解码"""
    pass


class TraversalError(Md2xk6Error):
    """语法树遍历失败"""
    pass
