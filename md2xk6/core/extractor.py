"""
提取器模块 - 解析 Markdown 并提取 xk6 扩展模块列表

使用 markdown-it-py 构建语法树，交给 ModuleListBuilder 遍历。
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from md2xk6.config import ExtractConfig, STDIN_SOURCE
from md2xk6.core.nodes import walk
from md2xk6.core.walker import ModuleListBuilder
from md2xk6.errors import SourceUnavailableError

logger = logging.getLogger(__name__)


def parse_markdown(content: str) -> SyntaxTreeNode:
    """
    解析 Markdown 内容为语法树
    
    使用 CommonMark 预设，不启用 linkify，裸 URL 保持为文本节点。
    链接地址和自动链接文本保持原样，不做百分号编码或解码。
    
    Args:
        content: Markdown 内容
    
    Returns:
        语法树根节点
    """
    md = MarkdownIt()
    md.normalizeLink = _keep_url
    md.normalizeLinkText = _keep_url
    tokens = md.parse(content)
    return SyntaxTreeNode(tokens)


def _keep_url(url: str) -> str:
    return url


def decode_source(data: bytes, encoding: str = "utf-8") -> str:
    """将文档字节解码为文本"""
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise SourceUnavailableError(f"Failed to decode document as {encoding}: {e}") from e


def read_source(source: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    读取文档内容
    
    Args:
        source: 文件路径，"-" 表示标准输入
        encoding: 文档编码
    
    Returns:
        文档文本
    
    Raises:
        SourceUnavailableError: 文件不存在、不可读或无法解码
    """
    try:
        if str(source) == STDIN_SOURCE:
            data = sys.stdin.buffer.read()
        else:
            data = Path(source).read_bytes()
    except OSError as e:
        raise SourceUnavailableError(f"Failed to read {source}: {e}") from e
    
    logger.debug(f"read {len(data)} bytes from {source}")
    return decode_source(data, encoding)


def extract(content: Union[str, bytes]) -> list[str]:
    """
    从 Markdown 内容中提取模块列表
    
    Args:
        content: Markdown 文本或 UTF-8 字节
    
    Returns:
        模块路径列表，未找到合格列表时为空
    
    Raises:
        TraversalError: 遍历语法树失败
    """
    if isinstance(content, bytes):
        content = decode_source(content)
    
    root = parse_markdown(content)
    builder = ModuleListBuilder()
    walk(root, builder.walk)
    
    modules = builder.build()
    logger.debug(f"extracted {len(modules)} modules")
    return modules


def extract_file(source: Union[str, Path], config: Optional[ExtractConfig] = None) -> list[str]:
    """读取文档并提取模块列表"""
    config = config or ExtractConfig()
    return extract(read_source(source, config.encoding))
