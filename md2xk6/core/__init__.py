"""
Core Layer - 核心层

包含链接模式匹配、语法树遍历和模块路径构建。
"""

from md2xk6.core.pattern import (
    SUPPORTED_HOSTS,
    LinkMatch,
    get_link_pattern,
    is_link_matching,
    decompose_link,
)
from md2xk6.core.modules import (
    build_module_path,
    link_to_module,
)
from md2xk6.core.nodes import (
    NodeKind,
    WalkStatus,
    node_kind,
    walk,
)
from md2xk6.core.walker import (
    CandidateLink,
    LinkSource,
    ModuleListBuilder,
)
from md2xk6.core.extractor import (
    parse_markdown,
    decode_source,
    read_source,
    extract,
    extract_file,
)

__all__ = [
    # pattern
    "SUPPORTED_HOSTS",
    "LinkMatch",
    "get_link_pattern",
    "is_link_matching",
    "decompose_link",
    # modules
    "build_module_path",
    "link_to_module",
    # nodes
    "NodeKind",
    "WalkStatus",
    "node_kind",
    "walk",
    # walker
    "CandidateLink",
    "LinkSource",
    "ModuleListBuilder",
    # extractor
    "parse_markdown",
    "decode_source",
    "read_source",
    "extract",
    "extract_file",
]
