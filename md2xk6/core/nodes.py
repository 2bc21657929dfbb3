"""
语法树节点分类与遍历

markdown-it-py 的 SyntaxTreeNode 以字符串 type 区分节点，
这里将其归约为封闭的 NodeKind 枚举，并提供带中止信号的深度优先遍历。
"""

from enum import Enum
from typing import Callable

from markdown_it.tree import SyntaxTreeNode

from md2xk6.errors import TraversalError


class NodeKind(Enum):
    """节点种类"""
    LIST = "list"
    LIST_ITEM = "list_item"
    LINK = "link"
    AUTOLINK = "autolink"
    TEXT = "text"
    OTHER = "other"


class WalkStatus(Enum):
    """遍历控制信号"""
    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"
    STOP = "stop"


# 访问函数：(节点, 是否进入) -> 遍历控制信号
Visitor = Callable[[SyntaxTreeNode, bool], WalkStatus]

_LIST_TYPES = frozenset({"bullet_list", "ordered_list"})


def node_kind(node: SyntaxTreeNode) -> NodeKind:
    """
    判断节点种类
    
    尖括号自动链接 <https://...> 在 markdown-it 中也是 link 节点，
    通过 markup == "autolink" 区分。
    """
    if node.type in _LIST_TYPES:
        return NodeKind.LIST
    if node.type == "list_item":
        return NodeKind.LIST_ITEM
    if node.type == "link":
        if node.markup == "autolink":
            return NodeKind.AUTOLINK
        return NodeKind.LINK
    if node.type == "text":
        return NodeKind.TEXT
    return NodeKind.OTHER


def walk(root: SyntaxTreeNode, visitor: Visitor) -> WalkStatus:
    """
    深度优先遍历语法树
    
    每个节点进入时和离开时各调用一次 visitor。
    SKIP_CHILDREN 跳过子节点但仍会触发离开回调；
    STOP 立即终止整个遍历。
    
    Args:
        root: 根节点
        visitor: 访问函数
    
    Returns:
        最终的遍历信号（STOP 表示被中止）
    
    Raises:
        TraversalError: 嵌套过深或 visitor 返回了非法信号
    """
    try:
        return _walk(root, visitor)
    except RecursionError as e:
        raise TraversalError(f"Document is nested too deeply to traverse: {e}") from e


def _walk(node: SyntaxTreeNode, visitor: Visitor) -> WalkStatus:
    status = _checked(visitor(node, True), node)
    if status is WalkStatus.STOP:
        return WalkStatus.STOP
    
    if status is not WalkStatus.SKIP_CHILDREN:
        for child in node.children:
            if _walk(child, visitor) is WalkStatus.STOP:
                return WalkStatus.STOP
    
    if _checked(visitor(node, False), node) is WalkStatus.STOP:
        return WalkStatus.STOP
    
    return WalkStatus.CONTINUE


def _checked(status: object, node: SyntaxTreeNode) -> WalkStatus:
    if not isinstance(status, WalkStatus):
        raise TraversalError(
            f"Visitor returned {status!r} for node '{node.type}', expected WalkStatus"
        )
    return status
