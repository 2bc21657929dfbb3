"""
列表筛选器 - 在语法树中寻找模块列表

按文档顺序遍历，找到第一个“每个列表项恰好包含一个链接”的列表，
收集其中的链接并转换为模块路径。

注意：进入任何列表（包括列表项内的嵌套列表）都会重置当前收集状态，
因此外层列表若包含子列表，其已收集的链接会被丢弃。
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from markdown_it.tree import SyntaxTreeNode

from md2xk6.core.modules import link_to_module
from md2xk6.core.nodes import NodeKind, WalkStatus, node_kind
from md2xk6.core.pattern import is_link_matching

logger = logging.getLogger(__name__)


class LinkSource(Enum):
    """链接来源"""
    LINK = "link"          # [text](url)
    AUTOLINK = "autolink"  # <url>
    TEXT = "text"          # 裸 URL 文本


@dataclass
class CandidateLink:
    """
    候选链接
    
    Attributes:
        url: 原始链接地址
        source: 链接来源
        line_number: 所在列表项的行号（1-based），未知时为 None
    """
    url: str
    source: LinkSource
    line_number: Optional[int] = None


class ModuleListBuilder:
    """模块列表构建器，作为 walk() 的 visitor 使用"""
    
    def __init__(self):
        self.found = False
        
        self.inside_list = False
        self.has_nonmatching_items = False
        
        self.inside_item = False
        self.has_nonmatching_link = False
        self.number_of_links = 0
        self.item_line: Optional[int] = None
        
        self.links: list[CandidateLink] = []
    
    def walk(self, node: SyntaxTreeNode, entering: bool) -> WalkStatus:
        """访问单个节点"""
        if self.found:
            return WalkStatus.STOP
        
        kind = node_kind(node)
        
        if kind is NodeKind.LIST:
            return self._handle_list(entering)
        if kind is NodeKind.LIST_ITEM:
            return self._handle_list_item(node, entering)
        if kind in (NodeKind.LINK, NodeKind.AUTOLINK) and self.inside_item:
            return self._handle_link(node, kind, entering)
        if kind is NodeKind.TEXT:
            return self._handle_text(node, entering)
        
        return WalkStatus.CONTINUE
    
    def _handle_list(self, entering: bool) -> WalkStatus:
        if entering:
            logger.debug("entering list")
            self.inside_list = True
            self.has_nonmatching_items = False
            self.links = []
            return WalkStatus.CONTINUE
        
        logger.debug("exiting list")
        
        if not self.has_nonmatching_items:
            self.found = True
            return WalkStatus.STOP
        
        self.inside_list = False
        return WalkStatus.CONTINUE
    
    def _handle_list_item(self, node: SyntaxTreeNode, entering: bool) -> WalkStatus:
        if entering:
            self.inside_item = True
            self.has_nonmatching_link = False
            self.number_of_links = 0
            self.item_line = node.map[0] + 1 if node.map else None
            return WalkStatus.CONTINUE
        
        self.inside_item = False
        
        if self.number_of_links != 1:
            logger.debug(
                f"list item at line {self.item_line} does not have exactly one link "
                f"(links={self.number_of_links})"
            )
            self.has_nonmatching_items = True
        
        return WalkStatus.CONTINUE
    
    def _handle_link(self, node: SyntaxTreeNode, kind: NodeKind, entering: bool) -> WalkStatus:
        if not entering:
            return WalkStatus.CONTINUE
        
        if kind is NodeKind.AUTOLINK:
            url = _autolink_url(node)
            source = LinkSource.AUTOLINK
        else:
            url = str(node.attrs.get("href", ""))
            source = LinkSource.LINK
        
        # 只计数，不在此处校验模式
        self.number_of_links += 1
        self.links.append(CandidateLink(url=url, source=source, line_number=self.item_line))
        
        if not is_link_matching(url):
            logger.debug(f"found non-matching link: {url}")
            self.has_nonmatching_link = True
        
        return WalkStatus.CONTINUE
    
    def _handle_text(self, node: SyntaxTreeNode, entering: bool) -> WalkStatus:
        if not entering or not self.inside_item or self.number_of_links > 0:
            return WalkStatus.CONTINUE
        
        value = node.content
        if is_link_matching(value):
            self.links.append(
                CandidateLink(url=value, source=LinkSource.TEXT, line_number=self.item_line)
            )
            self.number_of_links += 1
        
        return WalkStatus.CONTINUE
    
    def build(self) -> list[str]:
        """
        生成模块路径列表
        
        只有找到合格列表时才有结果；无法匹配模式的链接被跳过。
        
        Returns:
            按文档顺序排列的模块路径
        """
        if not self.found or not self.links:
            return []
        
        modules: list[str] = []
        for link in self.links:
            module = link_to_module(link.url)
            if module is not None:
                modules.append(module)
        
        return modules


def _autolink_url(node: SyntaxTreeNode) -> str:
    """取自动链接的字面 URL（即其文本内容）"""
    for child in node.children:
        if child.type == "text":
            return child.content
    return str(node.attrs.get("href", ""))
