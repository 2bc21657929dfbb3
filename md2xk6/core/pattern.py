"""
链接模式匹配 - 识别 GitHub / GitLab 仓库链接

支持的形式：
- https://github.com/OWNER/REPO
- https://gitlab.com/OWNER/REPO/releases/tag/TAG

主机名精确匹配（区分大小写），不接受端口、查询串或片段。
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


# 支持的代码托管平台
SUPPORTED_HOSTS: tuple[str, ...] = ("github.com", "gitlab.com")

_SEGMENT = r"[^/?#]+"


@dataclass(frozen=True)
class LinkMatch:
    """
    链接分解结果
    
    Attributes:
        host: 托管平台域名
        owner: 仓库所有者
        repo: 仓库名
        tag: 发布标签，没有时为 None
    """
    host: str
    owner: str
    repo: str
    tag: Optional[str] = None


@lru_cache(maxsize=None)
def get_link_pattern() -> re.Pattern:
    """返回共享的已编译链接正则（首次调用时编译）"""
    hosts = "|".join(re.escape(host) for host in SUPPORTED_HOSTS)
    return re.compile(
        rf"^https://(?P<host>{hosts})"
        rf"/(?P<owner>{_SEGMENT})/(?P<repo>{_SEGMENT})"
        rf"(?:/releases/tag/(?P<tag>{_SEGMENT}))?$"
    )


def is_link_matching(url: str) -> bool:
    """判断 URL 是否为受支持的仓库链接"""
    return get_link_pattern().match(url) is not None


def decompose_link(url: str) -> Optional[LinkMatch]:
    """
    将仓库链接分解为 host / owner / repo / tag
    
    Args:
        url: 链接地址
    
    Returns:
        LinkMatch 对象，不匹配时返回 None
    """
    match = get_link_pattern().match(url)
    if match is None:
        return None
    
    return LinkMatch(
        host=match.group("host"),
        owner=match.group("owner"),
        repo=match.group("repo"),
        tag=match.group("tag") or None,
    )
