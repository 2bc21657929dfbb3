"""
模块路径构建 - 将仓库链接转换为 xk6 模块标识

github.com/OWNER/REPO 或 gitlab.com/OWNER/REPO@TAG
"""

from typing import Optional

from md2xk6.core.pattern import decompose_link


def build_module_path(
    host: str,
    owner: str,
    repo: str,
    tag: Optional[str] = None,
) -> str:
    """
    拼接模块路径
    
    owner 和 repo 原样保留，不做转义或规范化。
    
    Args:
        host: 托管平台域名
        owner: 仓库所有者
        repo: 仓库名
        tag: 发布标签，存在时以 "@tag" 追加
    
    Returns:
        模块路径字符串
    """
    path = f"{host}/{owner}/{repo}"
    if tag:
        path = f"{path}@{tag}"
    return path


def link_to_module(url: str) -> Optional[str]:
    """将链接转换为模块路径，不匹配时返回 None"""
    link = decompose_link(url)
    if link is None:
        return None
    return build_module_path(link.host, link.owner, link.repo, link.tag)
