"""接口签名：把原始请求路径归一化为 ``{API_PREFIX}/{resource}/{action}:{METHOD}`` 形式。

路径按段匹配 ``{API_PREFIX}/{resource}/{action}`` 模板，允许末尾再跟一个任意标识段
（通常是资源 ID）。前缀取自配置项 ``API_PREFIX``，可以包含多个段。
不符合模板的路径原样返回，随后的权限比对必然落空，请求因此被拒绝。
"""

from __future__ import annotations

from typing import Optional

from .config import get_settings


def _is_word(segment: str) -> bool:
    return bool(segment) and all(char.isalnum() or char == "_" for char in segment)


def _prefix_segments(prefix: Optional[str]) -> list[str]:
    if prefix is None:
        prefix = get_settings().api_prefix
    return [segment for segment in prefix.strip("/").split("/") if segment]


def api_prefix_path(prefix: Optional[str] = None) -> str:
    """返回规范化后的路由前缀，例如 ``api/`` -> ``/api``；空前缀返回空串。"""
    segments = _prefix_segments(prefix)
    return "/" + "/".join(segments) if segments else ""


def normalize_endpoint(path: str, *, prefix: Optional[str] = None) -> str:
    """去掉路径参数，例如 ``/api/Phone/GetById/<uuid>`` -> ``/api/Phone/GetById``。

    查询串与片段会被忽略，末尾单个斜杠视为不存在；不做大小写转换。
    ``prefix`` 缺省时使用配置中的 ``API_PREFIX``。
    """
    raw = path.split("?", 1)[0].split("#", 1)[0]
    if len(raw) > 1 and raw.endswith("/"):
        raw = raw[:-1]
    if not raw.startswith("/"):
        return path

    head = _prefix_segments(prefix)
    segments = raw[1:].split("/")
    rest = segments[len(head):]
    if segments[: len(head)] != head or len(rest) not in (2, 3):
        return path

    resource, action = rest[0], rest[1]
    if not _is_word(resource) or not _is_word(action):
        return path
    if len(rest) == 3 and not rest[2]:
        return path
    return "/" + "/".join(head + [resource, action])


def required_signature(path: str, method: str) -> str:
    """组合归一化后的路径与 HTTP 方法，得到访问该接口所需的权限签名。"""
    return f"{normalize_endpoint(path)}:{method.upper()}"
