"""响应封装：构建系统统一的返回结构。"""

from typing import Any, Optional


def create_response(
    message: str,
    data: Any = None,
    *,
    success: bool = True,
    errors: Optional[dict[str, list[str]]] = None,
) -> dict[str, Any]:
    """按照 ``success``、``message``、``data`` 组合出统一响应体。

    失败响应仅在显式携带数据时才包含 ``data`` 字段，保证拒绝访问时的响应体
    只有 ``success`` 与 ``message`` 两项。
    """
    payload: dict[str, Any] = {"success": success, "message": message}
    if success or data is not None:
        payload["data"] = data
    if errors:
        payload["errors"] = errors
    return payload
