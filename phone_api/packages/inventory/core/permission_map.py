"""权限映射表：维护权限名称与接口签名（``path:METHOD``）之间的静态对应关系。

表中只登记前缀之后的路由模板，查找时再拼上配置的 ``API_PREFIX``，
因此调整前缀不需要修改映射表。

权限名称格式为 ``{resource}.{action}``，均为小写，例如 ``phone.getbyid``。
查找时对权限名称大小写不敏感。
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Optional

from .endpoint import api_prefix_path


class PhonePermission(str, Enum):
    """手机资源上可授权的操作。"""

    GET_BY_ID = "GetById"
    GET_PAGED = "GetPaged"
    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"
    APPROVE = "Approve"
    REJECT = "Reject"


class BrandPermission(str, Enum):
    """品牌资源上可授权的操作。"""

    GET_ALL = "GetAll"
    GET_BY_ID = "GetById"
    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"


PERMISSION_MAP: Dict[str, Dict[Enum, str]] = {
    "phone": {
        PhonePermission.GET_BY_ID: "/Phone/GetById:GET",
        PhonePermission.GET_PAGED: "/Phone/GetPaged:GET",
        PhonePermission.CREATE: "/Phone/Create:POST",
        PhonePermission.UPDATE: "/Phone/Update:PUT",
        PhonePermission.DELETE: "/Phone/Delete:DELETE",
        PhonePermission.APPROVE: "/Phone/Approve:PATCH",
        PhonePermission.REJECT: "/Phone/Reject:PATCH",
    },
    "brand": {
        BrandPermission.GET_ALL: "/Brand/GetAll:GET",
        BrandPermission.GET_BY_ID: "/Brand/GetById:GET",
        BrandPermission.CREATE: "/Brand/Create:POST",
        BrandPermission.UPDATE: "/Brand/Update:PUT",
        BrandPermission.DELETE: "/Brand/Delete:DELETE",
    },
}


def to_permission_name(resource: str, action: Enum) -> str:
    """把资源与操作组合成权限名称，例如 ``("phone", GET_BY_ID)`` -> ``phone.getbyid``。"""
    return f"{resource.lower()}.{str(action.value).lower()}"


def _iter_entries() -> Iterator[tuple[str, str]]:
    for resource, actions in PERMISSION_MAP.items():
        for action, signature in actions.items():
            yield to_permission_name(resource, action), signature


_ENDPOINTS_BY_NAME: Dict[str, str] = dict(_iter_entries())


def get_endpoint(permission_name: str, *, prefix: Optional[str] = None) -> Optional[str]:
    """返回权限名称对应的接口签名，未登记或格式不合法时返回 ``None``。"""
    parts = permission_name.strip().lower().split(".")
    if len(parts) != 2:
        return None
    template = _ENDPOINTS_BY_NAME.get(".".join(parts))
    if template is None:
        return None
    return f"{api_prefix_path(prefix)}{template}"


def all_permission_names() -> list[str]:
    """按登记顺序返回全部权限名称，用于初始化权限目录。"""
    return list(_ENDPOINTS_BY_NAME)
