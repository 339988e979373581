"""授权判定：比较请求所需的接口签名与主体权限映射出的签名。"""

from __future__ import annotations

from typing import Iterable

from .endpoint import required_signature
from .exceptions import AuthorizationError, AuthorizationFailure
from .logger import logger
from .permission_map import get_endpoint
from .permission_resolver import PermissionResolver
from .principal import Principal


def is_permitted(signature: str, permission_names: Iterable[str]) -> bool:
    """任一权限映射出的签名与所需签名相等（忽略大小写）即放行，首次命中后立即返回。"""
    expected = signature.casefold()
    for name in permission_names:
        mapped = get_endpoint(name)
        if mapped is not None and mapped.casefold() == expected:
            return True
    return False


def authorize(principal: Principal, *, path: str, method: str, resolver: PermissionResolver) -> None:
    """执行完整的鉴权流程，拒绝时抛出 ``AuthorizationError``，放行时无返回值。"""
    signature = required_signature(path, method)
    try:
        if principal.user_id is None:
            raise AuthorizationError(AuthorizationFailure.INVALID_IDENTITY)
        permission_names = resolver.resolve(principal)
        if not is_permitted(signature, permission_names):
            raise AuthorizationError(AuthorizationFailure.INSUFFICIENT_PERMISSIONS)
    except AuthorizationError as exc:
        logger.info("Access denied for user %s on %s: %s", principal.user_id, signature, exc.reason.name)
        raise
