"""权限解析：计算当前主体持有的权限名称集合。

两种来源二选一，由 ``PERMISSION_SOURCE`` 决定：
- ``claims``：信任登录时写入令牌的 ``permissions`` 声明（JSON 字符串数组）；
- ``database``：按 用户 -> 角色 -> 权限 的关联实时查询，并通过缓存降低数据库压力。
"""

from __future__ import annotations

import json
import uuid
from abc import ABC, abstractmethod
from typing import Iterable, Protocol

from .constants import PERMISSIONS_CLAIM, ROLE_PERMISSIONS_CACHE_PREFIX, USER_ROLES_CACHE_PREFIX
from .exceptions import AuthorizationError, AuthorizationFailure
from .permission_cache import PermissionCache
from .principal import Principal


class PermissionStore(Protocol):
    """角色与权限的持久化查询接口。"""

    def role_ids_for_user(self, user_id: uuid.UUID) -> list[uuid.UUID]:
        ...

    def permission_names_for_role(self, role_id: uuid.UUID) -> list[str]:
        ...


class PermissionResolver(ABC):
    """权限解析策略基类。"""

    @abstractmethod
    def resolve(self, principal: Principal) -> set[str]:
        """返回主体持有的权限名称；无法解析时抛出 ``AuthorizationError``。"""


class ClaimPermissionResolver(PermissionResolver):
    """从令牌的 ``permissions`` 声明中读取权限名称。"""

    def resolve(self, principal: Principal) -> set[str]:
        raw = principal.claims.get(PERMISSIONS_CLAIM)
        if raw is None or raw == "":
            raise AuthorizationError(AuthorizationFailure.NO_PERMISSIONS_CLAIM)
        if not isinstance(raw, str):
            raise AuthorizationError(AuthorizationFailure.MALFORMED_PERMISSIONS_CLAIM)

        try:
            decoded = json.loads(raw)
        except ValueError as exc:
            raise AuthorizationError(AuthorizationFailure.MALFORMED_PERMISSIONS_CLAIM) from exc

        if not isinstance(decoded, list) or not all(isinstance(item, str) for item in decoded):
            raise AuthorizationError(AuthorizationFailure.MALFORMED_PERMISSIONS_CLAIM)
        if not decoded:
            raise AuthorizationError(AuthorizationFailure.NO_PERMISSIONS_CLAIM)
        return set(decoded)


class DatabasePermissionResolver(PermissionResolver):
    """按角色关联查询权限，用户角色与角色权限分别缓存，缓存项采用滑动过期。"""

    def __init__(self, store: PermissionStore, cache: PermissionCache, ttl_seconds: int) -> None:
        self.store = store
        self.cache = cache
        self.ttl_seconds = ttl_seconds

    def resolve(self, principal: Principal) -> set[str]:
        if principal.user_id is None:
            raise AuthorizationError(AuthorizationFailure.INVALID_IDENTITY)

        role_ids = self._role_ids(principal.user_id)
        if not role_ids:
            raise AuthorizationError(AuthorizationFailure.NO_ROLES_ASSIGNED)

        names: set[str] = set()
        for role_id in role_ids:
            names.update(self._permission_names(role_id))
        return names

    def _role_ids(self, user_id: uuid.UUID) -> list[str]:
        key = f"{USER_ROLES_CACHE_PREFIX}{user_id}"
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        role_ids = [str(role_id) for role_id in self.store.role_ids_for_user(user_id)]
        self.cache.set(key, role_ids, self.ttl_seconds)
        return role_ids

    def _permission_names(self, role_id: str) -> list[str]:
        key = f"{ROLE_PERMISSIONS_CACHE_PREFIX}{role_id}"
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        names = list(self.store.permission_names_for_role(uuid.UUID(role_id)))
        self.cache.set(key, names, self.ttl_seconds)
        return names


def _unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def encode_permissions_claim(permission_names: Iterable[str]) -> str:
    """把权限名称编码为写入令牌的 JSON 字符串。"""
    return json.dumps(_unique(permission_names))
