"""依赖注入模块：封装 FastAPI 中复用度高的依赖函数。"""

import uuid
from collections.abc import Generator
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from phone_api.packages.inventory.core.authorization import authorize
from phone_api.packages.inventory.core.config import get_settings
from phone_api.packages.inventory.core.constants import ACCESS_TOKEN_TYPE, ADMIN_ROLE, MSG_INVALID_ID, MSG_UNAUTHORIZED
from phone_api.packages.inventory.core.exceptions import AppException, AuthorizationError, AuthorizationFailure
from phone_api.packages.inventory.core.permission_cache import PermissionCache, get_permission_cache
from phone_api.packages.inventory.core.permission_resolver import (
    ClaimPermissionResolver,
    DatabasePermissionResolver,
    PermissionResolver,
)
from phone_api.packages.inventory.core.principal import Principal
from phone_api.packages.inventory.core.security import decode_token
from phone_api.packages.inventory.crud.permission_store import SqlPermissionStore
from phone_api.packages.inventory.crud.users import user_crud
from phone_api.packages.inventory.db.session import SessionLocal

security_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """生成一个数据库会话，并在请求结束后自动关闭。"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=MSG_UNAUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> Principal:
    """解析 ``Authorization`` 头部并构造当前请求的主体，缺失、非法或过期时抛出 401。"""
    if not credentials:
        raise _unauthorized()

    if credentials.scheme.lower() != ACCESS_TOKEN_TYPE:
        raise _unauthorized()

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise _unauthorized()

    return Principal.from_claims(payload)


def get_permission_resolver(
    db: Session = Depends(get_db),
    cache: PermissionCache = Depends(get_permission_cache),
) -> PermissionResolver:
    """按 ``PERMISSION_SOURCE`` 选择唯一的权限来源。"""
    settings = get_settings()
    if settings.permission_source == "claims":
        return ClaimPermissionResolver()
    return DatabasePermissionResolver(
        SqlPermissionStore(db),
        cache,
        max(settings.permission_cache_ttl_seconds, 1),
    )


def require_permission(
    request: Request,
    principal: Principal = Depends(get_current_principal),
    resolver: PermissionResolver = Depends(get_permission_resolver),
) -> Principal:
    """接口守卫：主体未持有当前请求所需的权限时以 403 终止请求。"""
    authorize(principal, path=request.url.path, method=request.method, resolver=resolver)
    return principal


def require_admin(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> Principal:
    """管理接口守卫：仅 ``admin`` 角色的用户可以维护角色、权限分配与用户。"""
    if principal.user_id is None:
        raise AuthorizationError(AuthorizationFailure.INVALID_IDENTITY)
    user = user_crud.get(db, principal.user_id)
    if user is None or user.role is None or user.role.name != ADMIN_ROLE:
        raise AuthorizationError(AuthorizationFailure.ADMIN_REQUIRED)
    return principal


def ensure_valid_id(value: uuid.UUID) -> uuid.UUID:
    """拒绝全零 UUID，与格式非法的 ID 同样视为无效请求。"""
    if value.int == 0:
        raise AppException(MSG_INVALID_ID, status.HTTP_400_BAD_REQUEST)
    return value
