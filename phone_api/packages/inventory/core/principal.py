"""认证主体：由已验证的令牌在每个请求中构造，不做持久化。"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


def _parse_uuid(value: Any) -> Optional[uuid.UUID]:
    if value is None:
        return None
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


@dataclass(frozen=True)
class Principal:
    """当前请求的调用者。``user_id`` 为空代表令牌未携带合法的主体标识。"""

    user_id: Optional[uuid.UUID]
    role_id: Optional[uuid.UUID] = None
    email: Optional[str] = None
    claims: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "Principal":
        return cls(
            user_id=_parse_uuid(claims.get("sub")),
            role_id=_parse_uuid(claims.get("role_id")),
            email=claims.get("email"),
            claims=dict(claims),
        )
