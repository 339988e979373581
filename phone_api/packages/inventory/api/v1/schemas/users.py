"""用户相关的请求与响应模型。"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from phone_api.packages.inventory.api.v1.schemas.common import ResponseEnvelope


def _normalize_email(value: str) -> str:
    trimmed = value.strip().lower()
    local, _, domain = trimmed.partition("@")
    if not local or not domain or " " in trimmed:
        raise ValueError("Invalid email address.")
    return trimmed


class UserCreateRequest(BaseModel):
    user_name: str = Field(..., min_length=1, max_length=100, description="用户名")
    email: str = Field(..., max_length=255, description="登录邮箱")
    password: str = Field(..., min_length=6, max_length=128, description="登录密码")
    role_id: Optional[uuid.UUID] = Field(default=None, description="角色 ID")

    @field_validator("user_name")
    @classmethod
    def _strip_user_name(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("User name is required.")
        return trimmed

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        return _normalize_email(value)


class UserUpdateRequest(BaseModel):
    """更新用户的请求体，未提供的字段保持不变。"""

    user_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)
    password: Optional[str] = Field(default=None, min_length=6, max_length=128)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return _normalize_email(value)


class UserItem(BaseModel):
    id: uuid.UUID
    user_name: str
    email: str
    role_id: Optional[uuid.UUID] = None
    role_name: Optional[str] = None
    created: datetime
    last_modified: datetime
    moderation_status: int


UserDetailResponse = ResponseEnvelope[UserItem]
UserListResponse = ResponseEnvelope[List[UserItem]]
UserMutationResponse = ResponseEnvelope[uuid.UUID]
