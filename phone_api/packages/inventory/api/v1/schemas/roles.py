"""角色与权限相关的请求与响应模型。"""

from __future__ import annotations

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from phone_api.packages.inventory.api.v1.schemas.common import ResponseEnvelope


class RoleBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, description="角色名称")
    description: Optional[str] = Field(default=None, max_length=200, description="角色描述")

    @model_validator(mode="after")
    def _trim_fields(self) -> "RoleBase":
        self.name = self.name.strip()
        if not self.name:
            raise ValueError("Role name cannot be empty.")
        if self.description is not None:
            trimmed = self.description.strip()
            self.description = trimmed or None
        return self


class RoleCreateRequest(RoleBase):
    """新建角色的请求体。"""


class RoleUpdateRequest(RoleBase):
    """更新角色的请求体。"""


class PermissionItem(BaseModel):
    id: uuid.UUID
    name: str


class RoleItem(BaseModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    permissions: List[PermissionItem] = Field(default_factory=list)


RoleListResponse = ResponseEnvelope[List[RoleItem]]
RoleMutationResponse = ResponseEnvelope[uuid.UUID]
PermissionListResponse = ResponseEnvelope[List[PermissionItem]]
