"""品牌相关的请求与响应模型。"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator

from phone_api.packages.inventory.api.v1.schemas.common import ResponseEnvelope


class BrandWriteRequest(BaseModel):
    name: str = Field(..., max_length=50, description="品牌名称")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("Name is required.")
        return trimmed


class BrandItem(BaseModel):
    id: uuid.UUID
    name: str
    created: datetime
    last_modified: datetime
    moderation_status: int


BrandDetailResponse = ResponseEnvelope[BrandItem]
BrandListResponse = ResponseEnvelope[List[BrandItem]]
BrandMutationResponse = ResponseEnvelope[uuid.UUID]
