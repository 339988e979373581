"""手机相关的请求与响应模型。"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from phone_api.packages.inventory.api.v1.schemas.common import PagedResult, ResponseEnvelope


class PhoneWriteRequest(BaseModel):
    model: str = Field(..., max_length=100, description="手机型号")
    price: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2, description="价格，必须大于 0")
    stock: int = Field(..., ge=0, description="库存数量，不能为负数")
    brand_id: Optional[uuid.UUID] = Field(default=None, description="所属品牌 ID")

    @field_validator("model")
    @classmethod
    def _strip_model(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("Model is required.")
        return trimmed


class PhoneCreateRequest(PhoneWriteRequest):
    """新建手机的请求体。"""


class PhoneUpdateRequest(PhoneWriteRequest):
    """更新手机的请求体。"""


class PhoneItem(BaseModel):
    id: uuid.UUID
    model: str
    price: float
    stock: int
    created: datetime
    last_modified: Optional[datetime] = None
    moderation_status: int
    moderation_status_txt: Optional[str] = None
    brand_id: Optional[uuid.UUID] = None
    brand_name: Optional[str] = None


PhoneDetailResponse = ResponseEnvelope[PhoneItem]
PhoneListResponse = ResponseEnvelope[PagedResult[PhoneItem]]
PhoneMutationResponse = ResponseEnvelope[uuid.UUID]

