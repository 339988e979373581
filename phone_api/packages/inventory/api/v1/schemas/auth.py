"""认证相关的请求与响应模型。"""

from datetime import datetime

from pydantic import BaseModel, Field

from phone_api.packages.inventory.api.v1.schemas.common import ResponseEnvelope
from phone_api.packages.inventory.api.v1.schemas.users import UserItem


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1, description="登录邮箱")
    password: str = Field(..., min_length=1, description="登录密码")


class LoginPayload(BaseModel):
    access_token: str
    token_type: str
    expire: datetime
    user: UserItem


LoginResponse = ResponseEnvelope[LoginPayload]
