"""通用响应封装模型。"""

from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ResponseEnvelope(BaseModel, Generic[T]):
    """系统统一的响应外层结构。"""

    success: bool
    message: str
    data: Optional[T] = None
    errors: Optional[Dict[str, List[str]]] = None


class PagedResult(BaseModel, Generic[T]):
    """分页结果：当前页数据与过滤后的总条数。"""

    data: List[T]
    total_records: int
