"""异常处理模块：定义统一的业务异常、鉴权失败类型与响应格式。"""

from enum import Enum
from typing import Any

from fastapi import HTTPException, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .constants import MSG_INTERNAL_ERROR, MSG_INVALID_REQUEST
from .logger import logger
from .responses import create_response


class AppException(HTTPException):
    """携带统一响应结构的业务异常，方便在全局处理中转换响应体。"""

    def __init__(self, msg: str, code: int = status.HTTP_400_BAD_REQUEST, data=None) -> None:
        super().__init__(status_code=code, detail=msg)
        self.data = data


class AuthorizationFailure(str, Enum):
    """权限校验失败的原因，取值即返回给调用方的提示文案。"""

    INVALID_IDENTITY = "Access denied: Invalid user."
    NO_PERMISSIONS_CLAIM = "Access denied: No permissions found."
    MALFORMED_PERMISSIONS_CLAIM = "Access denied: Invalid permissions format."
    NO_ROLES_ASSIGNED = "Access denied: No roles assigned."
    INSUFFICIENT_PERMISSIONS = "Access denied: Insufficient permissions."
    ADMIN_REQUIRED = "Access denied: Administrator role required."


class AuthorizationError(AppException):
    """权限校验未通过，统一以 403 终止本次请求。"""

    def __init__(self, reason: AuthorizationFailure) -> None:
        super().__init__(reason.value, status.HTTP_403_FORBIDDEN)
        self.reason = reason


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # pragma: no cover - framework glue
    """将 ``HTTPException``（含框架产生的 404/405）转换为统一响应格式。"""
    payload = create_response(str(exc.detail), getattr(exc, "data", None), success=False)
    return JSONResponse(status_code=exc.status_code, content=payload, headers=getattr(exc, "headers", None))


def _serialize(obj: Any) -> Any:
    if isinstance(obj, Exception):
        return str(obj)
    if isinstance(obj, dict):
        return {key: _serialize(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    return obj


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # pragma: no cover - framework glue
    """统一处理请求参数校验失败的场景，按字段聚合错误信息后返回 400。"""
    errors: dict[str, list[str]] = {}
    for error in _serialize(exc.errors()):
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location) or "General"
        errors.setdefault(field, []).append(error.get("msg") or "Unknown error")
    payload = create_response(MSG_INVALID_REQUEST, success=False, errors=errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=payload)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # pragma: no cover - framework glue
    """兜底处理：将未捕获异常转换为标准的 500 响应结构。"""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    payload = create_response(MSG_INTERNAL_ERROR, success=False)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)
