"""库存业务包：手机、品牌以及基于角色的接口权限控制。"""

from .api.v1 import api_router
from .core.config import get_settings
from .core.exceptions import generic_exception_handler, http_exception_handler, validation_exception_handler
from .core.logger import logger, setup_logging
from .core.responses import create_response
from .db.init_db import init_db

__all__ = [
    "api_router",
    "create_response",
    "generic_exception_handler",
    "get_settings",
    "http_exception_handler",
    "init_db",
    "logger",
    "setup_logging",
    "validation_exception_handler",
]
