"""日志配置：控制台彩色输出、按天轮转的文件日志，以及可选的 JSON 结构化格式。

每条日志都会带上当前请求的 ``request_id``（由中间件写入上下文变量），
请求之外产生的日志该字段为 ``None``。
"""

import json
import logging
import logging.config
import sys
from contextvars import ContextVar
from datetime import datetime
from typing import Any, Dict, Optional

from .config import get_settings

LOGGER_NAME = "phone_api"
LINE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(request_id)s] %(message)s"

_request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def set_request_id(request_id: Optional[str]) -> None:
    _request_id_ctx.set(request_id)


class RequestIdFilter(logging.Filter):
    """把上下文中的请求 ID 写到每条记录上，供格式化器引用。"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id_ctx.get()
        return True


class LocalTimeFormatter(logging.Formatter):
    """按配置的 ``TIMEZONE`` 渲染时间戳，未指定 ``datefmt`` 时输出毫秒精度的 ISO 格式。"""

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        moment = datetime.fromtimestamp(record.created, get_settings().timezone_info)
        if datefmt:
            return moment.strftime(datefmt)
        return moment.isoformat(sep=" ", timespec="milliseconds")


class ColorFormatter(LocalTimeFormatter):
    """终端输出按级别着色；输出目标不是 TTY 时保持纯文本。"""

    LEVEL_COLORS = {
        "DEBUG": "36",
        "INFO": "32",
        "WARNING": "33",
        "ERROR": "31",
        "CRITICAL": "1;41",
    }

    def __init__(self, fmt: str = LINE_FORMAT, datefmt: Optional[str] = None, colorize: Optional[bool] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.colorize = sys.stderr.isatty() if colorize is None else colorize

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        code = self.LEVEL_COLORS.get(record.levelname)
        if not self.colorize or code is None:
            return text
        return f"\033[{code}m{text}\033[0m"


class JsonFormatter(LocalTimeFormatter):
    """每条记录输出为一行 JSON，便于日志平台检索。"""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "request_id": getattr(record, "request_id", None),
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def build_logging_config() -> Dict[str, Any]:
    """根据当前配置生成 ``dictConfig`` 所需的字典。"""
    settings = get_settings()
    module = __name__
    level = settings.log_level
    if settings.log_json:
        console_formatter = file_formatter = "json"
    else:
        console_formatter, file_formatter = "console", "file"

    handler_names = ["console", "file"]
    loggers = {
        name: {"handlers": handler_names, "level": level, "propagate": False}
        for name in ("uvicorn", "uvicorn.access", LOGGER_NAME)
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"request_id": {"()": f"{module}.RequestIdFilter"}},
        "formatters": {
            "console": {"()": f"{module}.ColorFormatter"},
            "file": {"()": f"{module}.ColorFormatter", "colorize": False},
            "json": {"()": f"{module}.JsonFormatter"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": console_formatter,
                "filters": ["request_id"],
            },
            "file": {
                "class": "logging.handlers.TimedRotatingFileHandler",
                "level": level,
                "formatter": file_formatter,
                "filters": ["request_id"],
                "filename": str(settings.log_file_path),
                "when": "midnight",
                "backupCount": 14,
                "encoding": "utf-8",
                "delay": True,
            },
        },
        "loggers": loggers,
        "root": {"handlers": handler_names, "level": level},
    }


def setup_logging() -> None:
    """创建日志目录并应用日志配置，应用启动时调用一次。"""
    get_settings().log_directory.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config())


logger = logging.getLogger(LOGGER_NAME)
