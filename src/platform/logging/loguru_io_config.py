from contextvars import ContextVar
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING, Any, Dict

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)

# Argument names whose values never reach the log sinks
SENSITIVE_KEYWORDS = {
    'password',
    'token',
    'key_secret',
    'secret',
    'authorization',
}
MASK = '********'

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


# Stdlib loggers that only ever add noise below INFO
QUIET_BELOW_INFO = ('asyncio', 'pymongo', 'razorpay', 'urllib3', 'websockets')

# (lowest status, level) checked top-down
HTTP_STATUS_LEVELS = (
    (500, 'CRITICAL'),
    (400, 'ERROR'),
    (300, 'WARNING'),
    (200, 'SUCCESS'),
)


def _default_extra() -> Dict[str, Any]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


def _parse_http_status_level(message: str) -> str | None:
    """
    Map a uvicorn access line to a level by its status code.

    '127.0.0.1:51234 - "GET /api/bookings/abc HTTP/1.1" 200' -> 'SUCCESS'
    """
    if ' - "' not in message or ' HTTP/' not in message:
        return None

    parts = message.split('"')
    if len(parts) < 3:
        return None
    tail = parts[2].split()
    if not tail or not tail[0].isdigit():
        return None

    status_code = int(tail[0])
    for lowest, level in HTTP_STATUS_LEVELS:
        if status_code >= lowest:
            return level
    return 'INFO'


_intercept_logger: 'LoguruLogger | None' = None


def _get_intercept_logger() -> 'LoguruLogger':
    global _intercept_logger
    if _intercept_logger is None:
        _intercept_logger = loguru_logger.bind(**_default_extra())
    return _intercept_logger


class InterceptHandler(logging.Handler):
    """Route stdlib logging (uvicorn, pymongo, razorpay/requests) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno < logging.INFO and record.name.startswith(QUIET_BELOW_INFO):
            return

        message = record.getMessage()
        level: str | int | None = _parse_http_status_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        _get_intercept_logger().opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


loguru_logger.remove()
custom_logger = loguru_logger.bind(**_default_extra())

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'
custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level, enqueue=True)

# Rotating files only when DEBUG; containers ship stdout
if settings.DEBUG:
    file_prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    custom_logger.add(
        f'{LOG_DIR}/{file_prefix}{{time:YYYY-MM-DD}}.log',
        format=io_log_format,
        rotation='00:00',
        retention='14 days',
        compression='gz',
        enqueue=True,
        level=min_log_level,
    )

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
