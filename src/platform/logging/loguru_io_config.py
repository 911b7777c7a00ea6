"""
loguru sinks for the whole process

One bound logger carries the service context. Console output always; a
rotating file sink only with DEBUG. stdlib logging (SQLAlchemy, httpx) is
routed through the same sinks.
"""

from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
import sys

from loguru import logger as loguru_logger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


SENSITIVE_KEYWORDS = frozenset({'password', 'api_key', 'authorization'})
DEPTH_LINE = '│'
MAX_LOGGED_CONTENT_LENGTH = 500  # Map documents are large; keep debug lines readable

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


# Third-party loggers that are only noise below WARNING
_QUIET_LOGGER_PREFIXES = ('httpx', 'httpcore', 'aiosqlite', 'asyncio', 'sqlalchemy.engine')

LOG_FORMAT = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)

custom_logger = loguru_logger.bind(
    **{
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }
)


def _log_file_path() -> str:
    test_log_dir = os.environ.get('TEST_LOG_DIR')
    prefix = 'test_' if test_log_dir else ''
    hour = datetime.now(timezone.utc).strftime('%Y-%m-%d_%H')
    return f'{test_log_dir or LOG_DIR}/{prefix}{hour}.log'


class InterceptHandler(logging.Handler):
    """Forwards stdlib logging records to loguru, keeping the original caller"""

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno < logging.WARNING and record.name.startswith(_QUIET_LOGGER_PREFIXES):
            return

        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_sinks() -> None:
    min_level = 'DEBUG' if settings.DEBUG else 'INFO'

    loguru_logger.remove()
    loguru_logger.add(sys.stdout, format=LOG_FORMAT, level=min_level, enqueue=True)
    if settings.DEBUG:
        loguru_logger.add(
            _log_file_path(),
            format=LOG_FORMAT,
            level=min_level,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


configure_sinks()
