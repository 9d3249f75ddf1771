"""
Centralized logging configuration.

Importing this module only binds a logger; the host application's loguru
handlers are left alone. Call configure_logging() to add the library's own
sinks when the host does not route loguru output itself.
"""

from datetime import datetime
import logging
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from rich_enum.platform.config.core_setting import settings
from rich_enum.platform.logging.loguru_io_constants import ExtraField
from rich_enum.platform.logging.service_context import get_service_context


_intercept_bound_logger = None  # Cached bound logger for InterceptHandler


def _get_intercept_bound_logger() -> 'LoguruLogger':
    """Get or create bound logger with default extra fields (cached)."""
    global _intercept_bound_logger
    if _intercept_bound_logger is None:
        _intercept_bound_logger = loguru_logger.bind(
            **{
                ExtraField.SERVICE_CONTEXT: get_service_context(),
                ExtraField.CHAIN_START_TIME: '',
                ExtraField.CALL_TARGET: '',
            }
        )
    return _intercept_bound_logger


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        _get_intercept_bound_logger().opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


# Log format for LoguruIO decorated functions
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


custom_logger = loguru_logger.bind(
    **{
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }
)


def _is_bound_record(record: dict[str, Any]) -> bool:
    # io_log_format needs the extra fields only our bound loggers carry
    return ExtraField.SERVICE_CONTEXT in record['extra']


def configure_logging() -> list[int]:
    """Add the library's console and optional file sinks; returns the loguru handler ids."""
    min_log_level = settings.MIN_LOG_LEVEL
    handler_ids = [
        loguru_logger.add(
            sys.stderr,
            format=io_log_format,
            level=min_log_level,
            filter=_is_bound_record,
            enqueue=settings.LOG_ENQUEUE,
        )
    ]

    if settings.LOG_TO_FILE:
        log_filename = f'{datetime.now().strftime("%Y-%m-%d_%H")}.log'
        handler_ids.append(
            loguru_logger.add(
                str(settings.LOG_DIR / log_filename),
                format=io_log_format,
                filter=_is_bound_record,
                rotation='1 hour',
                retention='7 days',
                compression='gz',
                enqueue=settings.LOG_ENQUEUE,
                level=min_log_level,
            )
        )

    # Intercept standard logging → loguru
    if settings.INTERCEPT_STDLIB_LOGGING:
        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    return handler_ids
