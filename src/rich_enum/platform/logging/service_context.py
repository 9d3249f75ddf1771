"""
Service context for log lines.

Identifies which process emitted a record when several consumers of the
library share one log sink.
"""

import os
from functools import lru_cache

from rich_enum.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    return f'{settings.SERVICE_NAME}@{settings.DEPLOY_ENV}:{os.getpid()}'
