"""
Test Configuration and Fixtures

This module provides:
- Test environment variables, set before any rich_enum module reads settings
- A loguru sink fixture for asserting on emitted log lines
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are instantiated at import time of rich_enum.platform.config
# =============================================================================
import os


def _early_setup_test_environment() -> None:
    os.environ['RICH_ENUM_DEBUG'] = 'false'
    os.environ['RICH_ENUM_LOG_LEVEL'] = 'WARNING'
    os.environ['RICH_ENUM_LOG_TO_FILE'] = 'false'
    os.environ['RICH_ENUM_WARN_ON_UNKNOWN_VALUE'] = 'true'
    os.environ['RICH_ENUM_SERVICE_NAME'] = 'rich-enum-test'
    os.environ['RICH_ENUM_DEPLOY_ENV'] = 'test'


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402

from rich_enum.platform.logging.loguru_io import Logger  # noqa: E402


@pytest.fixture
def log_lines() -> Generator[list[str], None, None]:
    """Collect '<LEVEL>|<message>' lines written through the shared loguru core."""
    lines: list[str] = []
    handler_id = Logger.base.add(
        lambda message: lines.append(str(message).rstrip('\n')),
        format='{level}|{message}',
        level='DEBUG',
    )
    yield lines
    Logger.base.remove(handler_id)
