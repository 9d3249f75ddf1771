"""Rich enumerations: closed sets of named, valued members with attached behavior."""

from rich_enum.domain.enumeration import (
    Enumeration,
    EnumerationMember,
    absolute_difference,
    member,
)
from rich_enum.platform.exception.exceptions import (
    DuplicateEnumerationValueError,
    EnumerationNotFoundError,
    EnumerationValueLockedError,
)
from rich_enum.platform.logging.loguru_io_config import configure_logging

__all__ = [
    'DuplicateEnumerationValueError',
    'Enumeration',
    'EnumerationMember',
    'EnumerationNotFoundError',
    'EnumerationValueLockedError',
    'absolute_difference',
    'configure_logging',
    'member',
]
