"""Constants and shared variables for LoguruIO."""

from contextvars import ContextVar
from enum import StrEnum


SENSITIVE_KEYWORDS = {
    'password',
    'secret',
    'token',
}

# Longest rendered argument/return value before truncation
MAX_CONTENT_LENGTH = 500

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


class GeneratorMethod(StrEnum):
    NEXT = 'next'
    SEND = 'send'
    THROW = 'throw'
