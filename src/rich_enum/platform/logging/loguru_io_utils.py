from inspect import FullArgSpec, getfile, getfullargspec, getsourcelines
from os.path import basename
from re import IGNORECASE, compile
from time import time
from typing import Any, Callable, Optional

from rich_enum.platform.logging.loguru_io_constants import (
    MAX_CONTENT_LENGTH,
    SENSITIVE_KEYWORDS,
    GeneratorMethod,
    call_depth_var,
    chain_start_time_var,
)


_SENSITIVE_PATTERN = compile(
    rf"(\b(?:{'|'.join(sorted(SENSITIVE_KEYWORDS))})\b)(\s*=\s*)('[^']*'|\"[^\"]*\"|[^,)\s]+)",
    IGNORECASE,
)


def handle_yield(yield_method: Optional[GeneratorMethod] = None) -> str:
    return f'yield: {yield_method} | ' if yield_method else ''


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
        filename = basename(getfile(target))
    except (OSError, TypeError):
        return func.__qualname__
    return f'{filename}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def normalize_args_kwargs(
    func: Callable[..., Any], /, *args: Any, **kwargs: Any
) -> tuple[tuple[Any, ...], dict[Any, Any]]:
    """Drop extra positional/keyword arguments the wrapped function cannot accept."""
    if hasattr(func, '__wrapped__'):
        func = func.__wrapped__  # type: ignore
    full_arg_spec: FullArgSpec = getfullargspec(func)
    spec_args: list[str] = full_arg_spec.args

    if not full_arg_spec.varkw:
        kw_list: list[str] = spec_args + full_arg_spec.kwonlyargs
        kwargs = {k: v for k, v in kwargs.items() if k in kw_list}

    if not full_arg_spec.varargs:
        positional_slots = [name for name in spec_args if name not in kwargs]
        args = args[: len(positional_slots)]

    return args, kwargs


def mask_sensitive(data: Any) -> Any:
    data_str = str(data)
    masked = _SENSITIVE_PATTERN.sub(r"\1\2'********'", data_str)
    return data if masked == data_str else masked


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return '********' if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(content: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    text = content if isinstance(content, str) else str(content)
    if len(text) <= max_length:
        return content
    return f'{text[:max_length]}... ({len(text) - max_length} more chars)'
