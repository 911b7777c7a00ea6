"""
Helpers for Logger.io: call-chain bookkeeping and log-safe rendering of values
"""

from inspect import getfile, getsourcelines
from os.path import basename
import re
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    DEPTH_LINE,
    MAX_LOGGED_CONTENT_LENGTH,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'

# key=value / key: value pairs inside an already-stringified value
_INLINE_SECRET_PATTERN = re.compile(
    rf"({'|'.join(sorted(SENSITIVE_KEYWORDS))})(\s*[=:]\s*)['\"]?([^'\",\s)]+)['\"]?",
    re.IGNORECASE,
)


def enter_call() -> float:
    """Open one level of the call chain; returns when the outermost call started"""
    call_depth_var.set(call_depth_var.get() + 1)
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def exit_call() -> None:
    depth = max(call_depth_var.get() - 1, 0)
    call_depth_var.set(depth)
    if not depth:
        chain_start_time_var.set(0)


def depth_prefix() -> str:
    return DEPTH_LINE * max(call_depth_var.get() - 1, 0)


def call_target(func: Callable[..., Any]) -> str:
    """'module.py::Class.method:line' for the decorated function"""
    try:
        lineno = getsourcelines(func)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def mask(data: Any) -> Any:
    if isinstance(data, dict):
        return {
            key: MASK if key in SENSITIVE_KEYWORDS else mask(value) for key, value in data.items()
        }
    if isinstance(data, list | tuple):
        return type(data)(mask(item) for item in data)

    text = str(data)
    masked = _INLINE_SECRET_PATTERN.sub(rf"\1\2'{MASK}'", text)
    return data if masked == text else masked


def shorten(data: Any, max_length: int = MAX_LOGGED_CONTENT_LENGTH) -> Any:
    text = str(data)
    if len(text) <= max_length:
        return data
    return f'{text[:max_length]}...(+{len(text) - max_length} chars)'
