"""
Logger.io - call logging decorator

Works on sync, async and generator functions:
- DEBUG: arguments and return values (every step for generators), secrets masked
- always: exceptions, once per exception object; CustomBaseError is an
  expected failure and is logged without a traceback

Logger.base is the plain bound logger for free-form messages.
"""

from collections.abc import Generator
from enum import StrEnum
from functools import wraps
from inspect import iscoroutinefunction, isgeneratorfunction
import types
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Optional,
    ParamSpec,
    Self,
    TypeVar,
    cast,
    overload,
)


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import ExtraField, custom_logger
from src.platform.logging.loguru_io_utils import (
    call_target,
    depth_prefix,
    enter_call,
    exit_call,
    mask,
    shorten,
)


_F = TypeVar('_F', bound=Callable[..., Any])
_P = ParamSpec('_P')
_T = TypeVar('_T')

# loguru trims frames from its own file out of rendered tracebacks
_LOGURU_FILE = cast(types.FunctionType, custom_logger.catch).__code__.co_filename


class GeneratorMethod(StrEnum):
    NEXT = 'next'
    SEND = 'send'
    THROW = 'throw'


def _yield_tag(method: Optional[GeneratorMethod]) -> str:
    return f'yield: {method} | ' if method else ''


class LoggedGenerator:
    """Drives a wrapped generator, logging what goes in and what comes out of each step"""

    def __init__(self, generator: Generator[Any, Any, Any], io: 'LoguruIO') -> None:
        self.generator = generator
        self.io = io

    def __iter__(self) -> Self:
        return self

    def _step(self, method: GeneratorMethod, advance: Callable[[], Any], sent: Any = None) -> Any:
        try:
            self.io.on_call((sent,), {}, method)
            value = advance()
        except StopIteration as stop:
            self.io.on_return(stop.value, method)
            raise
        else:
            self.io.on_return(value, method)
            return value
        finally:
            exit_call()

    def __next__(self) -> Any:
        return self._step(GeneratorMethod.NEXT, lambda: next(self.generator))

    def send(self, value: Any) -> Any:
        return self._step(GeneratorMethod.SEND, lambda: self.generator.send(value), value)

    def throw(self, exc: BaseException) -> Any:
        return self._step(GeneratorMethod.THROW, lambda: self.generator.throw(exc), exc)

    def close(self) -> None:
        self.generator.close()


class LoguruIO:
    def __init__(
        self, bound_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._logger = bound_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}

    def render(self, data: Any) -> Any:
        masked = mask(data)
        return shorten(masked) if self.truncate_content else masked

    def _debug(self, message: str) -> None:
        # _debug <- on_call / on_return <- wrapper <- caller
        self._logger.bind(**self.extra).opt(depth=3).debug(f'{depth_prefix()}{message}')

    def on_call(
        self,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        method: Optional[GeneratorMethod] = None,
    ) -> None:
        self.extra[ExtraField.CHAIN_START_TIME] = enter_call()
        if settings.DEBUG:
            self._debug(
                f'{_yield_tag(method)}args: {self.render(args)}, kwargs: {self.render(kwargs)}'
            )

    def on_return(self, value: Any, method: Optional[GeneratorMethod] = None) -> None:
        if settings.DEBUG:
            self._debug(f'{_yield_tag(method)}return: {self.render(value)}')

    def on_error(self, e: Exception) -> None:
        # Outer decorated callers see the same exception object; log it once
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]

        bound = self._logger.bind(**self.extra).opt(depth=2)
        if isinstance(e, CustomBaseError):
            bound.error(f'{type(e).__name__}: {e}')
        else:
            bound.exception(f'{type(e).__name__}: {e}')

    def _wrap_async(self, func: Callable[..., Any]) -> Callable[..., Any]:
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                self.on_call(args, kwargs)
                value = await func(*args, **kwargs)
                self.on_return(value)
                return value
            except Exception as e:
                self.on_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                exit_call()

        return async_wrapper

    def _wrap_generator(self, func: Callable[..., Any]) -> Callable[..., Any]:
        def generator_wrapper(*args: Any, **kwargs: Any) -> Optional[LoggedGenerator]:
            try:
                self.on_call(args, kwargs)
                return LoggedGenerator(func(*args, **kwargs), self)
            except Exception as e:
                self.on_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                exit_call()

        return generator_wrapper

    def _wrap_sync(self, func: Callable[..., Any]) -> Callable[..., Any]:
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                self.on_call(args, kwargs)
                value = func(*args, **kwargs)
                self.on_return(value)
                return value
            except Exception as e:
                self.on_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                exit_call()

        return sync_wrapper

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = call_target(func)
        if iscoroutinefunction(func):
            wrapper = self._wrap_async(func)
        elif isgeneratorfunction(func):
            wrapper = self._wrap_generator(func)
        else:
            wrapper = self._wrap_sync(func)

        wrapper.__code__ = wrapper.__code__.replace(co_filename=_LOGURU_FILE)
        return cast(_F, wraps(func)(wrapper))


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(custom_logger, reraise=reraise, truncate_content=truncate_content)
        return decorator(func) if func else decorator
