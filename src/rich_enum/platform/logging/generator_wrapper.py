from types import TracebackType
from typing import TYPE_CHECKING, Any, Callable, Generator, Self

from rich_enum.platform.logging.loguru_io_constants import GeneratorMethod
from rich_enum.platform.logging.loguru_io_utils import reset_call_depth


if TYPE_CHECKING:
    from rich_enum.platform.logging.loguru_io import LoguruIO


class GeneratorWrapper:
    """Forwards generator protocol calls and logs every step through LoguruIO."""

    def __init__(self, gen_obj: Generator[Any, Any, Any], io_logger: 'LoguruIO') -> None:
        self.gen_obj = gen_obj
        self._io_logger: LoguruIO = io_logger

    def __iter__(self) -> Self:
        return self

    def _step(
        self, method: GeneratorMethod, call: Callable[[], Any], *args: Any, **kwargs: Any
    ) -> Any:
        try:
            self._io_logger.log_args_kwargs_content(*args, yield_method=method, **kwargs)
            out = call()
            self._io_logger.log_return_content(out, yield_method=method)
            return out
        except StopIteration as e:
            self._io_logger.log_return_content(e.value, yield_method=method)
            raise
        finally:
            reset_call_depth()

    def __next__(self) -> Any:
        return self._step(GeneratorMethod.NEXT, lambda: next(self.gen_obj), None)

    def send(self, value: Any) -> Any:
        return self._step(GeneratorMethod.SEND, lambda: self.gen_obj.send(value), value)

    def throw(
        self,
        exc_type: type[BaseException],
        exc_val: BaseException | None = None,
        tb: TracebackType | None = None,
    ) -> Any:
        return self._step(
            GeneratorMethod.THROW,
            lambda: self.gen_obj.throw(
                exc_type if exc_val is None else exc_val.with_traceback(tb)
            ),
            exc_type=exc_type,
            exc_val=exc_val,
        )

    def close(self) -> None:
        self.gen_obj.close()
