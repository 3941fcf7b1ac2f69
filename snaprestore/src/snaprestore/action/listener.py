"""Action listeners - completion callbacks for submitted requests."""

import asyncio
from concurrent.futures import Future
from typing import Callable, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class ActionListener(Protocol[T_contra]):
    """Receives exactly one of a response or a failure."""

    def on_response(self, response: T_contra) -> None: ...

    def on_failure(self, exc: BaseException) -> None: ...


class CallbackListener(Generic[T]):
    """Listener built from two callables."""

    def __init__(
        self,
        on_response: Callable[[T], None],
        on_failure: Callable[[BaseException], None],
    ):
        self._on_response = on_response
        self._on_failure = on_failure

    def on_response(self, response: T) -> None:
        self._on_response(response)

    def on_failure(self, exc: BaseException) -> None:
        self._on_failure(exc)


def wrap(
    on_response: Callable[[T], None], on_failure: Callable[[BaseException], None]
) -> CallbackListener[T]:
    """Create a listener from response and failure callbacks."""
    return CallbackListener(on_response, on_failure)


class FutureListener(Generic[T]):
    """
    Listener backed by a ``concurrent.futures.Future``.

    Lets synchronous callers block on completion with :meth:`get`.
    """

    def __init__(self):
        self.future: Future[T] = Future()

    def on_response(self, response: T) -> None:
        self.future.set_result(response)

    def on_failure(self, exc: BaseException) -> None:
        self.future.set_exception(exc)

    def done(self) -> bool:
        return self.future.done()

    def get(self, timeout: float | None = None) -> T:
        """Wait for the response, re-raising any failure."""
        return self.future.result(timeout=timeout)


class AsyncioListener(Generic[T]):
    """Listener resolving an asyncio future, safe to call from any thread."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop or asyncio.get_running_loop()
        self.future: asyncio.Future[T] = self._loop.create_future()

    def on_response(self, response: T) -> None:
        self._loop.call_soon_threadsafe(self._resolve, response, None)

    def on_failure(self, exc: BaseException) -> None:
        self._loop.call_soon_threadsafe(self._resolve, None, exc)

    def _resolve(self, response: T | None, exc: BaseException | None) -> None:
        if self.future.done():
            return
        if exc is not None:
            self.future.set_exception(exc)
        else:
            self.future.set_result(response)  # type: ignore[arg-type]
