"""Step an awaitable by hand, without an event loop driving it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Pending:
    """The awaitable has not finished yet."""


@dataclass(frozen=True)
class Ready(Generic[T]):
    """The awaitable finished with ``value``."""

    value: T


Poll = Union[Pending, Ready[T]]


def _is_future(obj: Any) -> bool:
    return obj is not None and callable(getattr(obj, "done", None))


class ManuallyPoll(Generic[T]):
    """Advances an awaitable one step each time :meth:`poll` is called.

    Nothing wakes the awaitable up: it is simply resumed on every poll. When
    it waits on a future, polls return :class:`Pending` until that future is
    done, and the awaitable is resumed only then.
    """

    __slots__ = ("_awaitable", "_steps", "_waiting", "_finished")

    def __init__(self, coro: Awaitable[T]) -> None:
        await_method = getattr(coro, "__await__", None)
        if await_method is None:
            raise TypeError(f"object of type {type(coro).__name__} is not awaitable")
        self._awaitable = coro
        self._steps = await_method()
        self._waiting: Optional[Any] = None
        self._finished = False

    @property
    def finished(self) -> bool:
        """Whether the awaitable has completed or raised."""
        return self._finished

    def poll(self) -> Poll[T]:
        """Resume the awaitable once; return :class:`Ready` when it has finished.

        Exceptions raised by the awaitable propagate. Polling again after it
        has finished raises :class:`RuntimeError`.
        """
        if self._finished:
            raise RuntimeError("awaitable polled after completion")

        if self._waiting is not None:
            if not self._waiting.done():
                return Pending()
            self._waiting = None

        send = getattr(self._steps, "send", None)
        try:
            yielded = send(None) if send is not None else next(self._steps)
        except StopIteration as stop:
            self._finished = True
            return Ready(stop.value)
        except BaseException:
            self._finished = True
            raise

        if _is_future(yielded):
            if getattr(yielded, "_asyncio_future_blocking", False):
                yielded._asyncio_future_blocking = False
            self._waiting = yielded
        return Pending()

    def close(self) -> None:
        """Abandon the awaitable, running its cleanup if it has not finished."""
        if self._finished:
            return
        self._finished = True
        self._waiting = None
        for target in (self._steps, self._awaitable):
            close = getattr(target, "close", None)
            if close is not None:
                close()
                break

    def __repr__(self) -> str:
        state = "finished" if self._finished else "running"
        return f"{type(self).__name__}({self._awaitable!r}, {state})"