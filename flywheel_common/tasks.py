"""Helpers for cooperative tasks running on an asyncio event loop."""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Optional, TypeVar

from flywheel_common.manually_poll import ManuallyPoll, Ready

T = TypeVar("T")


async def sleep(seconds: float) -> None:
    """Suspend the current task for ``seconds``."""
    await asyncio.sleep(seconds)


async def yield_now() -> None:
    """Let other tasks on the loop run before continuing."""
    await asyncio.sleep(0)


async def poll_and_yield(coro: Awaitable[T]) -> T:
    """Poll ``coro`` by hand, yielding to the loop between polls, until it finishes."""
    poller = ManuallyPoll(coro)
    try:
        while True:
            result = poller.poll()
            if isinstance(result, Ready):
                return result.value
            await yield_now()
    finally:
        poller.close()


async def timeout(seconds: float, coro: Awaitable[T]) -> Optional[T]:
    """Poll ``coro`` by hand until it finishes or ``seconds`` have passed.

    The awaitable is always polled at least once. Returns its result, or
    ``None`` when time ran out, in which case the awaitable is closed.
    """
    expires = time.monotonic() + seconds
    poller = ManuallyPoll(coro)
    try:
        while True:
            result = poller.poll()
            if isinstance(result, Ready):
                return result.value
            if time.monotonic() >= expires:
                return None
            await yield_now()
    finally:
        poller.close()


def block_on(coro: Awaitable[T]) -> T:
    """Run ``coro`` to completion on a fresh event loop and return its result."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise RuntimeError("block_on cannot be called from a running event loop")

    async def _run() -> T:
        return await coro

    return asyncio.run(_run())