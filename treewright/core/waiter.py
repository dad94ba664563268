# treewright/core/waiter.py
from __future__ import annotations

"""Auto-waiter
--------------
Bounded-retry polling used by every locator action and expectation.

Contract (sync and async variants alike):
  - the deadline is fixed once at entry (start + timeout)
  - while now < deadline: call `attempt`; a non-None result is returned at once
  - an exception raised by `attempt` is remembered (latest wins) and polling
    continues
  - otherwise sleep `interval_ms` and try again
  - at the deadline the remembered exception is raised if there is one,
    else WaitTimeout(label, timeout_ms)
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from treewright.errors import WaitTimeout
from treewright.utils.logger import get_logger
from treewright.utils.timing import async_sleep_ms, now_ms, sleep_ms

T = TypeVar("T")

DEFAULT_INTERVAL_MS = 100
DEFAULT_TIMEOUT_MS = 10_000

__all__ = [
    "DEFAULT_INTERVAL_MS",
    "DEFAULT_TIMEOUT_MS",
    "wait_for",
    "wait_until",
    "async_wait_for",
    "async_wait_until",
]

log = get_logger(__name__)


def _failure(label: str, timeout_ms: int, condition: Optional[str], last_exc: Optional[Exception]) -> Exception:
    if last_exc is not None:
        log.debug(f"Wait for {label!r} expired after {timeout_ms} ms; raising last error: {last_exc!r}")
        return last_exc
    log.debug(f"Wait for {label!r} timed out after {timeout_ms} ms")
    return WaitTimeout(label, timeout_ms, condition)


def wait_for(
    attempt: Callable[[], Optional[T]],
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    interval_ms: int = DEFAULT_INTERVAL_MS,
    label: str = "",
    condition: Optional[str] = None,
) -> T:
    """
    Poll `attempt()` until it returns something other than None.

    Args:
        attempt: producer returning a value on success, None to retry
        timeout_ms: total budget
        interval_ms: sleep between attempts
        label: what is being waited on (usually the selector), used in WaitTimeout
        condition: optional human description of the awaited state

    Raises:
        The last exception raised by `attempt`, or WaitTimeout.
    """
    deadline = now_ms() + max(0, timeout_ms)
    last_exc: Optional[Exception] = None

    while now_ms() < deadline:
        try:
            result = attempt()
        except Exception as exc:
            if last_exc is None or type(last_exc) is not type(exc):
                log.debug(f"Attempt for {label!r} raised {exc!r}; still polling")
            last_exc = exc
        else:
            if result is not None:
                return result
        sleep_ms(max(1, interval_ms))

    raise _failure(label, timeout_ms, condition, last_exc)


def wait_until(
    predicate: Callable[[], bool],
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    interval_ms: int = DEFAULT_INTERVAL_MS,
    label: str = "",
    condition: Optional[str] = None,
) -> None:
    """Same as wait_for, with False meaning "not yet"."""
    wait_for(
        lambda: True if predicate() else None,
        timeout_ms=timeout_ms,
        interval_ms=interval_ms,
        label=label,
        condition=condition,
    )


async def async_wait_for(
    attempt: Callable[[], Union[Optional[T], Awaitable[Optional[T]]]],
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    interval_ms: int = DEFAULT_INTERVAL_MS,
    label: str = "",
    condition: Optional[str] = None,
) -> T:
    """
    Async variant of wait_for(). `attempt` may be sync or async; control is
    only yielded while sleeping between attempts.
    """
    deadline = now_ms() + max(0, timeout_ms)
    last_exc: Optional[Exception] = None

    while now_ms() < deadline:
        try:
            result: Any = attempt()
            if asyncio.iscoroutine(result):
                result = await result
        except Exception as exc:
            if last_exc is None or type(last_exc) is not type(exc):
                log.debug(f"[async] Attempt for {label!r} raised {exc!r}; still polling")
            last_exc = exc
        else:
            if result is not None:
                return result
        await async_sleep_ms(max(1, interval_ms))

    raise _failure(label, timeout_ms, condition, last_exc)


async def async_wait_until(
    predicate: Callable[[], Union[bool, Awaitable[bool]]],
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    interval_ms: int = DEFAULT_INTERVAL_MS,
    label: str = "",
    condition: Optional[str] = None,
) -> None:
    async def _attempt() -> Optional[bool]:
        ok = predicate()
        if asyncio.iscoroutine(ok):
            ok = await ok
        return True if ok else None

    await async_wait_for(
        _attempt,
        timeout_ms=timeout_ms,
        interval_ms=interval_ms,
        label=label,
        condition=condition,
    )
