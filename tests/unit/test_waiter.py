import asyncio
import time

import pytest

from treewright.core.waiter import async_wait_for, async_wait_until, wait_for, wait_until
from treewright.errors import ElementNotFound, WaitTimeout


class Ticker:
    """Returns `value` once it has been called more than `after` times."""

    def __init__(self, after: int, value="ready"):
        self.after = after
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value if self.calls > self.after else None


def test_wait_for_returns_first_present_value():
    tick = Ticker(after=3)
    assert wait_for(tick, timeout_ms=1000, interval_ms=5, label="x") == "ready"
    assert tick.calls == 4


def test_wait_for_returns_immediately_without_sleeping():
    started = time.monotonic()
    assert wait_for(lambda: 0, timeout_ms=5000, interval_ms=1000) == 0
    assert time.monotonic() - started < 0.5


def test_wait_until_after_k_ticks():
    tick = Ticker(after=5, value=True)
    wait_until(tick, timeout_ms=1000, interval_ms=5)
    assert tick.calls == 6


def test_wait_until_false_means_not_yet():
    with pytest.raises(WaitTimeout):
        wait_until(lambda: False, timeout_ms=50, interval_ms=5)


def test_timeout_after_roughly_the_budget():
    started = time.monotonic()
    with pytest.raises(WaitTimeout) as exc:
        wait_for(lambda: None, timeout_ms=150, interval_ms=10, label="button#ok", condition="enabled")
    elapsed_ms = (time.monotonic() - started) * 1000
    assert 140 <= elapsed_ms < 150 + 250
    err = exc.value
    assert isinstance(err, TimeoutError)
    assert err.selector == "button#ok"
    assert err.timeout_ms == 150
    assert str(err) == "Timeout after 150 ms waiting for: button#ok (enabled)"


def test_zero_timeout_never_attempts():
    tick = Ticker(after=0)
    with pytest.raises(WaitTimeout):
        wait_for(tick, timeout_ms=0, interval_ms=5)
    assert tick.calls == 0


def test_errors_are_absorbed_while_polling():
    calls = {"n": 0}

    def attempt():
        calls["n"] += 1
        if calls["n"] < 4:
            raise ElementNotFound("#late")
        return "found"

    assert wait_for(attempt, timeout_ms=1000, interval_ms=5) == "found"


def test_remembered_error_replaces_generic_timeout():
    calls = {"n": 0}

    def attempt():
        calls["n"] += 1
        raise ValueError(f"boom {calls['n']}")

    with pytest.raises(ValueError) as exc:
        wait_for(attempt, timeout_ms=60, interval_ms=5)
    assert calls["n"] > 1
    # latest error wins
    assert str(exc.value) == f"boom {calls['n']}"


def test_error_seen_once_is_still_surfaced_at_deadline():
    calls = {"n": 0}

    def attempt():
        calls["n"] += 1
        if calls["n"] == 1:
            raise KeyError("first tick only")
        return None

    with pytest.raises(KeyError):
        wait_for(attempt, timeout_ms=50, interval_ms=5)


def test_async_wait_for_sync_and_async_attempts():
    tick = Ticker(after=2)

    async def coro_attempt():
        return tick()

    assert asyncio.run(async_wait_for(coro_attempt, timeout_ms=1000, interval_ms=5)) == "ready"
    assert asyncio.run(async_wait_for(lambda: 42, timeout_ms=1000, interval_ms=5)) == 42


def test_async_wait_until_times_out():
    async def never():
        return False

    with pytest.raises(WaitTimeout) as exc:
        asyncio.run(async_wait_until(never, timeout_ms=40, interval_ms=5, label="#spinner"))
    assert exc.value.selector == "#spinner"


def test_async_waits_run_concurrently():
    async def main():
        fast = Ticker(after=1, value=True)
        slow = Ticker(after=4, value=True)
        await asyncio.gather(
            async_wait_until(fast, timeout_ms=1000, interval_ms=5),
            async_wait_until(slow, timeout_ms=1000, interval_ms=5),
        )
        return fast.calls, slow.calls

    assert asyncio.run(main()) == (2, 5)
