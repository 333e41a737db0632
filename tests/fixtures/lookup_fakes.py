# ABOUTME: Test doubles for the lookup controller: manual clock, manual and inline executors.
# ABOUTME: Let tests decide exactly when timers fire and in which order lookups finish.

from collections.abc import Callable
from concurrent.futures import Executor, Future
from typing import Any


class ManualScheduler:
    """Scheduler driven by an explicit clock instead of real time."""

    def __init__(self) -> None:
        self.now = 0.0
        self._timers: list[ManualTimer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> "ManualTimer":
        timer = ManualTimer(self.now + delay, callback)
        self._timers.append(timer)
        return timer

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due timers in deadline order."""
        target = self.now + seconds
        while True:
            due = [t for t in self._timers if not t.cancelled and t.deadline <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.deadline)
            self._timers.remove(timer)
            self.now = timer.deadline
            timer.callback()
        self.now = target

    @property
    def pending(self) -> int:
        return sum(1 for t in self._timers if not t.cancelled)


class ManualTimer:
    def __init__(self, deadline: float, callback: Callable[[], None]) -> None:
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualExecutor(Executor):
    """Executor that records submissions and lets the test resolve them."""

    def __init__(self) -> None:
        self.submitted: list[tuple[tuple[Any, ...], Future[Any]]] = []

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future[Any]:
        future: Future[Any] = Future()
        self.submitted.append((args, future))
        return future

    @property
    def queries(self) -> list[Any]:
        return [args[0] for args, _ in self.submitted]

    def resolve(self, index: int, result: Any) -> None:
        self.submitted[index][1].set_result(result)

    def fail(self, index: int, exc: BaseException) -> None:
        self.submitted[index][1].set_exception(exc)


class ImmediateExecutor(Executor):
    """Executor that runs the call inline and returns a finished future."""

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future[Any]:
        future: Future[Any] = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:
            future.set_exception(exc)
        return future


