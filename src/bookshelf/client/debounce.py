# ABOUTME: Debounced query controller turning rapid text input into suggestion lookups.
# ABOUTME: Tags settle timers and lookups with counters so late results are discarded.

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from functools import partial
from typing import Protocol

from bookshelf.client.cache import QueryCache
from bookshelf.config import DEBOUNCE_SECONDS
from bookshelf.metadata.candidate import SuggestionCandidate
from bookshelf.metadata.http import SuggestionLookupError

logger = logging.getLogger(__name__)

SearchFn = Callable[[str], list[SuggestionCandidate]]
SuggestionListener = Callable[[list[SuggestionCandidate]], None]
SettleListener = Callable[[str], None]


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Runs a callback once after a delay, with a handle to cancel it."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable: ...


class TimerScheduler:
    """Scheduler backed by daemon threading.Timer instances."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class DebouncedQueryController:
    """Turns keystroke-rate input into at most one lookup per quiet period.

    State machine:

    - update() records the raw text and restarts the single settle timer.
      Each keystroke bumps a sequence number; a timer only settles if its
      number is still current, so a timer that fires after being replaced
      does nothing.
    - On settle, an unchanged text is ignored. A changed text becomes the
      settled input and bumps the generation. Empty text clears the
      suggestions; anything else is looked up (cache first, then one
      search submitted to the executor, tagged with the generation).
    - A lookup result is applied only if its generation is still current.
      Suggestions therefore always belong to the latest settled text, no
      matter in which order responses arrive.

    Failed lookups are logged and shown as an empty list. After close(),
    nothing further is scheduled or applied.

    All state is guarded by one re-entrant lock; listeners run while it is
    held and must not block.
    """

    def __init__(
        self,
        search: SearchFn,
        *,
        delay: float = DEBOUNCE_SECONDS,
        scheduler: Scheduler | None = None,
        executor: Executor | None = None,
        cache: QueryCache | None = None,
    ) -> None:
        self._search = search
        self._delay = delay
        self._scheduler = scheduler or TimerScheduler()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="bookshelf-lookup"
        )
        self._cache = cache

        self._lock = threading.RLock()
        self._idle = threading.Condition(self._lock)
        self._raw_input = ""
        self._settled_input = ""
        self._suggestions: list[SuggestionCandidate] = []
        self._keystroke = 0
        self._generation = 0
        self._timer: Cancellable | None = None
        self._pending_generation: int | None = None
        self._closed = False
        self._suggestion_listeners: list[SuggestionListener] = []
        self._settle_listeners: list[SettleListener] = []

    @property
    def raw_input(self) -> str:
        return self._raw_input

    @property
    def settled_input(self) -> str:
        return self._settled_input

    @property
    def suggestions(self) -> list[SuggestionCandidate]:
        with self._lock:
            return list(self._suggestions)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def is_idle(self) -> bool:
        """True when no settle timer is pending and no current lookup is in flight."""
        with self._lock:
            return self._timer is None and self._pending_generation is None

    def on_change(self, listener: SuggestionListener) -> None:
        """Call listener with the new suggestion list whenever it changes."""
        with self._lock:
            self._suggestion_listeners.append(listener)

    def on_settle(self, listener: SettleListener) -> None:
        """Call listener with the settled text each time it changes."""
        with self._lock:
            self._settle_listeners.append(listener)

    def update(self, text: str) -> None:
        """Record new input and restart the quiet-period timer."""
        with self._lock:
            if self._closed:
                return
            self._raw_input = text
            self._keystroke += 1
            if self._timer is not None:
                self._timer.cancel()
            self._timer = self._scheduler.call_later(
                self._delay, partial(self._settle, self._keystroke)
            )

    def reset(self) -> None:
        """End the current search session: clear input, timer, and suggestions."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._keystroke += 1
            self._generation += 1
            self._pending_generation = None
            self._raw_input = ""
            self._settled_input = ""
            if self._suggestions:
                self._apply([])
            self._idle.notify_all()

    def close(self) -> None:
        """Tear down: cancel the timer and ignore any lookup still in flight."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._generation += 1
            self._pending_generation = None
            self._idle.notify_all()

        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)

    def wait_until_idle(self, timeout: float | None = None) -> bool:
        """Block until the controller is idle or closed.

        Returns False if timeout elapsed first.
        """
        with self._idle:
            return self._idle.wait_for(
                lambda: self._closed
                or (self._timer is None and self._pending_generation is None),
                timeout,
            )

    def _settle(self, keystroke: int) -> None:
        with self._lock:
            if self._closed or keystroke != self._keystroke:
                return
            self._timer = None
            text = self._raw_input

            if text == self._settled_input:
                self._idle.notify_all()
                return

            self._settled_input = text
            self._generation += 1
            generation = self._generation
            logger.debug("Settled query %r (generation %d)", text, generation)
            for listener in self._settle_listeners:
                listener(text)

            if not text:
                self._pending_generation = None
                self._apply([])
                self._idle.notify_all()
                return

            cached = self._cache.get(("search", text)) if self._cache is not None else None
            if cached is not None:
                self._pending_generation = None
                self._apply(cached)
                self._idle.notify_all()
                return

            self._pending_generation = generation

        try:
            future = self._executor.submit(self._search, text)
        except RuntimeError:
            # Executor shut down by close() after the lock was released.
            logger.debug("Lookup for %r not started: controller closed", text)
            return
        future.add_done_callback(partial(self._on_result, generation, text))

    def _on_result(
        self, generation: int, text: str, future: Future[list[SuggestionCandidate]]
    ) -> None:
        with self._lock:
            if self._closed or generation != self._generation:
                logger.debug("Discarding stale suggestions for %r (generation %d)", text, generation)
                return
            self._pending_generation = None

            try:
                results = list(future.result())
            except SuggestionLookupError as exc:
                logger.warning("Suggestion lookup for %r failed: %s", text, exc)
                results = []
            except Exception:
                # Suggestions are optional; entry creation must keep working.
                logger.exception("Unexpected error looking up suggestions for %r", text)
                results = []
            else:
                if self._cache is not None:
                    self._cache.set(("search", text), results)

            self._apply(results)
            self._idle.notify_all()

    def _apply(self, results: list[SuggestionCandidate]) -> None:
        self._suggestions = list(results)
        for listener in self._suggestion_listeners:
            listener(list(self._suggestions))
