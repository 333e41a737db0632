# ABOUTME: In-memory query cache keyed by tuples, with prefix invalidation.
# ABOUTME: Bounded: the least recently used query is evicted once the limit is reached.

import logging
import threading
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from bookshelf.config import QUERY_CACHE_SIZE

logger = logging.getLogger(__name__)

T = TypeVar("T")

QueryKey = tuple[Any, ...]


@dataclass
class _Slot:
    value: Any
    stale: bool = False


class QueryCache:
    """Holds the results of read queries between mutations.

    Keys are tuples such as ("books",) or ("search", "dune"). Invalidating a
    prefix marks every key that starts with it as stale without dropping the
    value, so a view can keep showing old data until it refetches.

    At most max_entries queries are kept. Reading or writing a key makes it
    the most recently used; adding one past the limit drops the least
    recently used.
    """

    def __init__(self, max_entries: int = QUERY_CACHE_SIZE) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._max_entries = max_entries
        self._slots: OrderedDict[QueryKey, _Slot] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._slots)

    def get(self, key: QueryKey) -> Any | None:
        """Return the cached value for key if it is present and fresh."""
        with self._lock:
            return self._fresh(key)

    def set(self, key: QueryKey, value: Any) -> None:
        with self._lock:
            self._slots[key] = _Slot(value)
            self._slots.move_to_end(key)
            while len(self._slots) > self._max_entries:
                evicted, _ = self._slots.popitem(last=False)
                logger.debug("Evicted cached query %r", evicted)

    def fetch(self, key: QueryKey, loader: Callable[[], T]) -> T:
        """Return the fresh cached value for key, loading it on a miss.

        Errors from loader propagate and leave the cache unchanged.
        """
        with self._lock:
            cached = self._fresh(key)
        if cached is not None:
            return cached

        value = loader()
        self.set(key, value)
        return value

    def invalidate(self, prefix: QueryKey) -> int:
        """Mark every key starting with prefix as stale. Returns how many."""
        count = 0
        with self._lock:
            for key, slot in self._slots.items():
                if key[: len(prefix)] == prefix:
                    slot.stale = True
                    count += 1
        logger.debug("Invalidated %d cached queries under %r", count, prefix)
        return count

    def is_stale(self, key: QueryKey) -> bool:
        """True when key is cached but has been invalidated."""
        with self._lock:
            slot = self._slots.get(key)
            return slot is not None and slot.stale

    def _fresh(self, key: QueryKey) -> Any | None:
        slot = self._slots.get(key)
        if slot is None or slot.stale:
            return None
        self._slots.move_to_end(key)
        return slot.value
