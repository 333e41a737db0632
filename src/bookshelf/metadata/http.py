# ABOUTME: HTTP client abstraction for Open Library suggestion lookups.
# ABOUTME: Spaces requests across threads, retries transient failures, accepts a test transport.

import logging
import threading
import time
from typing import Any, Protocol, runtime_checkable

import httpx

from bookshelf import __version__

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class SuggestionLookupError(Exception):
    """Raised when a request to the bibliographic source fails or returns garbage."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for JSON GET requests, plus releasing the connection pool."""

    def get(self, url: str, params: dict[str, str] | None = None) -> Any: ...

    def close(self) -> None: ...


class BookshelfHttpClient:
    """JSON GET client shared by the lookup worker threads.

    Requests leave at least min_request_interval apart, however many threads
    call get() at once: a lock hands out send slots in turn. Responses with a
    transient status (429, 5xx) are retried up to max_retries times, waiting
    retry_delay, then twice that, and so on.
    """

    def __init__(
        self,
        *,
        min_request_interval: float = 0.1,
        max_retries: int = 2,
        retry_delay: float = 0.5,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            headers={"User-Agent": f"bookshelf/{__version__}"},
            timeout=timeout,
            transport=transport,
        )
        self._min_interval = min_request_interval
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._slot_lock = threading.Lock()
        self._next_slot: float | None = None

    def get(self, url: str, params: dict[str, str] | None = None) -> Any:
        """GET url and return the decoded JSON body.

        Raises:
            SuggestionLookupError: On transport errors, a non-retryable
                status, a transient status that outlasts the retries, or a
                body that is not JSON.
        """
        attempts = self._max_retries + 1
        for attempt in range(1, attempts + 1):
            response = self._send(url, params)
            status = response.status_code

            if status == 200:
                return _decode(response, url)
            if status not in _RETRYABLE_STATUS_CODES:
                raise SuggestionLookupError(f"HTTP {status} from {url}")
            if attempt == attempts:
                break

            delay = self._retry_delay * 2 ** (attempt - 1)
            logger.warning(
                "HTTP %d from %s; retry %d of %d in %.1fs",
                status,
                url,
                attempt,
                self._max_retries,
                delay,
            )
            time.sleep(delay)

        raise SuggestionLookupError(f"HTTP {status} from {url} after {attempts} attempts")

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._client.close()

    def _send(self, url: str, params: dict[str, str] | None) -> httpx.Response:
        self._wait_for_slot()
        try:
            return self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise SuggestionLookupError(f"Request failed: {url}: {exc}") from exc

    def _wait_for_slot(self) -> None:
        """Block until this thread may send, keeping requests min_interval apart."""
        if self._min_interval <= 0:
            return
        with self._slot_lock:
            now = time.monotonic()
            if self._next_slot is not None and self._next_slot > now:
                time.sleep(self._next_slot - now)
                now = self._next_slot
            self._next_slot = now + self._min_interval


def _decode(response: httpx.Response, url: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise SuggestionLookupError(f"Invalid JSON from {url}") from exc
