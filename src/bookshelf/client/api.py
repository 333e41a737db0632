# ABOUTME: HTTP client for the Bookshelf catalog service.
# ABOUTME: Lists, creates, and deletes entries; maps failures to CatalogRequestError.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from bookshelf import __version__
from bookshelf.config import DEFAULT_API_URL
from bookshelf.db.mapping import CatalogEntry

logger = logging.getLogger(__name__)


class CatalogRequestError(Exception):
    """Raised when a call to the catalog service fails.

    status_code is None when the service could not be reached at all.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteEntryNotFound(CatalogRequestError):
    """Raised when the service reports that an entry does not exist."""


@runtime_checkable
class CatalogBackend(Protocol):
    """Protocol for the catalog operations the submission flow needs."""

    def list_entries(self) -> list[CatalogEntry]: ...

    def create_entry(self, payload: dict[str, Any]) -> CatalogEntry: ...

    def delete_entry(self, entry_id: int) -> None: ...

    def close(self) -> None: ...


class CatalogApiClient:
    """Talks to the catalog service over HTTP.

    Pass client to reuse an existing httpx.Client (for example FastAPI's
    TestClient); otherwise one is created for base_url and owned here.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=base_url,
            headers={"User-Agent": f"bookshelf/{__version__}"},
            timeout=timeout,
        )

    def list_entries(self) -> list[CatalogEntry]:
        """Fetch every entry from the service."""
        data = self._request("GET", "/books")
        return [CatalogEntry.from_dict(item) for item in data]

    def create_entry(self, payload: dict[str, Any]) -> CatalogEntry:
        """Create an entry from the given fields and return the stored record."""
        data = self._request("POST", "/books", json=payload)
        return CatalogEntry.from_dict(data)

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry by id.

        Raises:
            RemoteEntryNotFound: If the service has no entry with this id.
            CatalogRequestError: On any other failure.
        """
        self._request("DELETE", f"/books/{entry_id}")

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise CatalogRequestError(f"{method} {path} failed: {exc}") from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)

        if response.status_code == 404:
            raise RemoteEntryNotFound(_error_message(response), status_code=404)
        if response.is_error:
            raise CatalogRequestError(_error_message(response), status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise CatalogRequestError(
                f"Invalid JSON from {method} {path}", status_code=response.status_code
            ) from exc


def _error_message(response: httpx.Response) -> str:
    """Pull the service's message out of an error response, if it sent one."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return f"HTTP {response.status_code}"
