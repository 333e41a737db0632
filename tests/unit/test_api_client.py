# ABOUTME: Unit tests for CatalogApiClient against a mocked httpx transport.
# ABOUTME: Checks request shapes, entry decoding, and mapping of error responses.

import json

import httpx
import pytest

from bookshelf.client.api import CatalogApiClient, CatalogRequestError, RemoteEntryNotFound
from bookshelf.db.mapping import CatalogEntry


def _client(handler) -> CatalogApiClient:
    http = httpx.Client(base_url="http://catalog.test", transport=httpx.MockTransport(handler))
    return CatalogApiClient(client=http)


class TestListEntries:
    """Tests for CatalogApiClient.list_entries."""

    def test_decodes_entries(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.path == "/books"
            return httpx.Response(
                200,
                json=[
                    {"id": 1, "title": "Dune", "author": "Frank Herbert", "first_publish_year": 1965},
                    {"id": 2, "title": "Emma", "author": "Jane Austen"},
                ],
            )

        entries = _client(handler).list_entries()
        assert entries == [
            CatalogEntry(1, "Dune", "Frank Herbert", first_publish_year=1965),
            CatalogEntry(2, "Emma", "Jane Austen"),
        ]

    def test_server_error_uses_service_message(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "Error fetching books"})

        with pytest.raises(CatalogRequestError, match="Error fetching books") as excinfo:
            _client(handler).list_entries()
        assert excinfo.value.status_code == 500

    def test_unreachable_service(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CatalogRequestError) as excinfo:
            _client(handler).list_entries()
        assert excinfo.value.status_code is None

    def test_invalid_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="not json")

        with pytest.raises(CatalogRequestError, match="Invalid JSON"):
            _client(handler).list_entries()


class TestCreateEntry:
    """Tests for CatalogApiClient.create_entry."""

    def test_posts_payload(self) -> None:
        sent: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            body = json.loads(request.content)
            sent.append(body)
            return httpx.Response(200, json={"id": 7, **body})

        entry = _client(handler).create_entry({"title": "Dune", "author": "Frank Herbert"})
        assert sent == [{"title": "Dune", "author": "Frank Herbert"}]
        assert entry == CatalogEntry(7, "Dune", "Frank Herbert")

    def test_error_without_message_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="bad gateway")

        with pytest.raises(CatalogRequestError, match="HTTP 502"):
            _client(handler).create_entry({"title": "Dune", "author": "Frank Herbert"})


class TestDeleteEntry:
    """Tests for CatalogApiClient.delete_entry."""

    def test_deletes_by_id(self) -> None:
        paths: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "DELETE"
            paths.append(request.url.path)
            return httpx.Response(200, json={"message": "Book deleted"})

        _client(handler).delete_entry(3)
        assert paths == ["/books/3"]

    def test_not_found(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Book not found"})

        with pytest.raises(RemoteEntryNotFound, match="Book not found") as excinfo:
            _client(handler).delete_entry(3)
        assert excinfo.value.status_code == 404

    def test_server_error_is_not_not_found(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "Error deleting book"})

        with pytest.raises(CatalogRequestError) as excinfo:
            _client(handler).delete_entry(3)
        assert not isinstance(excinfo.value, RemoteEntryNotFound)


class TestClose:
    """Tests for client ownership."""

    def test_injected_client_left_open(self) -> None:
        http = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[])))
        CatalogApiClient(client=http).close()
        assert not http.is_closed
        http.close()
