# ABOUTME: Shared pytest fixtures for Bookshelf tests.
# ABOUTME: Provides a temporary entry store, a test client for the service, and lookup fakes.

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from bookshelf.api.app import create_app
from bookshelf.db.connection import open_catalog
from bookshelf.db.store import EntryStore
from tests.fixtures.lookup_fakes import ManualExecutor, ManualScheduler


@pytest.fixture()
def store(tmp_path: Path) -> Iterator[EntryStore]:
    """Provide an EntryStore backed by a temporary database."""
    entry_store = EntryStore(open_catalog(tmp_path / "catalog.db"))
    yield entry_store
    entry_store.close()


@pytest.fixture()
def api_client(store: EntryStore) -> Iterator[TestClient]:
    """Provide a TestClient for the catalog service serving the temporary store."""
    with TestClient(create_app(store=store)) as client:
        yield client


@pytest.fixture()
def scheduler() -> ManualScheduler:
    """A scheduler whose clock only moves when the test advances it."""
    return ManualScheduler()


@pytest.fixture()
def executor() -> ManualExecutor:
    """An executor whose lookups finish only when the test resolves them."""
    return ManualExecutor()
