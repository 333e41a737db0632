# ABOUTME: FastAPI application factory for the Bookshelf catalog service.
# ABOUTME: Owns the entry store lifecycle: opened at startup, closed at shutdown.

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookshelf import __version__
from bookshelf.api.routes import router
from bookshelf.api.schemas import Health
from bookshelf.db.connection import open_catalog
from bookshelf.db.store import EntryStore

logger = logging.getLogger(__name__)


def create_app(store: EntryStore | None = None, db_path: Path | None = None) -> FastAPI:
    """Build the catalog service.

    Args:
        store: An already-open store to serve from. The caller keeps
            ownership and closes it.
        db_path: Database to open at startup when no store is given.
            Defaults to DEFAULT_DB_PATH.

    Returns:
        A configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned = app.state.store is None
        if owned:
            app.state.store = EntryStore(open_catalog(db_path))
            logger.info("Opened catalog database %s", db_path or "(default)")
        try:
            yield
        finally:
            if owned:
                app.state.store.close()
                app.state.store = None

    app = FastAPI(
        title="Bookshelf",
        description="Personal book catalog: list, add, and remove books.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_model=Health)
    def health_check() -> Health:
        return Health()

    app.include_router(router)
    return app
