# ABOUTME: Default settings for Bookshelf: database path, backend URL, lookup tuning.
# ABOUTME: Environment variables override the database path and backend URL.

import os
from pathlib import Path

DEFAULT_DB_PATH = Path(
    os.environ.get("BOOKSHELF_DB", Path.home() / ".bookshelf" / "catalog.db")
)
DEFAULT_API_URL = os.environ.get("BOOKSHELF_API_URL", "http://localhost:3001")
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001

OPENLIBRARY_BASE_URL = "https://openlibrary.org"

# Quiet period before typed input is treated as settled.
DEBOUNCE_SECONDS = 0.5
SEARCH_LIMIT = 5

# Most queries (entry list plus recent searches) the client keeps cached.
QUERY_CACHE_SIZE = 100
