# ABOUTME: Route definitions for the catalog service: list, create, and delete books.
# ABOUTME: Store failures are logged and answered with a generic message, never the detail.

import logging
import re
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from bookshelf.api.schemas import Message
from bookshelf.db.store import EntryNotFoundError, EntryStore, StoreError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["books"])

# Leading optional sign and digits; whatever follows is ignored.
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def get_store(request: Request) -> EntryStore:
    """Return the store attached to the running application."""
    return request.app.state.store


def parse_entry_id(raw: str) -> int | None:
    """Parse a path segment as an entry id.

    Only the leading integer is read, so "12abc" gives 12. Input with no
    leading digits is not a number and gives None.
    """
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def _message(status_code: int, text: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=Message(message=text).model_dump())


@router.get("/books", response_model=None)
def list_books(store: EntryStore = Depends(get_store)) -> Any:
    """Return every entry in the catalog."""
    try:
        entries = store.list_entries()
    except StoreError:
        logger.exception("Error fetching books")
        return _message(500, "Error fetching books")
    return [entry.to_dict() for entry in entries]


@router.post("/books", response_model=None)
def create_book(
    payload: dict[str, Any] = Body(...),
    store: EntryStore = Depends(get_store),
) -> Any:
    """Store a new entry and return it with its id.

    Fields are handed to the store as posted: nothing checks that title or
    author are present or that the numbers are numbers. The client-side
    submission flow is what keeps empty entries out.
    """
    try:
        entry = store.create(
            title=payload.get("title"),
            author=payload.get("author"),
            first_publish_year=payload.get("first_publish_year"),
            edition_count=payload.get("edition_count"),
        )
    except StoreError:
        logger.exception("Error creating book")
        return _message(500, "Error creating book")
    logger.info("Created book %d", entry.id)
    return entry.to_dict()


@router.delete(
    "/books/{book_id}",
    response_model=Message,
    responses={404: {"model": Message}, 500: {"model": Message}},
)
def delete_book(book_id: str, store: EntryStore = Depends(get_store)) -> Any:
    """Delete an entry after checking that it exists."""
    entry_id = parse_entry_id(book_id)
    if entry_id is None:
        return _message(404, "Book not found")

    try:
        if store.find_by_id(entry_id) is None:
            return _message(404, "Book not found")
        store.delete_by_id(entry_id)
    except EntryNotFoundError:
        # Removed by another request between the lookup and the delete.
        return _message(404, "Book not found")
    except StoreError:
        logger.exception("Error deleting book %s", entry_id)
        return _message(500, "Error deleting book")

    logger.info("Deleted book %d", entry_id)
    return Message(message="Book deleted")
