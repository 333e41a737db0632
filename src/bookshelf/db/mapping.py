# ABOUTME: CatalogEntry dataclass and conversions to/from SQLite rows and JSON dicts.
# ABOUTME: Absent optional fields are omitted from dicts rather than emitted as null.

from dataclasses import dataclass
from typing import Any

_OPTIONAL_FIELDS = ("first_publish_year", "edition_count")


@dataclass(frozen=True)
class CatalogEntry:
    """A persisted book record.

    title and author are required by the submission flow, but the service
    stores whatever it is sent, so records written by other clients may carry
    any value here.
    """

    id: int
    title: str
    author: str
    first_publish_year: int | None = None
    edition_count: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON, leaving out optional fields that are absent."""
        data: dict[str, Any] = {"id": self.id, "title": self.title, "author": self.author}
        for name in _OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CatalogEntry":
        """Build an entry from a JSON object returned by the service."""
        return cls(
            id=data["id"],
            title=data.get("title"),
            author=data.get("author"),
            first_publish_year=data.get("first_publish_year"),
            edition_count=data.get("edition_count"),
        )


def row_to_entry(row: Any) -> CatalogEntry:
    """Convert a database row (dict-like) to a CatalogEntry."""
    return CatalogEntry(
        id=row["id"],
        title=row["title"],
        author=row["author"],
        first_publish_year=row["first_publish_year"],
        edition_count=row["edition_count"],
    )
