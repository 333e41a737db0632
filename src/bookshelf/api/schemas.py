# ABOUTME: Pydantic models for catalog service responses.
# ABOUTME: Entries are serialized from CatalogEntry.to_dict so absent fields stay absent.

from pydantic import BaseModel


class Message(BaseModel):
    """Status message body returned by delete and by every error response."""

    message: str


class Health(BaseModel):
    status: str = "ok"
