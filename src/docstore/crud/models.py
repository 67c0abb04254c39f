"""Value types for stored documents and search criteria"""

from datetime import datetime, timezone
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from docstore.crud.filters import build_predicate


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return value with naive datetimes interpreted as UTC; None passes through."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Identifier + display name pair embedded in a Document"""
    model_config = ConfigDict(frozen=True)
    id: str
    name: str = ""


class Document(BaseModel):
    """A stored record. id and created are filled in by the store on first save."""
    model_config = ConfigDict(validate_assignment=True)
    id: Optional[str] = None
    title: str
    content: str
    author: Author
    created: Optional[datetime] = Field(default=None, description="Set once on first save, never overwritten")

    @field_validator("created")
    @classmethod
    def created_in_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class SearchRequest(BaseModel):
    """Optional filter criteria combined with logical AND.

    None means "no constraint" for a field; an empty list matches nothing.
    created_from / created_to are exclusive bounds.
    """
    model_config = ConfigDict(frozen=True)
    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = None
    created_to:        Optional[datetime] = None

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_in_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    def to_predicate(self) -> Callable[[Document], bool]:
        """Return a single predicate matching documents that pass every active filter."""
        return build_predicate(self)
