"""Search predicates: one filter per SearchRequest field, folded with logical AND"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from docstore.crud.models import Document, SearchRequest


Predicate = Callable[["Document"], bool]


def _accept(doc: Document) -> bool:
    return True


def title_filter(prefixes: Optional[list[str]]) -> Predicate:
    """Pass when prefixes is None or the title starts with any of them (case-sensitive)."""
    if prefixes is None:
        return _accept
    return lambda doc: any(doc.title.startswith(p) for p in prefixes)


def content_filter(substrings: Optional[list[str]]) -> Predicate:
    """Pass when substrings is None or the content contains any of them (case-sensitive)."""
    if substrings is None:
        return _accept
    return lambda doc: any(s in doc.content for s in substrings)


def author_filter(author_ids: Optional[list[str]]) -> Predicate:
    """Pass when author_ids is None or the document author's id is one of them."""
    if author_ids is None:
        return _accept
    return lambda doc: any(doc.author.id == a for a in author_ids)


def created_after(bound: Optional[datetime]) -> Predicate:
    """Pass when bound is None or the document was created strictly after it."""
    if bound is None:
        return _accept
    return lambda doc: doc.created is not None and doc.created > bound


def created_before(bound: Optional[datetime]) -> Predicate:
    """Pass when bound is None or the document was created strictly before it."""
    if bound is None:
        return _accept
    return lambda doc: doc.created is not None and doc.created < bound


def build_predicate(request: SearchRequest) -> Predicate:
    """Conjunction of all field filters for request."""
    filters = [
        title_filter(request.title_prefixes),
        content_filter(request.contains_contents),
        author_filter(request.author_ids),
        created_after(request.created_from),
        created_before(request.created_to),
    ]
    return lambda doc: all(f(doc) for f in filters)
