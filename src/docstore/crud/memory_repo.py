"""In-memory DocumentRepo backed by a single dict keyed by document id"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

from docstore.crud.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())


@dataclass
class DocumentStore(DocumentRepo):
    """Upsert, point lookup and filtered search over documents held in memory.

    Not thread-safe. clock and id_factory are injectable so tests can pin
    timestamps and ids.
    """
    clock: Callable[[], datetime] = utcnow
    id_factory: Callable[[], str] = new_id
    _docs: dict[str, Document] = field(default_factory=dict, init=False, repr=False)

    def save(self, document: Document) -> Document:
        """Insert or replace document, mutating it in place.

        A missing/empty id gets a fresh id and created = now. A pre-set id keeps
        the created value of its first save; if the id was never stored and
        created is absent, created is stamped now.
        """
        if not document.id:
            document.id = self.id_factory()
            document.created = self.clock()
            logger.debug(f"Assigned new id {document.id}")
        else:
            existing = self._docs.get(document.id)
            if existing is not None:
                document.created = existing.created
            elif document.created is None:
                document.created = self.clock()

        action = "Replaced" if document.id in self._docs else "Inserted"
        self._docs[document.id] = document
        logger.debug(f"{action} document {document.id}")
        return document

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def search(self, request: SearchRequest) -> list[Document]:
        """Return documents matching every active filter, in insertion order."""
        predicate = request.to_predicate()
        results = [doc for doc in self._docs.values() if predicate(doc)]
        logger.debug(f"Search matched {len(results)} of {len(self._docs)} document(s)")
        return results

    def all(self) -> list[Document]:
        """Return every stored document in insertion order."""
        return list(self._docs.values())

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs
