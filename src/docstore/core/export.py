"""JSON rendering of stored documents"""

import json
from typing import Any, Iterable

from docstore.crud.models import Document


def to_record(doc: Document) -> dict[str, Any]:
    """JSON-compatible dict for doc; created is an ISO-8601 string or None."""
    return doc.model_dump(mode="json")


def dumps(docs: Iterable[Document]) -> str:
    return json.dumps([to_record(d) for d in docs], indent=2, ensure_ascii=False)
