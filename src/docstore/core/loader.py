"""Seed file loading: YAML/JSON document lists into a DocumentRepo"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docstore.crud.models import Document
from docstore.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)


def _entries(data: Any, path: Path) -> list:
    """Return the document mappings from a parsed seed file (a list, or a mapping with 'documents')."""
    if isinstance(data, dict):
        if "documents" not in data:
            raise ValueError(f"Invalid seed file {path}: mapping has no 'documents' key")
        data = data["documents"]
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Invalid seed file {path}: expected a list of documents, got {type(data).__name__}")
    return data


def load_documents(path: Path) -> list[Document]:
    """Parse path into Documents without saving them. Raises ValueError on bad YAML or entries."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid seed file {path}: {e}") from e

    docs = []
    for i, entry in enumerate(_entries(data, path)):
        try:
            docs.append(Document.model_validate(entry))
        except ValidationError as e:
            raise ValueError(f"Invalid document #{i} in {path}: {e}") from e
    return docs


def load_into(repo: DocumentRepo, path: Path) -> list[Document]:
    """Save every document in path to repo. Returns the saved documents in file order."""
    saved = [repo.save(doc) for doc in load_documents(path)]
    logger.info(f"Loaded {len(saved)} document(s) from {path}")
    return saved
