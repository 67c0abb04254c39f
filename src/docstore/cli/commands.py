"""CLI command implementations"""

from datetime import datetime
from pathlib import Path
from typing import Annotated, List, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.export import dumps
from docstore.core.loader import load_into
from docstore.crud.memory_repo import DocumentStore
from docstore.crud.models import SearchRequest
from docstore.util.logs import setup_logging


DATETIME_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S%z"]

SeedOption = Annotated[Optional[str], typer.Option("--seed", "-s", help="YAML/JSON seed file (or set DOCSTORE_SEED_FILE)")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level, settings.log_format)
    return settings


def _store(seed: Optional[str]) -> DocumentStore:
    """Build a fresh store loaded from the seed file given on the command line or in config."""
    settings = _settings(overrides={"seed_file": seed})
    if not settings.seed_file:
        _fail("No seed file given. Pass --seed or set seed_file in config.yaml.")
    store = DocumentStore()
    try:
        load_into(store, Path(settings.seed_file))
    except ValueError as e:
        _fail(str(e))
    except OSError as e:
        _fail(f"Cannot read seed file {settings.seed_file}", e)
    return store


def list_cmd(seed: SeedOption = None):
    """Print every document in the seed file as JSON."""
    store = _store(seed)
    typer.echo(dumps(store.all()))


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    seed: SeedOption = None,
    ):
    """Print a single document by id."""
    store = _store(seed)
    doc = store.find_by_id(doc_id)
    if doc is None:
        _fail(f"No document with id '{doc_id}'")
    typer.echo(dumps([doc]))


def search_cmd(
    seed: SeedOption = None,
    title_prefix: Annotated[Optional[List[str]], typer.Option("--title-prefix", help="Title prefix; repeatable, any may match")] = None,
    contains: Annotated[Optional[List[str]], typer.Option("--contains", help="Content substring; repeatable, any may match")] = None,
    author: Annotated[Optional[List[str]], typer.Option("--author", help="Author id; repeatable, any may match")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", formats=DATETIME_FORMATS, help="Exclusive lower bound (UTC if no offset)")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", formats=DATETIME_FORMATS, help="Exclusive upper bound (UTC if no offset)")] = None,
    ):
    """Print documents matching every given filter as JSON. Omitted filters match everything."""
    store = _store(seed)
    request = SearchRequest(
        title_prefixes=list(title_prefix) if title_prefix else None,
        contains_contents=list(contains) if contains else None,
        author_ids=list(author) if author else None,
        created_from=created_from,
        created_to=created_to,
    )
    typer.echo(dumps(store.search(request)))
