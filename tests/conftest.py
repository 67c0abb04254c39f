"""Root test configuration: isolate tests from the developer's environment"""

import logging
import os

import pytest


_ENV_PREFIX = "DOCSTORE_"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove DOCSTORE_* variables so settings come only from what each test sets."""
    for name in list(os.environ):
        if name.startswith(_ENV_PREFIX):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging's basicConfig(force=True) so pytest's handlers survive."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
