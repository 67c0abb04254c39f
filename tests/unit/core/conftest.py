"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_SEED = """\
- id: doc-1
  title: Hello World
  content: abc
  author: {id: a1, name: Ada}
  created: 2026-01-01T10:00:00Z
- title: Quarterly report
  content: revenue grew
  author: {id: a2, name: Bob}
"""

SAMPLE_SEED_MAPPING = """\
documents:
  - title: Only one
    content: body
    author: {id: a1}
"""


@pytest.fixture(name="seed_file")
def seed_file_fixture(tmp_path):
    path = tmp_path / "seed.yaml"
    path.write_text(SAMPLE_SEED)
    return path


@pytest.fixture(name="seed_mapping_file")
def seed_mapping_file_fixture(tmp_path):
    path = tmp_path / "seed_mapping.yaml"
    path.write_text(SAMPLE_SEED_MAPPING)
    return path
