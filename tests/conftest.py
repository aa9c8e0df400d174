"""
Pytest configuration and shared fixtures for the loader tests.
"""
import bz2
import contextlib
from pathlib import Path
from typing import Iterable, List, Sequence

import pytest

from dbpedia_loader.core.indexing import DocumentSink
from dbpedia_loader.preprocessing import LineSource
from dbpedia_loader.schema import DocumentUpdate


# ============================================================================
# In-memory collaborators
# ============================================================================

class InMemoryLineSource(LineSource):
    """Serves a fixed list of lines and records whether it was closed."""

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.opened = 0
        self.closed = 0

    @contextlib.contextmanager
    def open(self):
        self.opened += 1
        try:
            yield iter(self.lines)
        finally:
            self.closed += 1


class RecordingSink(DocumentSink):
    """Keeps a copy of every batch it receives."""

    def __init__(self, fail_with: Exception = None):
        self.batches: List[List[DocumentUpdate]] = []
        self.index_names: List[str] = []
        self.fail_with = fail_with

    def update_documents(self, index_name: str, documents: Sequence[DocumentUpdate]):
        if self.fail_with is not None:
            raise self.fail_with
        self.index_names.append(index_name)
        self.batches.append(list(documents))

    @property
    def documents(self) -> List[DocumentUpdate]:
        return [doc for batch in self.batches for doc in batch]


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def line_source():
    """Factory for in-memory line sources."""
    return InMemoryLineSource


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def failing_sink():
    return RecordingSink(fail_with=OSError("connection reset"))


@pytest.fixture
def abstract_line():
    """Build a short-abstract line as found in the DBpedia dumps."""
    def _line(name: str, text: str, host: str = "dbpedia.org") -> str:
        return (
            f"<http://{host}/resource/{name}> "
            f"<http://www.w3.org/2000/01/rdf-schema#comment> "
            f"\"{text}\"@en ."
        )
    return _line


@pytest.fixture
def sample_lines(abstract_line):
    return [
        "# started 2013-06-05T11:05:22Z",
        abstract_line("Anarchism", "Anarchism is a political philosophy."),
        abstract_line("Autism", "Autism is a disorder of neural development."),
        abstract_line("Albedo", "Albedo is the reflecting power of a surface."),
        "# completed 2013-06-05T11:58:05Z",
    ]


@pytest.fixture
def bz2_dump(tmp_path, sample_lines) -> Path:
    """A small bzip2-compressed dump written to disk."""
    path = tmp_path / "short_abstracts_en.ttl.bz2"
    path.write_bytes(bz2.compress(("\n".join(sample_lines) + "\n").encode("utf-8")))
    return path
