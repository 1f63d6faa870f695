import tempfile
from pathlib import Path
from typing import Generator

import pytest

from blindfinder.domain.document import Document, NoteConnection
from tests.fakes import NOW, STALE, FakeLinkIndex, make_connection


@pytest.fixture
def now() -> float:
    return NOW


@pytest.fixture
def cycle_connections() -> list[NoteConnection]:
    """Three notes linking A -> B -> C -> A, all edited long ago."""
    return [
        make_connection("A", links=["B"], backlinks=["C"]),
        make_connection("B", links=["C"], backlinks=["A"]),
        make_connection("C", links=["A"], backlinks=["B"]),
    ]


@pytest.fixture
def cycle_documents() -> list[Document]:
    return [Document(path=path, last_modified=STALE) for path in ("A", "B", "C")]


@pytest.fixture
def cycle_link_index() -> FakeLinkIndex:
    return FakeLinkIndex({"A": ["B"], "B": ["C"], "C": ["A"]})


@pytest.fixture
def temp_notes_base() -> Generator[Path, None, None]:
    """Create a temporary notes directory structure
    used when testing vault parsing and end-to-end analysis.
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def notes_directory(temp_notes_base: Path) -> Path:
    """Create notes subdirectory."""
    notes_dir = temp_notes_base / "notes"
    notes_dir.mkdir()
    return notes_dir
