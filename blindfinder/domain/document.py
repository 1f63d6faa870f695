"""Document and connection domain models."""

from pydantic import BaseModel, ConfigDict


class Document(BaseModel):
    """Handle to one note in the corpus.

    Attributes:
        path: Unique identifier of the note (vault-relative path)
        last_modified: Modification timestamp (seconds since epoch)
    """

    model_config = ConfigDict(frozen=True)

    path: str
    last_modified: float = 0.0


class NoteConnection(BaseModel):
    """A document's outgoing links and the documents linking back to it.

    Attributes:
        document: The document the connection describes
        links: Outgoing link targets in declaration order, duplicates kept
        backlinks: Source identifiers whose resolved links include this document
        last_modified: Modification timestamp (seconds since epoch)
    """

    model_config = ConfigDict(frozen=True)

    document: Document
    links: tuple[str, ...] = ()
    backlinks: tuple[str, ...] = ()
    last_modified: float = 0.0

    @property
    def path(self) -> str:
        return self.document.path


class ConnectionSummary(BaseModel):
    """Link counts for a single document."""

    path: str
    outgoing: int
    incoming: int
    total: int
