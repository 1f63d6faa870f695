from typing import Mapping, Protocol, Sequence

from blindfinder.domain.document import Document


class LinkIndex(Protocol):
    def get_outgoing_links(self, document: Document) -> Sequence[str]:
        """Get the document's declared link targets in declaration order."""
        ...

    def get_resolved_link_table(self) -> Mapping[str, Mapping[str, int] | Sequence[str] | set[str]]:
        """Get the table of source path to the targets its links resolve to."""
        ...


class TextReader(Protocol):
    def __call__(self, document: Document) -> str: ...


class DocumentStore(Protocol):
    def list_documents(self) -> list[Document]:
        """Get every document in the corpus."""
        ...

    def read_text(self, document: Document) -> str:
        """Read a document's raw text. May fail per document."""
        ...
