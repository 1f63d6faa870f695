"""Filesystem-backed document store and link index over a folder of markdown notes."""

import re
from pathlib import Path

from loguru import logger

from blindfinder.domain.document import Document
from blindfinder.errors import DocumentReadError

from .base import DocumentStore, LinkIndex
from .resolver import ReferenceResolver

# [[target]] or [[target|alias]], but not ![[embeds]]
WIKILINK_PATTERN = re.compile(r"(?<!!)\[\[([^\]|]+)(?:\|[^\]]*)?\]\]")


def extract_wikilinks(content: str) -> list[str]:
    """Extract wikilink targets from markdown content.

    Extracts links in the form of [[link name]] or [[link name|display text]].
    Embeds (![[...]]) are not links.

    Args:
        content: Markdown content to extract wikilinks from

    Returns:
        List of wikilink targets in order of appearance
    """
    return [target.strip() for target in WIKILINK_PATTERN.findall(content)]


class MarkdownVault(DocumentStore, LinkIndex):
    """A folder of markdown notes acting as document store and link index.

    Document identifiers are POSIX paths relative to the vault folder.
    """

    def __init__(self, folder: Path):
        self.folder = Path(folder)
        self._files = self._get_all_markdown_files(self.folder)
        self._resolver = ReferenceResolver(self._get_path_mapping(self._files, self.folder))
        self._links: dict[str, list[str]] = {}

    def list_documents(self) -> list[Document]:
        """Get every markdown note in the vault, sorted by path."""
        return [
            Document(path=self._relative_path(file), last_modified=file.stat().st_mtime)
            for file in self._files
        ]

    def read_text(self, document: Document) -> str:
        """Read a note's raw text.

        Raises:
            DocumentReadError: If the file cannot be read or decoded
        """
        file = self.folder / document.path
        try:
            with open(file, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(document.path, str(e)) from e

    def get_outgoing_links(self, document: Document) -> list[str]:
        """Get the note's wikilink targets resolved to vault paths, in link order."""
        if document.path not in self._links:
            self._links[document.path] = self._extract_links(document)
        return self._links[document.path]

    def get_resolved_link_table(self) -> dict[str, dict[str, int]]:
        """Get source path -> {target path: link count} for links to existing notes."""
        known_paths = {self._relative_path(file) for file in self._files}
        table = {}
        for document in self.list_documents():
            targets: dict[str, int] = {}
            for target in self.get_outgoing_links(document):
                if target in known_paths:
                    targets[target] = targets.get(target, 0) + 1
            table[document.path] = targets
        return table

    def _extract_links(self, document: Document) -> list[str]:
        try:
            content = self.read_text(document)
        except DocumentReadError as e:
            logger.warning(f"No links for {document.path}: {e.reason}")
            return []
        return self._resolver.resolve_references(extract_wikilinks(content))

    def _relative_path(self, file: Path) -> str:
        return file.relative_to(self.folder).as_posix()

    @staticmethod
    def _get_all_markdown_files(folder: Path) -> list[Path]:
        """Get all markdown notes, excluding excalidraw drawings."""
        all_files = sorted(folder.rglob("*.md"))
        return [f for f in all_files if not f.name.endswith(".excalidraw.md")]

    @staticmethod
    def _get_path_mapping(files: list[Path], folder: Path) -> dict[str, str]:
        """Create mapping from note names/paths to vault-relative paths.

        Args:
            files: List of markdown files
            folder: Vault folder

        Returns:
            Dictionary mapping stems, file names and relative paths to relative paths
        """
        mapping = {}
        for file in files:
            relative_path = file.relative_to(folder).as_posix()
            mapping.setdefault(file.stem, relative_path)
            mapping.setdefault(file.name, relative_path)
            mapping[relative_path] = relative_path
        return mapping
