"""Extraction of per-document connections from a link index."""

from collections.abc import Iterable, Mapping

from loguru import logger

from blindfinder.domain.document import Document, NoteConnection
from blindfinder.errors import LinkIndexError
from blindfinder.link_index.base import LinkIndex


def normalize_resolved_link_table(table: object) -> dict[str, tuple[str, ...]]:
    """Validate a resolved-link table and convert it to source -> targets.

    Accepts target collections given as a mapping of target to link count or as
    any iterable of target identifiers. Source order and first-seen target
    order are preserved.

    Args:
        table: Resolved-link table as supplied by the link index

    Returns:
        Dictionary mapping each source identifier to its unique targets

    Raises:
        LinkIndexError: If the table or any of its entries has an unusable shape
    """
    if table is None:
        return {}
    if not isinstance(table, Mapping):
        raise LinkIndexError(f"Resolved link table must be a mapping, got {type(table).__name__}")

    normalized = {}
    for source, targets in table.items():
        if not isinstance(source, str):
            raise LinkIndexError(f"Resolved link source must be a string, got {source!r}")
        if targets is None:
            normalized[source] = ()
            continue
        if isinstance(targets, str) or not isinstance(targets, Iterable):
            raise LinkIndexError(
                f"Targets of {source} must be a mapping or a collection, got {type(targets).__name__}"
            )

        unique_targets = dict.fromkeys(targets)
        for target in unique_targets:
            if not isinstance(target, str):
                raise LinkIndexError(f"Link target of {source} must be a string, got {target!r}")
        normalized[source] = tuple(unique_targets)

    return normalized


def build_backlink_index(resolved_links: dict[str, tuple[str, ...]]) -> dict[str, list[str]]:
    """Invert source -> targets into target -> sources, in source enumeration order."""
    backlinks: dict[str, list[str]] = {}
    for source, targets in resolved_links.items():
        for target in targets:
            backlinks.setdefault(target, []).append(source)
    return backlinks


class ConnectionExtractor:
    """Builds NoteConnection records from a link index."""

    def __init__(self, link_index: LinkIndex):
        """Initialize the extractor and index backlinks once.

        Args:
            link_index: Link index providing outgoing links and the resolved-link table

        Raises:
            LinkIndexError: If the resolved-link table has an unusable shape
        """
        self.link_index = link_index
        resolved_links = normalize_resolved_link_table(link_index.get_resolved_link_table())
        self._backlinks = build_backlink_index(resolved_links)

    def extract(self, document: Document) -> NoteConnection:
        """Build the connection record of a single document.

        Args:
            document: The document to describe

        Returns:
            NoteConnection with links in declaration order and backlinks in
            source order; both empty when the index knows nothing about it
        """
        links = tuple(self.link_index.get_outgoing_links(document) or ())
        for link in links:
            if not isinstance(link, str):
                raise LinkIndexError(f"Outgoing link of {document.path} must be a string, got {link!r}")

        backlinks = tuple(self._backlinks.get(document.path, ()))
        logger.debug(f"{document.path}: {len(links)} links, {len(backlinks)} backlinks")

        return NoteConnection(
            document=document,
            links=links,
            backlinks=backlinks,
            last_modified=document.last_modified,
        )

    def extract_all(self, documents: list[Document]) -> list[NoteConnection]:
        """Build connection records for every document."""
        return [self.extract(document) for document in documents]
