"""Reference resolution for converting wikilink targets to document paths."""

from pathlib import PurePosixPath

from loguru import logger


class ReferenceResolver:
    """Handles resolution of wikilink targets to vault-relative document paths."""

    def __init__(self, path_mapping: dict[str, str]):
        """Initialize resolver with a path mapping.

        Args:
            path_mapping: Dictionary mapping note names/stems/paths to document paths
        """
        self.path_mapping = path_mapping

    def resolve_references(self, links: list[str]) -> list[str]:
        """Convert wikilink targets to document paths.

        Unresolved targets are kept verbatim so they still show up as
        dangling references in the link graph.

        Args:
            links: List of note names or paths from wikilinks

        Returns:
            List of resolved paths (or raw targets) in link order
        """
        resolved = []
        for link in links:
            # Drop heading/block anchors: [[Note#Section]]
            target = link.split("#", 1)[0].strip()
            if not target:
                continue
            resolved.append(self.resolve(target) or target)
        return resolved

    def resolve(self, link: str) -> str | None:
        """Resolve a single wikilink target to a document path.

        Args:
            link: Note name or path from wikilink

        Returns:
            Resolved document path or None if not found
        """
        if link in self.path_mapping:
            return self.path_mapping[link]

        md_link = f"{link}.md"
        if md_link in self.path_mapping:
            return self.path_mapping[md_link]

        for name, path in self.path_mapping.items():
            if PurePosixPath(name).stem == link:
                return path

        logger.warning(f"Could not resolve wikilink: {link}")
        return None
