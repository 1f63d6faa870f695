"""Weighted connection strength scoring."""

from blindfinder.config import settings
from blindfinder.domain.document import NoteConnection

SECONDS_PER_DAY = 86_400


class StrengthScorer:
    """Scores documents by direct links, backlinks, edit recency and backlink depth.

    strength = links * link_weight
             + backlinks * backlink_weight
             + recency bonus
             + |direct backlinks| + indirect_backlink_weight * |indirect backlinks|
    """

    def __init__(
        self,
        *,
        link_weight: float | None = None,
        backlink_weight: float | None = None,
        indirect_backlink_weight: float | None = None,
        recency_window_days: float | None = None,
        recency_divisor: float | None = None,
    ):
        self.link_weight = settings.link_weight if link_weight is None else link_weight
        self.backlink_weight = settings.backlink_weight if backlink_weight is None else backlink_weight
        self.indirect_backlink_weight = (
            settings.indirect_backlink_weight
            if indirect_backlink_weight is None
            else indirect_backlink_weight
        )
        self.recency_window_days = (
            settings.recency_window_days if recency_window_days is None else recency_window_days
        )
        self.recency_divisor = settings.recency_divisor if recency_divisor is None else recency_divisor

    def calculate_strength(self, connections: list[NoteConnection], now: float) -> dict[str, float]:
        """Score every connection against the same point in time.

        Args:
            connections: Connections of all documents in the run
            now: Time of the run (seconds since epoch), shared by all documents

        Returns:
            Dictionary mapping document paths to non-negative strength scores
        """
        backlinks_by_path: dict[str, set[str]] = {}
        for conn in connections:
            backlinks_by_path.setdefault(conn.path, set()).update(conn.backlinks)

        strength_map = {}
        for conn in connections:
            strength = len(conn.links) * self.link_weight
            strength += len(conn.backlinks) * self.backlink_weight
            strength += self.recency_bonus(conn.last_modified, now)
            strength += self.depth_score(conn, backlinks_by_path)
            strength_map[conn.path] = strength

        return strength_map

    def recency_bonus(self, last_modified: float, now: float) -> float:
        """Bonus for recently edited documents, decaying linearly to 0 over the window."""
        # Clock skew can put modification times slightly in the future
        days_since = max(0.0, (now - last_modified) / SECONDS_PER_DAY)
        if days_since > self.recency_window_days:
            return 0.0
        return (self.recency_window_days - days_since) / self.recency_divisor

    def depth_score(
        self, connection: NoteConnection, backlinks_by_path: dict[str, set[str]]
    ) -> float:
        """Score two-hop backlink reach.

        Indirect backlinks are the backlinks of the document's direct backlinks,
        excluding the direct backlinks themselves. A note in a mutual link pair
        counts as its own indirect backlink.

        Args:
            connection: The connection being scored
            backlinks_by_path: Backlink sets of every document in the run

        Returns:
            |direct backlinks| + indirect_backlink_weight * |indirect backlinks|
        """
        direct_backlinks = set(connection.backlinks)

        indirect_backlinks: set[str] = set()
        for source in direct_backlinks:
            indirect_backlinks.update(backlinks_by_path.get(source, ()))
        indirect_backlinks -= direct_backlinks

        return len(direct_backlinks) + self.indirect_backlink_weight * len(indirect_backlinks)
