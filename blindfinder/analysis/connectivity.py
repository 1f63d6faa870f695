"""Direct-connection reports: weak and isolated notes, basic strength."""

from blindfinder.domain.document import ConnectionSummary, NoteConnection


def detect_weak_connections(connections: list[NoteConnection], threshold: int) -> list[str]:
    """Get paths whose links plus backlinks fall below the threshold."""
    return [
        conn.path for conn in connections if len(conn.links) + len(conn.backlinks) < threshold
    ]


def detect_isolated_notes(connections: list[NoteConnection]) -> list[str]:
    """Get paths with neither outgoing links nor backlinks."""
    return [conn.path for conn in connections if not conn.links and not conn.backlinks]


def calculate_connection_strength(connections: list[NoteConnection]) -> dict[str, int]:
    """Unweighted strength: number of links plus number of backlinks."""
    return {conn.path: len(conn.links) + len(conn.backlinks) for conn in connections}


def summarize_connection(connection: NoteConnection) -> ConnectionSummary:
    outgoing = len(connection.links)
    incoming = len(connection.backlinks)
    return ConnectionSummary(
        path=connection.path,
        outgoing=outgoing,
        incoming=incoming,
        total=outgoing + incoming,
    )
