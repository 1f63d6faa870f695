"""Building the undirected link graph and degree centrality."""

from blindfinder.domain.document import NoteConnection


class LinkGraphBuilder:
    """Builds the undirected link graph from note connections."""

    def build_graph(self, connections: list[NoteConnection]) -> dict[str, set[str]]:
        """Build an adjacency set for every node of the link graph.

        Every outgoing link adds an edge in both directions. Link targets become
        nodes even when they have no connection record of their own.

        Args:
            connections: Connections of all documents in the run

        Returns:
            Dictionary mapping node identifiers to their neighbor sets
        """
        graph: dict[str, set[str]] = {}

        for conn in connections:
            graph.setdefault(conn.path, set())
            for target in conn.links:
                graph[conn.path].add(target)
                graph.setdefault(target, set()).add(conn.path)

        return graph

    def calculate_centrality(self, connections: list[NoteConnection]) -> dict[str, int]:
        """Calculate degree centrality (number of distinct neighbors) per node.

        Args:
            connections: Connections of all documents in the run

        Returns:
            Dictionary mapping node identifiers to neighbor counts
        """
        graph = self.build_graph(connections)
        return {node: len(neighbors) for node, neighbors in graph.items()}
