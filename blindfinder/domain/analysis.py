"""Analysis result domain models."""

from collections import Counter

from pydantic import BaseModel, ConfigDict, PositiveInt

from blindfinder.domain.document import NoteConnection


class ContentDepthAnalysis(BaseModel):
    """Structural and readability metrics for one document's text.

    Attributes:
        word_count: Number of whitespace-delimited tokens
        citation_count: Number of [[...]] references
        heading_levels: Deepest Markdown heading level, 0 without headings
        code_block_count: Number of fenced code blocks
        formula_count: Number of $$-delimited formula blocks
        key_phrases: Topical terms of the document
        readability_score: Flesch reading ease estimate, may be negative
        unique_words_count: Distinct case-folded alphanumeric tokens
        overall_score: Weighted composite of the seven raw metrics
    """

    model_config = ConfigDict(frozen=True)

    word_count: int = 0
    citation_count: int = 0
    heading_levels: int = 0
    code_block_count: int = 0
    formula_count: int = 0
    key_phrases: list[str] = []
    readability_score: float = 0.0
    unique_words_count: int = 0
    overall_score: float = 0.0


class Concept(BaseModel):
    """A frequent corpus term."""

    model_config = ConfigDict(frozen=True)

    term: str
    frequency: PositiveInt


class GraphNode(BaseModel):
    id: str
    group: int  # 1 = document, 2 = dangling reference
    strength: float
    connections: int


class GraphLink(BaseModel):
    source: str
    target: str
    value: int


class GraphData(BaseModel):
    """Node/link payload for graph renderers."""

    nodes: list[GraphNode] = []
    links: list[GraphLink] = []


class AnalysisResults(BaseModel):
    """Snapshot of one complete analysis run.

    Attributes:
        analyzed_at: The single `now` used for recency scoring (seconds since epoch)
        connections: One connection per document, sorted by path
        centrality: Node identifier to neighbor count, dangling targets included
        strength: Document path to weighted connection strength
        depth_analysis: Document path to content metrics, failed documents omitted
        concepts: Top corpus terms by descending frequency
        concept_relations: Concept term to sorted co-occurring terms
        weak_connections: Paths with fewer direct connections than the threshold
        isolated_notes: Paths with neither links nor backlinks
        failed_documents: Path to error message for documents whose text failed
    """

    model_config = ConfigDict(frozen=True)

    analyzed_at: float
    connections: list[NoteConnection] = []
    centrality: dict[str, int] = {}
    strength: dict[str, float] = {}
    depth_analysis: dict[str, ContentDepthAnalysis] = {}
    concepts: list[Concept] = []
    concept_relations: dict[str, list[str]] = {}
    weak_connections: list[str] = []
    isolated_notes: list[str] = []
    failed_documents: dict[str, str] = {}

    @property
    def is_partial(self) -> bool:
        return bool(self.failed_documents)

    def top_connections(self, n: int = 5) -> list[tuple[str, float]]:
        """Documents with the highest connection strength."""
        return sorted(self.strength.items(), key=lambda item: item[1], reverse=True)[:n]

    def top_central_notes(self, n: int = 5) -> list[tuple[str, int]]:
        """Nodes with the most distinct neighbors."""
        return sorted(self.centrality.items(), key=lambda item: item[1], reverse=True)[:n]

    def to_graph_data(self) -> GraphData:
        """Build the node/link payload of the link graph.

        Every centrality node becomes a graph node; nodes without a document of
        their own are dangling references with zero strength. Repeated links
        between the same pair collapse into one link whose value is the count.
        """
        documents = {conn.path for conn in self.connections}
        nodes = [
            GraphNode(
                id=node_id,
                group=1 if node_id in documents else 2,
                strength=self.strength.get(node_id, 0.0),
                connections=degree,
            )
            for node_id, degree in self.centrality.items()
        ]

        link_counts: Counter[tuple[str, str]] = Counter()
        for conn in self.connections:
            for target in conn.links:
                link_counts[(conn.path, target)] += 1

        links = [
            GraphLink(source=source, target=target, value=count)
            for (source, target), count in link_counts.items()
        ]
        return GraphData(nodes=nodes, links=links)
