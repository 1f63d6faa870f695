"""Orchestration of a complete analysis run over a corpus snapshot."""

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from loguru import logger

from blindfinder.config import settings
from blindfinder.domain.analysis import AnalysisResults, ContentDepthAnalysis
from blindfinder.domain.document import Document
from blindfinder.errors import DocumentReadError
from blindfinder.link_index.base import LinkIndex, TextReader

from .concepts import ConceptExtractor, ConceptRelationMapper
from .connection_extractor import ConnectionExtractor
from .connectivity import detect_isolated_notes, detect_weak_connections
from .content_analyzer import ContentAnalyzer
from .graph_builder import LinkGraphBuilder
from .strength import StrengthScorer


class AnalysisOrchestrator:
    """Runs every analysis stage over one corpus and assembles the results."""

    def __init__(
        self,
        *,
        link_index: LinkIndex,
        read_text: TextReader,
        graph_builder: LinkGraphBuilder | None = None,
        strength_scorer: StrengthScorer | None = None,
        content_analyzer: ContentAnalyzer | None = None,
        concept_extractor: ConceptExtractor | None = None,
        relation_mapper: ConceptRelationMapper | None = None,
        weak_connection_threshold: int | None = None,
        max_workers: int | None = None,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize the orchestrator with its collaborators.

        Args:
            link_index: Link index providing outgoing links and resolved links
            read_text: Callable returning a document's raw text, may raise per document
            graph_builder: Builder for the link graph and centrality
            strength_scorer: Weighted connection strength scorer
            content_analyzer: Per-document content depth analyzer
            concept_extractor: Corpus concept extractor
            relation_mapper: Concept co-occurrence mapper
            weak_connection_threshold: Direct connection count below which a note is weak
            max_workers: Worker threads for reading and analyzing documents
            clock: Source of the run timestamp (seconds since epoch)
        """
        self.link_index = link_index
        self.read_text = read_text
        self.graph_builder = graph_builder or LinkGraphBuilder()
        self.strength_scorer = strength_scorer or StrengthScorer()
        self.content_analyzer = content_analyzer or ContentAnalyzer()
        self.concept_extractor = concept_extractor or ConceptExtractor()
        self.relation_mapper = relation_mapper or ConceptRelationMapper()
        self.weak_connection_threshold = (
            settings.weak_connection_threshold
            if weak_connection_threshold is None
            else weak_connection_threshold
        )
        self.max_workers = max_workers or settings.max_workers
        self.clock = clock

    def run(self, documents: list[Document]) -> AnalysisResults:
        """Analyze a corpus snapshot.

        Graph metrics are computed for every document. Documents whose text
        cannot be read or analyzed are reported in `failed_documents` and left
        out of the content metrics; the run itself always completes.

        Args:
            documents: All documents of the corpus

        Returns:
            AnalysisResults snapshot of the run
        """
        now = self.clock()
        documents = sorted(documents, key=lambda d: d.path)
        logger.info(f"Analyzing {len(documents)} documents")

        connections = ConnectionExtractor(self.link_index).extract_all(documents)
        centrality = self.graph_builder.calculate_centrality(connections)
        strength = self.strength_scorer.calculate_strength(connections, now)

        failed_documents: dict[str, str] = {}
        texts = self._read_documents(documents, failed_documents)
        depth_analysis = self._analyze_documents(texts, failed_documents)

        corpus = " ".join(texts.values())
        concepts = self.concept_extractor.extract(corpus)

        def read_cached(document: Document) -> str:
            if document.path not in texts:
                raise DocumentReadError(document.path, failed_documents.get(document.path, "unread"))
            return texts[document.path]

        relations = self.relation_mapper.map_relations(concepts, connections, read_cached)

        results = AnalysisResults(
            analyzed_at=now,
            connections=connections,
            centrality=centrality,
            strength=strength,
            depth_analysis=depth_analysis,
            concepts=concepts,
            concept_relations={term: sorted(related) for term, related in relations.items()},
            weak_connections=detect_weak_connections(connections, self.weak_connection_threshold),
            isolated_notes=detect_isolated_notes(connections),
            failed_documents=dict(sorted(failed_documents.items())),
        )

        logger.info("Analysis complete:")
        logger.info(f"  - Documents: {len(documents)}")
        logger.info(f"  - Graph nodes: {len(centrality)}")
        logger.info(f"  - Weak connections: {len(results.weak_connections)}")
        logger.info(f"  - Isolated notes: {len(results.isolated_notes)}")
        logger.info(f"  - Concepts: {len(concepts)}")
        if failed_documents:
            logger.warning(f"  - Failed documents: {len(failed_documents)}")

        return results

    def _read_documents(
        self, documents: list[Document], failed_documents: dict[str, str]
    ) -> dict[str, str]:
        """Read all document texts concurrently, recording failures by path."""
        texts = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {doc.path: executor.submit(self.read_text, doc) for doc in documents}
            for path, future in futures.items():
                try:
                    texts[path] = future.result()
                except Exception as e:
                    logger.warning(f"Failed to read {path}: {e}")
                    failed_documents[path] = str(e)
        return texts

    def _analyze_documents(
        self, texts: dict[str, str], failed_documents: dict[str, str]
    ) -> dict[str, ContentDepthAnalysis]:
        """Analyze content depth of every read text concurrently."""
        depth_analysis = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                path: executor.submit(self.content_analyzer.analyze, text)
                for path, text in texts.items()
            }
            for path, future in futures.items():
                try:
                    depth_analysis[path] = future.result()
                except Exception as e:
                    logger.warning(f"Failed to analyze {path}: {e}")
                    failed_documents[path] = str(e)
        return depth_analysis


def run_analysis(
    documents: list[Document],
    link_index: LinkIndex,
    read_text: TextReader,
    **kwargs,
) -> AnalysisResults:
    """Run a complete analysis with default components.

    Args:
        documents: All documents of the corpus
        link_index: Link index providing outgoing links and resolved links
        read_text: Callable returning a document's raw text
        **kwargs: Further AnalysisOrchestrator options

    Returns:
        AnalysisResults snapshot of the run
    """
    orchestrator = AnalysisOrchestrator(link_index=link_index, read_text=read_text, **kwargs)
    return orchestrator.run(documents)
