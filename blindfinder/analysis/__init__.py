"""Analysis engine: connection graph metrics and text analytics over a note corpus."""

from blindfinder.analysis.concepts import ConceptExtractor, ConceptRelationMapper
from blindfinder.analysis.connection_extractor import ConnectionExtractor
from blindfinder.analysis.content_analyzer import ContentAnalyzer
from blindfinder.analysis.graph_builder import LinkGraphBuilder
from blindfinder.analysis.orchestrator import AnalysisOrchestrator, run_analysis
from blindfinder.analysis.strength import StrengthScorer

__all__ = [
    "AnalysisOrchestrator",
    "ConceptExtractor",
    "ConceptRelationMapper",
    "ConnectionExtractor",
    "ContentAnalyzer",
    "LinkGraphBuilder",
    "StrengthScorer",
    "run_analysis",
]
