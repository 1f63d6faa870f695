"""Tests for complete analysis runs using fakes."""

import pytest

from blindfinder.analysis.content_analyzer import ContentAnalyzer
from blindfinder.analysis.orchestrator import AnalysisOrchestrator, run_analysis
from blindfinder.domain.analysis import ContentDepthAnalysis
from blindfinder.domain.document import Document
from tests.fakes import NOW, STALE, FakeLinkIndex, FakeTextReader


def fixed_clock() -> float:
    return NOW


CYCLE_TEXTS = {
    "A": "# Alpha\nAlpha links to beta. See [[B]].",
    "B": "# Beta\nBeta links to gamma. See [[C]].",
    "C": "# Gamma\nGamma closes the loop back to alpha. See [[A]].",
}


def test_empty_corpus() -> None:
    """Test that an empty corpus produces empty results without errors."""
    results = run_analysis([], FakeLinkIndex(), FakeTextReader({}), clock=fixed_clock)

    assert results.connections == []
    assert results.centrality == {}
    assert results.strength == {}
    assert results.depth_analysis == {}
    assert results.concepts == []
    assert results.concept_relations == {}
    assert results.weak_connections == []
    assert results.isolated_notes == []
    assert not results.is_partial


def test_three_cycle_end_to_end(
    cycle_documents: list[Document], cycle_link_index: FakeLinkIndex
) -> None:
    results = run_analysis(
        cycle_documents, cycle_link_index, FakeTextReader(CYCLE_TEXTS), clock=fixed_clock
    )

    assert results.analyzed_at == NOW
    assert results.centrality == {"A": 2, "B": 2, "C": 2}
    assert results.strength == pytest.approx({"A": 4.0, "B": 4.0, "C": 4.0})
    assert set(results.depth_analysis) == {"A", "B", "C"}
    assert results.depth_analysis["A"].citation_count == 1
    assert results.isolated_notes == []
    assert results.weak_connections == ["A", "B", "C"]


def test_concepts_and_relations_cover_corpus(
    cycle_documents: list[Document], cycle_link_index: FakeLinkIndex
) -> None:
    results = run_analysis(
        cycle_documents, cycle_link_index, FakeTextReader(CYCLE_TEXTS), clock=fixed_clock
    )

    terms = {c.term: c.frequency for c in results.concepts}
    assert terms["alpha"] == 3
    assert terms["see"] == 3
    assert "loop" in results.concept_relations["alpha"]
    assert "alpha" not in results.concept_relations["alpha"]
    assert results.concept_relations["alpha"] == sorted(results.concept_relations["alpha"])


def test_fresh_isolated_note_scores_recency_only() -> None:
    documents = [Document(path="new.md", last_modified=NOW)]

    results = run_analysis(
        documents, FakeLinkIndex(), FakeTextReader({"new.md": "Fresh."}), clock=fixed_clock
    )

    assert results.strength["new.md"] == pytest.approx(3.0)
    assert results.centrality["new.md"] == 0
    assert results.isolated_notes == ["new.md"]


def test_unreadable_document_does_not_abort_run(
    cycle_documents: list[Document], cycle_link_index: FakeLinkIndex
) -> None:
    """Test that a read failure only removes that document's content metrics."""
    reader = FakeTextReader(CYCLE_TEXTS, failing={"B"})

    results = run_analysis(cycle_documents, cycle_link_index, reader, clock=fixed_clock)

    assert results.is_partial
    assert set(results.failed_documents) == {"B"}
    assert set(results.depth_analysis) == {"A", "C"}
    assert results.centrality == {"A": 2, "B": 2, "C": 2}
    assert results.strength["B"] == pytest.approx(4.0)
    assert {c.term: c.frequency for c in results.concepts}["beta"] == 1


def test_analysis_failure_is_recorded_per_document(
    cycle_documents: list[Document], cycle_link_index: FakeLinkIndex
) -> None:
    class FlakyAnalyzer(ContentAnalyzer):
        def analyze(self, text: str) -> ContentDepthAnalysis:
            if "Gamma" in text:
                raise ValueError("cannot analyze")
            return super().analyze(text)

    orchestrator = AnalysisOrchestrator(
        link_index=cycle_link_index,
        read_text=FakeTextReader(CYCLE_TEXTS),
        content_analyzer=FlakyAnalyzer(),
        clock=fixed_clock,
    )

    results = orchestrator.run(cycle_documents)

    assert results.failed_documents == {"C": "cannot analyze"}
    assert set(results.depth_analysis) == {"A", "B"}
    # the text was read, so it still feeds concept extraction
    assert "gamma" in {c.term for c in results.concepts}


def test_now_is_captured_once_per_run(
    cycle_documents: list[Document], cycle_link_index: FakeLinkIndex
) -> None:
    calls = []

    def counting_clock() -> float:
        calls.append(1)
        return NOW + len(calls) * 1_000_000

    results = run_analysis(
        cycle_documents, cycle_link_index, FakeTextReader(CYCLE_TEXTS), clock=counting_clock
    )

    assert len(calls) == 1
    assert results.analyzed_at == NOW + 1_000_000


def test_results_do_not_depend_on_document_order(
    cycle_documents: list[Document], cycle_link_index: FakeLinkIndex
) -> None:
    forward = run_analysis(
        cycle_documents,
        cycle_link_index,
        FakeTextReader(CYCLE_TEXTS),
        clock=fixed_clock,
        max_workers=1,
    )
    backward = run_analysis(
        list(reversed(cycle_documents)),
        cycle_link_index,
        FakeTextReader(CYCLE_TEXTS),
        clock=fixed_clock,
        max_workers=8,
    )

    assert forward == backward


def test_dangling_links_are_graph_nodes_only() -> None:
    documents = [Document(path="a.md", last_modified=STALE)]
    index = FakeLinkIndex(links={"a.md": ["nowhere"]}, resolved_links={})

    results = run_analysis(documents, index, FakeTextReader({"a.md": "text"}), clock=fixed_clock)

    assert results.centrality == {"a.md": 1, "nowhere": 1}
    assert set(results.strength) == {"a.md"}
    assert set(results.depth_analysis) == {"a.md"}


def test_weak_connection_threshold_is_configurable(
    cycle_documents: list[Document], cycle_link_index: FakeLinkIndex
) -> None:
    results = run_analysis(
        cycle_documents,
        cycle_link_index,
        FakeTextReader(CYCLE_TEXTS),
        clock=fixed_clock,
        weak_connection_threshold=2,
    )

    assert results.weak_connections == []
