"""CLI for analyzing the link graph and content of a folder of markdown notes"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from blindfinder.analysis.orchestrator import run_analysis
from blindfinder.config import settings
from blindfinder.domain.analysis import AnalysisResults
from blindfinder.link_index.vault import MarkdownVault


def print_summary(results: AnalysisResults, top_n: int) -> None:
    print(f"Total notes: {len(results.connections)}")
    print(f"Weak connections: {len(results.weak_connections)}")
    print(f"Isolated notes: {len(results.isolated_notes)}")
    if results.is_partial:
        print(f"Failed notes: {', '.join(results.failed_documents)}")

    print("\nStrongest connections:")
    for path, strength in results.top_connections(top_n):
        print(f"  {strength:7.2f}  {path}")

    print("\nMost central notes:")
    for path, centrality in results.top_central_notes(top_n):
        print(f"  {centrality:7d}  {path}")

    print("\nTop concepts:")
    for concept in results.concepts[:top_n]:
        related = ", ".join(results.concept_relations.get(concept.term, [])[:top_n])
        print(f"  {concept.term} ({concept.frequency}): {related}")


def main(in_folder: str, output: str | None, top_n: int) -> None:
    vault = MarkdownVault(Path(in_folder))
    results = run_analysis(vault.list_documents(), vault, vault.read_text)

    if output:
        Path(output).write_text(results.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Wrote analysis results to {output}")
    else:
        print_summary(results, top_n)


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--in-folder", type=str, required=True, help="Folder containing markdown files"
    )
    parser.add_argument(
        "--output",
        type=str,
        required=False,
        help="Write the full analysis results as JSON to this file",
        default=None,
    )
    parser.add_argument(
        "--top-n",
        type=int,
        required=False,
        help="Number of entries in each ranking",
        default=settings.top_n,
    )

    args = parser.parse_args()

    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

    main(in_folder=args.in_folder, output=args.output, top_n=args.top_n)
