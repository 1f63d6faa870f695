"""Concept extraction and sentence-level co-occurrence mapping."""

from collections import Counter

from loguru import logger

from blindfinder.config import settings
from blindfinder.domain.analysis import Concept
from blindfinder.domain.document import NoteConnection
from blindfinder.errors import DocumentReadError
from blindfinder.link_index.base import TextReader

from .tokenizer import RegexTokenizer, Tokenizer, split_sentences


class ConceptExtractor:
    """Ranks corpus terms by frequency."""

    def __init__(self, tokenizer: Tokenizer | None = None, max_concepts: int | None = None):
        self.tokenizer = tokenizer or RegexTokenizer()
        self.max_concepts = settings.max_concepts if max_concepts is None else max_concepts

    def extract(self, corpus: str) -> list[Concept]:
        """Get the most frequent terms of the corpus.

        Args:
            corpus: Concatenated text of all documents

        Returns:
            Concepts by descending frequency, ties in first-occurrence order
        """
        counts = Counter(self.tokenizer.tokenize(corpus))
        return [
            Concept(term=term, frequency=frequency)
            for term, frequency in counts.most_common(self.max_concepts)
        ]


class ConceptRelationMapper:
    """Collects the terms that share a sentence with each concept."""

    def __init__(self, tokenizer: Tokenizer | None = None, stop_words: frozenset[str] | None = None):
        self.tokenizer = tokenizer or RegexTokenizer()
        self.stop_words = settings.stop_words if stop_words is None else stop_words

    def map_relations(
        self,
        concepts: list[Concept],
        connections: list[NoteConnection],
        read_text: TextReader,
    ) -> dict[str, set[str]]:
        """Map every concept to the terms co-occurring with it in any sentence.

        Each document is read and split into tokenized sentences once, then the
        cached sentences are scanned for every concept. Documents whose text
        cannot be read are skipped.

        Args:
            concepts: Ranked concepts
            connections: Connections of all documents in the run
            read_text: Callable returning a document's raw text

        Returns:
            Dictionary mapping each concept term to its co-occurring terms,
            without the term itself and stop words
        """
        sentences = self._tokenized_sentences(connections, read_text)

        relations: dict[str, set[str]] = {}
        for concept in concepts:
            related: set[str] = set()
            for tokens in sentences:
                if concept.term in tokens:
                    related.update(tokens)
            related.discard(concept.term)
            relations[concept.term] = related - self.stop_words

        return relations

    def _tokenized_sentences(
        self, connections: list[NoteConnection], read_text: TextReader
    ) -> list[set[str]]:
        sentences = []
        seen = set()

        for conn in connections:
            if conn.path in seen:
                continue
            seen.add(conn.path)

            try:
                text = read_text(conn.document)
            except DocumentReadError as e:
                logger.warning(f"Skipping {conn.path} for concept relations: {e.reason}")
                continue

            for sentence in split_sentences(text):
                tokens = set(self.tokenizer.tokenize(sentence))
                if tokens:
                    sentences.append(tokens)

        return sentences
