"""Content depth and readability analysis of markdown text."""

import re
from typing import Sequence

import numpy as np

from blindfinder.config import settings
from blindfinder.domain.analysis import ContentDepthAnalysis

from .tokenizer import FrequencyPhraseExtractor, PhraseExtractor, RegexTokenizer, Tokenizer

CITATION_PATTERN = re.compile(r"\[\[.*?\]\]")
HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]+\S", re.MULTILINE)
CODE_BLOCK_PATTERN = re.compile(r"```.*?```", re.DOTALL)
FORMULA_PATTERN = re.compile(r"\$\$.*?\$\$", re.DOTALL)
SENTENCE_DELIMITER = re.compile(r"[.!?]+")
VOWEL_GROUP = re.compile(r"[aeiouy]+")


def count_syllables(word: str) -> int:
    """Estimate syllables as the number of vowel groups, at least 1."""
    return max(1, len(VOWEL_GROUP.findall(word.lower())))


def count_sentences(text: str) -> int:
    """Count ./!/?-delimited segments, at least 1."""
    segments = [s for s in SENTENCE_DELIMITER.split(text) if s.strip()]
    return max(1, len(segments))


def flesch_reading_ease(text: str) -> float:
    """Flesch reading ease estimate of a text.

    Higher is easier. Simple sentences score around or above 100 while dense
    polysyllabic prose can go negative. Word and sentence denominators are
    clamped to 1 so empty input still yields a finite score.
    """
    words = text.split()
    syllables = sum(count_syllables(word) for word in words)
    return (
        206.835
        - 1.015 * (len(words) / count_sentences(text))
        - 84.6 * (syllables / max(1, len(words)))
    )


def max_heading_level(text: str) -> int:
    """Deepest Markdown heading level in the text, 0 when there are no headings."""
    return max((len(match) for match in HEADING_PATTERN.findall(text)), default=0)


class ContentAnalyzer:
    """Computes structural metrics and a composite depth score for a document."""

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        phrase_extractor: PhraseExtractor | None = None,
        weights: Sequence[float] | None = None,
    ):
        """Initialize the analyzer.

        Args:
            tokenizer: Tokenizer used for unique word counting
            phrase_extractor: Extractor used for key phrases
            weights: Seven non-negative weights for word count, citations,
                heading levels, code blocks, formulas, readability and unique words
        """
        self.tokenizer = tokenizer or RegexTokenizer()
        self.phrase_extractor = phrase_extractor or FrequencyPhraseExtractor(self.tokenizer)
        self.weights = np.array(
            settings.content_weights if weights is None else weights, dtype=np.float64
        )
        if self.weights.shape != (7,):
            raise ValueError(f"Expected 7 content weights, got {len(self.weights)}")
        if (self.weights < 0).any():
            raise ValueError(f"Content weights must be non-negative, got {list(self.weights)}")

    def analyze(self, text: str) -> ContentDepthAnalysis:
        """Analyze the content depth of a document's raw text.

        Args:
            text: Raw markdown text

        Returns:
            ContentDepthAnalysis with all metrics and the overall score
        """
        word_count = len(text.split())
        citation_count = len(CITATION_PATTERN.findall(text))
        heading_levels = max_heading_level(text)
        code_block_count = len(CODE_BLOCK_PATTERN.findall(text))
        formula_count = len(FORMULA_PATTERN.findall(text))
        readability_score = flesch_reading_ease(text)
        unique_words_count = len(set(self.tokenizer.tokenize(text)))

        metrics = np.array(
            [
                word_count,
                citation_count,
                heading_levels,
                code_block_count,
                formula_count,
                readability_score,
                unique_words_count,
            ],
            dtype=np.float64,
        )
        overall_score = float(np.dot(self.weights, metrics) / len(metrics))

        return ContentDepthAnalysis(
            word_count=word_count,
            citation_count=citation_count,
            heading_levels=heading_levels,
            code_block_count=code_block_count,
            formula_count=formula_count,
            key_phrases=self.phrase_extractor.extract(text),
            readability_score=readability_score,
            unique_words_count=unique_words_count,
            overall_score=overall_score,
        )
