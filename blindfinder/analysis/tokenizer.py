"""Lexical tokenization shared by content analysis and concept extraction."""

import re
from collections import Counter
from typing import Protocol

from blindfinder.config import settings

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+|\n+")


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> list[str]:
        """Split text into case-folded terms, deterministically."""
        ...


class PhraseExtractor(Protocol):
    def extract(self, text: str) -> list[str]:
        """Get the topical terms of a single text."""
        ...


class RegexTokenizer:
    """Tokenizer that keeps runs of letters and digits (Unicode aware)."""

    def __init__(self, pattern: str = r"[^\W_]+"):
        self.pattern = re.compile(pattern)

    def tokenize(self, text: str) -> list[str]:
        return [token.casefold() for token in self.pattern.findall(text)]


class FrequencyPhraseExtractor:
    """Picks the most frequent content-bearing tokens of a text."""

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        top_k: int | None = None,
        min_length: int | None = None,
        stop_words: frozenset[str] | None = None,
    ):
        """Initialize the phrase extractor.

        Args:
            tokenizer: Tokenizer used to split the text
            top_k: Maximum number of phrases returned
            min_length: Minimum character length of a phrase
            stop_words: Terms never returned as phrases
        """
        self.tokenizer = tokenizer or RegexTokenizer()
        self.top_k = settings.key_phrase_count if top_k is None else top_k
        self.min_length = settings.min_phrase_length if min_length is None else min_length
        self.stop_words = settings.stop_words if stop_words is None else stop_words

    def extract(self, text: str) -> list[str]:
        candidates = [
            token
            for token in self.tokenizer.tokenize(text)
            if len(token) >= self.min_length and token not in self.stop_words
        ]
        # most_common keeps first-encountered order among equal counts
        return [term for term, _ in Counter(candidates).most_common(self.top_k)]


def split_sentences(text: str) -> list[str]:
    """Split text into sentences on terminal punctuation and line breaks."""
    sentences = _SENTENCE_BOUNDARY.split(text)
    return [s.strip() for s in sentences if s.strip()]
