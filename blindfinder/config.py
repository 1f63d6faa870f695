from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BLINDFINDER_")

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Connection strength policy
    link_weight: float = 1.0
    backlink_weight: float = 1.5
    indirect_backlink_weight: float = 0.5
    recency_window_days: float = 30.0
    recency_divisor: float = 10.0

    # Connectivity reports
    weak_connection_threshold: int = 3
    top_n: int = 5

    # Text analytics
    max_concepts: int = 20
    key_phrase_count: int = 5
    min_phrase_length: int = 3
    # word count, citations, heading levels, code blocks, formulas, readability, unique words
    content_weights: tuple[float, float, float, float, float, float, float] = (
        0.1,
        2.0,
        1.0,
        1.5,
        1.5,
        0.05,
        0.2,
    )
    stop_words: frozenset[str] = frozenset(
        {
            "a", "an", "the", "and", "or", "but", "if", "because", "as", "what",
            "which", "this", "that", "these", "those", "then", "just", "so", "than",
            "such", "both", "through", "about", "for", "is", "of", "while", "during",
            "to", "from", "in", "on", "at", "by", "with", "without", "after", "before",
            "are", "was", "were", "be", "been", "being", "have", "has", "had", "do",
            "does", "did", "will", "would", "could", "should", "may", "might", "shall",
            "not", "no", "its", "it", "we", "you", "he", "she", "they", "i", "my",
            "your", "our", "their", "also", "can", "more", "all", "into", "up",
        }
    )

    # Worker pool for per-document reads and content analysis
    max_workers: int = 4

    @field_validator("content_weights")
    @classmethod
    def validate_content_weights(cls, weights: tuple[float, ...]) -> tuple[float, ...]:
        if any(weight < 0 for weight in weights):
            raise ValueError(f"Content weights must be non-negative, got {weights}")
        return weights


settings = Settings()
