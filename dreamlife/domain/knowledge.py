"""
Knowledge base records and similarity search results.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_validator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class KnowledgeEntry(BaseModel):
    """A stored question/answer pair with embeddings of both sides."""

    question: str
    answer: str
    question_embedding: list[float] = Field(default_factory=list)
    answer_embedding: list[float] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("question", "answer")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


class SimilarityCandidate(BaseModel):
    """A knowledge entry scored against the current question."""

    question: str = ""
    answer: str
    similarity: float


class ScoredContent(BaseModel):
    """Pool item that passed the similarity threshold."""

    content: Any
    similarity: float


class LatestEntry(BaseModel):
    question: str
    created_at: datetime


class KnowledgeStats(BaseModel):
    total_entries: int = 0
    latest_entry: LatestEntry | None = None
