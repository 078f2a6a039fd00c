"""
Answer resolution results and runtime statistics.
"""

from enum import Enum

from pydantic import BaseModel, Field


class AnswerMode(str, Enum):
    REUSED = "reused"
    ADAPTED = "adapted"
    GENERATED = "generated"
    BLOCKED = "blocked"


class AnswerSource(str, Enum):
    DATABASE = "database"
    OPENAI = "openai"


class AnswerResult(BaseModel):
    """What the caller receives for one question."""

    answer: str
    mode: AnswerMode
    source: AnswerSource
    similarity: float | None = None


class RuntimeMetrics(BaseModel):
    """Process-local counters; only ever incremented."""

    total: int = 0
    scope_blocked: int = 0
    reused: int = 0
    adapted: int = 0
    generated: int = 0


class ModeShare(BaseModel):
    count: int
    percent: float


class ModeDistribution(BaseModel):
    reused: ModeShare
    adapted: ModeShare
    generated: ModeShare


class ThresholdSnapshot(BaseModel):
    reuse: float
    adapt: float
    retrieval: float


class RuntimeStats(BaseModel):
    """Read-only snapshot of RuntimeMetrics."""

    total: int
    scope_blocked: int
    answered: int
    distribution: ModeDistribution
    cache_size: int
    thresholds: ThresholdSnapshot | None = Field(default=None)
