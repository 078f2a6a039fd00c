from dreamlife.domain.answer import (
    AnswerMode,
    AnswerResult,
    AnswerSource,
    ModeDistribution,
    ModeShare,
    RuntimeMetrics,
    RuntimeStats,
    ThresholdSnapshot,
)
from dreamlife.domain.knowledge import (
    KnowledgeEntry,
    KnowledgeStats,
    LatestEntry,
    ScoredContent,
    SimilarityCandidate,
)
from dreamlife.domain.session import ChatMessage, ChatSession

__all__ = [
    "AnswerMode",
    "AnswerResult",
    "AnswerSource",
    "ChatMessage",
    "ChatSession",
    "KnowledgeEntry",
    "KnowledgeStats",
    "LatestEntry",
    "ModeDistribution",
    "ModeShare",
    "RuntimeMetrics",
    "RuntimeStats",
    "ScoredContent",
    "SimilarityCandidate",
    "ThresholdSnapshot",
]
