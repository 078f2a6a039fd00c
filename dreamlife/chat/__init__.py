"""
Chat answer resolution.
"""

from dreamlife.chat.engine import (
    AnswerEngine,
    EngineContext,
    QuestionLocks,
    ResolutionPolicy,
    classify_similarity,
    question_fingerprint,
)
from dreamlife.chat.patterns import DIRECT_PATTERNS, PRICING_PATTERN, DirectPattern, PatternMatcher
from dreamlife.chat.scope import ScopeFilter
from dreamlife.chat.sessions import ChatSessionManager

__all__ = [
    "AnswerEngine",
    "ChatSessionManager",
    "DIRECT_PATTERNS",
    "DirectPattern",
    "EngineContext",
    "PRICING_PATTERN",
    "PatternMatcher",
    "QuestionLocks",
    "ResolutionPolicy",
    "ScopeFilter",
    "classify_similarity",
    "question_fingerprint",
]
