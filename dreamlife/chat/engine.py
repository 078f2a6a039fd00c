"""
Answer resolution engine.

Decides, per question, between a blocked reply, a deterministic answer,
verbatim reuse of a stored answer, an adapted answer blended from near
matches, or a freshly generated answer that is then stored.

    engine = AnswerEngine(embedder=..., store=..., model=...)
    result = await engine.handle_question("How does the Blueprint work?")
    result.mode, result.answer
"""

import asyncio
import hashlib
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

from pydantic import BaseModel, Field, model_validator

from dreamlife.chat.patterns import PatternMatcher
from dreamlife.chat.prompts import (
    ADAPT_SYSTEM_PROMPT,
    EMPTY_QUESTION_PROMPT,
    FALLBACK_ANSWER,
    GENERATE_SYSTEM_PROMPT,
    OUT_OF_SCOPE_RESPONSE,
    build_adapt_prompt,
    build_generate_prompt,
)
from dreamlife.chat.scope import ScopeFilter
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
    SimilarityCandidate,
)
from dreamlife.exceptions import EmbeddingError, GenerativeError
from dreamlife.knowledge.base import KnowledgeStore
from dreamlife.knowledge.embeddings.base import EmbeddingModel
from dreamlife.knowledge.embeddings.cache import EmbeddingCache
from dreamlife.knowledge.similarity import find_top_similar
from dreamlife.llm.base import CompletionModel
from dreamlife.utils.logging import get_logger

logger = get_logger(__name__)


class ResolutionPolicy(BaseModel):
    """Similarity bands and completion parameters."""

    reuse_threshold: float = Field(default=0.9, ge=0.0, le=1.0)
    adapt_threshold: float = Field(default=0.65, ge=0.0, le=1.0)
    retrieval_threshold: float = Field(default=0.4, ge=0.0, le=1.0)
    retrieval_top_k: int = Field(default=5, ge=1)
    adapt_context_size: int = Field(default=3, ge=1)
    adapt_temperature: float = 0.55
    adapt_max_tokens: int = 260
    generate_temperature: float = 0.7
    generate_max_tokens: int = 300
    completion_timeout: float = Field(default=8.0, gt=0.0)

    @model_validator(mode="after")
    def _check_band_order(self) -> "ResolutionPolicy":
        if not (
            self.retrieval_threshold <= self.adapt_threshold <= self.reuse_threshold
        ):
            raise ValueError(
                "thresholds must satisfy retrieval <= adapt <= reuse, got "
                f"{self.retrieval_threshold} / {self.adapt_threshold} / {self.reuse_threshold}"
            )
        return self

    @classmethod
    def from_settings(cls, settings) -> "ResolutionPolicy":
        return cls(**{name: getattr(settings, name) for name in cls.model_fields})


def classify_similarity(top_similarity: float | None, policy: ResolutionPolicy) -> AnswerMode:
    """Map the best candidate score to a mode. Lower band edges are inclusive."""
    if top_similarity is None:
        return AnswerMode.GENERATED
    if top_similarity >= policy.reuse_threshold:
        return AnswerMode.REUSED
    if top_similarity >= policy.adapt_threshold:
        return AnswerMode.ADAPTED
    return AnswerMode.GENERATED


def question_fingerprint(question: str) -> str:
    normalized = " ".join(question.lower().split())
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()


class QuestionLocks:
    """One asyncio.Lock per in-flight question fingerprint."""

    def __init__(self):
        self._locks: dict[str, asyncio.Lock] = {}
        self._waiters: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str):
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._waiters[key] = self._waiters.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._waiters[key] -= 1
            if self._waiters[key] == 0:
                del self._waiters[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)


@dataclass
class EngineContext:
    """Mutable state owned by one engine instance."""

    cache: EmbeddingCache = field(default_factory=EmbeddingCache)
    metrics: RuntimeMetrics = field(default_factory=RuntimeMetrics)
    locks: QuestionLocks = field(default_factory=QuestionLocks)


class AnswerEngine:
    def __init__(
        self,
        embedder: EmbeddingModel,
        store: KnowledgeStore,
        model: CompletionModel,
        policy: ResolutionPolicy | None = None,
        context: EngineContext | None = None,
        scope_filter: ScopeFilter | None = None,
        pattern_matcher: PatternMatcher | None = None,
        dedupe_in_flight: bool = True,
    ):
        self.embedder = embedder
        self.store = store
        self.model = model
        self.policy = policy or ResolutionPolicy()
        self.context = context or EngineContext()
        self.pattern_matcher = pattern_matcher or PatternMatcher()
        self.scope_filter = scope_filter or ScopeFilter(
            intent_patterns=[p.regex for p in self.pattern_matcher.patterns]
        )
        self.dedupe_in_flight = dedupe_in_flight

    async def handle_question(self, question: str) -> AnswerResult:
        """
        Resolve one question.

        Raises:
            EmbeddingError: The question could not be embedded. Every other
                failure degrades to a fallback answer.
        """
        metrics = self.context.metrics
        metrics.total += 1

        text = (question or "").strip()
        if not text:
            return AnswerResult(
                answer=EMPTY_QUESTION_PROMPT,
                mode=AnswerMode.BLOCKED,
                source=AnswerSource.OPENAI,
            )

        lowered = text.lower()

        if not self.scope_filter.is_in_scope(lowered):
            metrics.scope_blocked += 1
            logger.info(
                "question_out_of_scope",
                reason="hard_block" if self.scope_filter.is_hard_blocked(lowered) else "off_topic",
                question=text[:80],
            )
            return AnswerResult(
                answer=OUT_OF_SCOPE_RESPONSE,
                mode=AnswerMode.BLOCKED,
                source=AnswerSource.OPENAI,
            )

        direct = self.pattern_matcher.match(lowered)
        if direct is None:
            direct = self.pattern_matcher.match_pricing(lowered)
        if direct is not None:
            metrics.reused += 1
            logger.info("direct_pattern_hit", pattern=direct.name)
            return AnswerResult(
                answer=direct.answer,
                mode=AnswerMode.REUSED,
                source=AnswerSource.DATABASE,
                similarity=1.0,
            )

        if not self.dedupe_in_flight:
            return await self._resolve(text)

        async with self.context.locks.hold(question_fingerprint(text)):
            return await self._resolve(text)

    async def _resolve(self, question: str) -> AnswerResult:
        metrics = self.context.metrics

        question_embedding = await self._get_or_create_embedding(question)
        candidates = await self._retrieve_candidates(question_embedding)

        top = candidates[0] if candidates else None
        top_similarity = top.similarity if top else None
        mode = classify_similarity(top_similarity, self.policy)

        if mode is AnswerMode.REUSED:
            metrics.reused += 1
            logger.info("knowledge_reused", similarity=round(top_similarity, 4))
            return AnswerResult(
                answer=top.answer,
                mode=AnswerMode.REUSED,
                source=AnswerSource.DATABASE,
                similarity=top_similarity,
            )

        if mode is AnswerMode.ADAPTED:
            answer = await self._adapt(question, candidates[: self.policy.adapt_context_size])
            metrics.adapted += 1
            logger.info("knowledge_adapted", similarity=round(top_similarity, 4))
            return AnswerResult(
                answer=answer,
                mode=AnswerMode.ADAPTED,
                source=AnswerSource.OPENAI,
                similarity=top_similarity,
            )

        answer, completed = await self._generate(question, candidates)
        if completed:
            await self._persist(question, answer, question_embedding)
        metrics.generated += 1
        logger.info(
            "answer_generated",
            similarity=round(top_similarity, 4) if top_similarity is not None else None,
            persisted=completed,
        )
        return AnswerResult(
            answer=answer,
            mode=AnswerMode.GENERATED,
            source=AnswerSource.OPENAI,
            similarity=top_similarity,
        )

    async def _get_or_create_embedding(self, text: str, force_new: bool = False) -> list[float]:
        """Embed ``text``; ``force_new`` neither reads nor writes the cache."""
        cache = self.context.cache
        if not force_new:
            cached = cache.get(text)
            if cached is not None:
                return cached

        try:
            vector = await self.embedder.embed_text(text)
        except EmbeddingError:
            raise
        except Exception as e:
            raise EmbeddingError(f"Embedding provider failed: {e}") from e

        if not vector:
            raise EmbeddingError("Embedding provider returned an empty vector")

        if not force_new:
            cache.put(text, vector)
        return vector

    async def _retrieve_candidates(self, query: list[float]) -> list[SimilarityCandidate]:
        try:
            entries = await self.store.find_all()
        except Exception as e:
            logger.error(
                "knowledge_pool_unavailable",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return []

        matches = find_top_similar(
            query,
            ((entry, entry.question_embedding) for entry in entries),
            threshold=self.policy.retrieval_threshold,
            top_k=self.policy.retrieval_top_k,
        )
        return [
            SimilarityCandidate(
                question=match.content.question,
                answer=match.content.answer,
                similarity=match.similarity,
            )
            for match in matches
        ]

    async def _complete(self, system_prompt: str, user_prompt: str, temperature: float, max_tokens: int) -> str:
        try:
            content = await asyncio.wait_for(
                self.model.complete(
                    system_prompt=system_prompt,
                    user_prompt=user_prompt,
                    temperature=temperature,
                    max_tokens=max_tokens,
                ),
                timeout=self.policy.completion_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("completion_timeout", timeout=self.policy.completion_timeout)
            raise GenerativeError("Completion timed out") from None
        except Exception as e:
            logger.error(
                "completion_failed",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise GenerativeError("Completion provider failed") from e

        content = (content or "").strip()
        if not content:
            raise GenerativeError("Completion provider returned no content")
        return content

    @staticmethod
    def _fallback(candidates: list[SimilarityCandidate]) -> str:
        return candidates[0].answer if candidates else FALLBACK_ANSWER

    async def _adapt(self, question: str, candidates: list[SimilarityCandidate]) -> str:
        try:
            return await self._complete(
                ADAPT_SYSTEM_PROMPT,
                build_adapt_prompt(question, candidates),
                temperature=self.policy.adapt_temperature,
                max_tokens=self.policy.adapt_max_tokens,
            )
        except GenerativeError:
            return self._fallback(candidates)

    async def _generate(self, question: str, candidates: list[SimilarityCandidate]) -> tuple[str, bool]:
        """Returns the answer and whether it came from the model."""
        try:
            answer = await self._complete(
                GENERATE_SYSTEM_PROMPT,
                build_generate_prompt(question, candidates),
                temperature=self.policy.generate_temperature,
                max_tokens=self.policy.generate_max_tokens,
            )
        except GenerativeError:
            return self._fallback(candidates), False
        return answer, True

    async def _persist(self, question: str, answer: str, question_embedding: list[float]) -> bool:
        try:
            answer_embedding = await self._get_or_create_embedding(answer, force_new=True)
        except EmbeddingError as e:
            logger.error("answer_embedding_failed", error=str(e), exc_info=True)
            return False

        try:
            await self.store.insert(
                KnowledgeEntry(
                    question=question,
                    answer=answer,
                    question_embedding=question_embedding,
                    answer_embedding=answer_embedding,
                )
            )
        except Exception as e:
            logger.error(
                "knowledge_persist_failed",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return False

        logger.info("knowledge_entry_created", question=question[:80])
        return True

    def get_runtime_stats(self) -> RuntimeStats:
        metrics = self.context.metrics
        answered = metrics.total - metrics.scope_blocked

        def share(count: int) -> ModeShare:
            percent = round(100 * count / answered, 1) if answered > 0 else 0.0
            return ModeShare(count=count, percent=percent)

        return RuntimeStats(
            total=metrics.total,
            scope_blocked=metrics.scope_blocked,
            answered=answered,
            distribution=ModeDistribution(
                reused=share(metrics.reused),
                adapted=share(metrics.adapted),
                generated=share(metrics.generated),
            ),
            cache_size=len(self.context.cache),
            thresholds=ThresholdSnapshot(
                reuse=self.policy.reuse_threshold,
                adapt=self.policy.adapt_threshold,
                retrieval=self.policy.retrieval_threshold,
            ),
        )

    async def get_knowledge_stats(self) -> KnowledgeStats:
        try:
            total = await self.store.count()
            latest = await self.store.latest()
        except Exception as e:
            logger.error("knowledge_stats_failed", error=str(e), exc_info=True)
            return KnowledgeStats()

        return KnowledgeStats(
            total_entries=total,
            latest_entry=(
                LatestEntry(question=latest.question, created_at=latest.created_at)
                if latest
                else None
            ),
        )
