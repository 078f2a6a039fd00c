"""
Shared fakes for the OpenAI and MongoDB collaborators.
"""

import asyncio
import math

import pytest
from pydantic import Field

from dreamlife.chat.engine import AnswerEngine, EngineContext, ResolutionPolicy
from dreamlife.domain.knowledge import KnowledgeEntry
from dreamlife.exceptions import EmbeddingError
from dreamlife.knowledge.embeddings.base import EmbeddingModel
from dreamlife.knowledge.memory import InMemoryKnowledgeStore
from dreamlife.llm.base import CompletionModel

STORED_QUESTION = "How does the Blueprint work?"
STORED_ANSWER = "You answer the Life Blueprint questionnaire and the AI builds your world."

STORED_VECTOR = [1.0, 0.0, 0.0, 0.0]
# cosine 0.75 against STORED_VECTOR
ADAPT_VECTOR = [0.75, math.sqrt(1 - 0.75**2), 0.0, 0.0]
NOVEL_VECTOR = [0.0, 0.0, 1.0, 0.0]
DEFAULT_VECTOR = [0.0, 0.0, 0.0, 1.0]


class FakeEmbedding(EmbeddingModel):
    """Looks vectors up by exact text; unknown text gets ``default``."""

    def __init__(self, vectors: dict[str, list[float]] | None = None, default=None):
        self.vectors = dict(vectors or {})
        self.default = list(default or DEFAULT_VECTOR)
        self.failures: dict[str, Exception] = {}
        self.calls: list[str] = []

    async def embed_text(self, text: str) -> list[float]:
        self.calls.append(text)
        if text in self.failures:
            raise self.failures[text]
        return list(self.vectors.get(text, self.default))

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        return [await self.embed_text(text) for text in texts]


class FakeCompletionModel(CompletionModel):
    id: str = "fake/model"
    name: str = "fake"
    reply: str = "Picture the morning of your dream life, then act on one detail today."
    delay: float = 0.0
    error: Exception | None = None
    calls: list[dict] = Field(default_factory=list)

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 300,
    ) -> str:
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def embedder():
    return FakeEmbedding({STORED_QUESTION: STORED_VECTOR})


@pytest.fixture
def model():
    return FakeCompletionModel()


@pytest.fixture
def store():
    return InMemoryKnowledgeStore(
        [
            KnowledgeEntry(
                question=STORED_QUESTION,
                answer=STORED_ANSWER,
                question_embedding=STORED_VECTOR,
                answer_embedding=DEFAULT_VECTOR,
            )
        ]
    )


@pytest.fixture
def make_engine(embedder, store, model):
    """Build an engine around the shared fakes; keyword overrides win."""

    def _make(**overrides) -> AnswerEngine:
        kwargs = {
            "embedder": embedder,
            "store": store,
            "model": model,
            "policy": ResolutionPolicy(),
            "context": EngineContext(),
        }
        kwargs.update(overrides)
        return AnswerEngine(**kwargs)

    return _make


@pytest.fixture
def engine(make_engine):
    return make_engine()
