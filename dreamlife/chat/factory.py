"""
Build an AnswerEngine from settings.
"""

from dreamlife.chat.engine import AnswerEngine, EngineContext, ResolutionPolicy
from dreamlife.config import DreamLifeSettings
from dreamlife.knowledge.base import KnowledgeStore
from dreamlife.knowledge.embeddings import EmbeddingCache, OpenAIEmbedding
from dreamlife.knowledge.memory import InMemoryKnowledgeStore
from dreamlife.knowledge.mongo import MongoKnowledgeStore
from dreamlife.llm import OpenAICompletionModel
from dreamlife.utils.logging import get_logger

logger = get_logger(__name__)


def build_knowledge_store(settings: DreamLifeSettings) -> KnowledgeStore:
    """MongoDB when a URI is configured, otherwise a process-local store."""
    if settings.mongo_uri:
        return MongoKnowledgeStore(
            uri=settings.mongo_uri,
            db_name=settings.mongo_db_name,
            collection_name=settings.knowledge_collection,
        )

    logger.warning("mongo_uri_not_configured", fallback="in_memory")
    return InMemoryKnowledgeStore()


def build_embedder(settings: DreamLifeSettings) -> OpenAIEmbedding:
    return OpenAIEmbedding(
        model=settings.embedding_model,
        base_url=settings.openai_base_url,
    )


def build_engine(settings: DreamLifeSettings) -> AnswerEngine:
    model = OpenAICompletionModel(
        id=f"openai/{settings.completion_model}",
        name=settings.completion_model,
        model_name=settings.completion_model,
        base_url=settings.openai_base_url,
    )

    engine = AnswerEngine(
        embedder=build_embedder(settings),
        store=build_knowledge_store(settings),
        model=model,
        policy=ResolutionPolicy.from_settings(settings),
        context=EngineContext(cache=EmbeddingCache(max_size=settings.embedding_cache_size)),
        dedupe_in_flight=settings.dedupe_in_flight,
    )

    logger.info(
        "answer_engine_built",
        embedding_model=settings.embedding_model,
        completion_model=settings.completion_model,
        store=type(engine.store).__name__,
    )
    return engine


__all__ = ["build_embedder", "build_engine", "build_knowledge_store"]
