"""
Starter knowledge base content and seeding helpers.
"""

import asyncio

from dreamlife.domain.knowledge import KnowledgeEntry
from dreamlife.knowledge.base import KnowledgeStore
from dreamlife.knowledge.embeddings.base import EmbeddingModel
from dreamlife.knowledge.seed_data import SEED_ENTRIES
from dreamlife.utils.logging import get_logger

logger = get_logger(__name__)


async def seed_knowledge_base(
    store: KnowledgeStore,
    embedder: EmbeddingModel,
    items: list[tuple[str, str]] | None = None,
) -> int:
    """
    Embed and upsert starter entries, keyed by question.

    Returns:
        Number of entries written
    """
    items = SEED_ENTRIES if items is None else items
    logger.info("knowledge_seed_started", items=len(items))

    for question, answer in items:
        question_embedding, answer_embedding = await asyncio.gather(
            embedder.embed_text(question),
            embedder.embed_text(answer),
        )
        await store.upsert_by_question(
            KnowledgeEntry(
                question=question,
                answer=answer,
                question_embedding=question_embedding,
                answer_embedding=answer_embedding,
            )
        )

    logger.info("knowledge_seed_finished", items=len(items))
    return len(items)


async def clear_knowledge_base(store: KnowledgeStore) -> int:
    """Remove every knowledge entry."""
    removed = await store.delete_all()
    logger.info("knowledge_base_cleared", removed=removed)
    return removed
