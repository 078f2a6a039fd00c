"""
Knowledge base: storage, embeddings and similarity search.
"""

from dreamlife.knowledge.base import KnowledgeStore
from dreamlife.knowledge.embeddings import EmbeddingCache, EmbeddingModel, OpenAIEmbedding
from dreamlife.knowledge.memory import InMemoryKnowledgeStore
from dreamlife.knowledge.mongo import MongoKnowledgeStore
from dreamlife.knowledge.seed import SEED_ENTRIES, clear_knowledge_base, seed_knowledge_base
from dreamlife.knowledge.similarity import cosine_similarity, find_top_similar

__all__ = [
    "EmbeddingCache",
    "EmbeddingModel",
    "InMemoryKnowledgeStore",
    "KnowledgeStore",
    "MongoKnowledgeStore",
    "OpenAIEmbedding",
    "SEED_ENTRIES",
    "clear_knowledge_base",
    "cosine_similarity",
    "find_top_similar",
    "seed_knowledge_base",
]
