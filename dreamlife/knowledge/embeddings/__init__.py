"""
Embedding models package
"""

from .base import EmbeddingModel
from .cache import EmbeddingCache
from .openai import OpenAIEmbedding

__all__ = ["EmbeddingCache", "EmbeddingModel", "OpenAIEmbedding"]
