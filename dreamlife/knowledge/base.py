"""
Knowledge store interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from dreamlife.domain.knowledge import KnowledgeEntry


class KnowledgeStore(ABC):
    """
    Persists question/answer entries with their embeddings.

    The answer engine only needs ``find_all`` and ``insert``; the rest serve
    seeding, stats and administration.
    """

    @abstractmethod
    async def find_all(self) -> list[KnowledgeEntry]:
        """Return every stored entry (full scan)."""
        pass

    @abstractmethod
    async def insert(self, entry: KnowledgeEntry) -> None:
        """Store a new entry."""
        pass

    @abstractmethod
    async def upsert_by_question(self, entry: KnowledgeEntry) -> None:
        """Insert, or replace the entry with the same question."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored entries."""
        pass

    @abstractmethod
    async def latest(self) -> Optional[KnowledgeEntry]:
        """Most recently created entry."""
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every entry, returning how many were removed."""
        pass

    async def close(self) -> None:
        """Release connections, if any."""
        pass
