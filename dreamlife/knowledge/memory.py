"""
In-memory knowledge store (for testing and development)
"""

from typing import Optional

from dreamlife.domain.knowledge import KnowledgeEntry, utc_now
from dreamlife.knowledge.base import KnowledgeStore


class InMemoryKnowledgeStore(KnowledgeStore):
    def __init__(self, entries: list[KnowledgeEntry] | None = None):
        self.entries: list[KnowledgeEntry] = list(entries or [])

    async def find_all(self) -> list[KnowledgeEntry]:
        return [entry.model_copy() for entry in self.entries]

    async def insert(self, entry: KnowledgeEntry) -> None:
        self.entries.append(entry.model_copy())

    async def upsert_by_question(self, entry: KnowledgeEntry) -> None:
        for index, existing in enumerate(self.entries):
            if existing.question == entry.question:
                self.entries[index] = entry.model_copy(
                    update={"created_at": existing.created_at, "updated_at": utc_now()}
                )
                return
        self.entries.append(entry.model_copy())

    async def count(self) -> int:
        return len(self.entries)

    async def latest(self) -> Optional[KnowledgeEntry]:
        if not self.entries:
            return None
        return max(self.entries, key=lambda e: e.created_at)

    async def delete_all(self) -> int:
        removed = len(self.entries)
        self.entries.clear()
        return removed
