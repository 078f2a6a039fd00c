"""
MongoDB implementation of KnowledgeStore.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from dreamlife.domain.knowledge import KnowledgeEntry, utc_now
from dreamlife.exceptions import KnowledgePoolUnavailable, PersistenceError
from dreamlife.knowledge.base import KnowledgeStore
from dreamlife.utils.logging import get_logger

logger = get_logger(__name__)

# Similarity search never reads answer embeddings
POOL_PROJECTION = {
    "_id": 0,
    "question": 1,
    "answer": 1,
    "questionEmbedding": 1,
    "createdAt": 1,
    "updatedAt": 1,
}


def to_document(entry: KnowledgeEntry) -> dict:
    """Map an entry to the stored camelCase document shape."""
    return {
        "question": entry.question,
        "answer": entry.answer,
        "questionEmbedding": entry.question_embedding,
        "answerEmbedding": entry.answer_embedding,
        "createdAt": entry.created_at,
        "updatedAt": entry.updated_at,
    }


def from_document(doc: dict) -> KnowledgeEntry:
    data = {
        "question": doc.get("question", ""),
        "answer": doc.get("answer", ""),
        "question_embedding": doc.get("questionEmbedding") or [],
        "answer_embedding": doc.get("answerEmbedding") or [],
    }
    if doc.get("createdAt"):
        data["created_at"] = doc["createdAt"]
    if doc.get("updatedAt"):
        data["updated_at"] = doc["updatedAt"]
    return KnowledgeEntry.model_validate(data)


class MongoKnowledgeStore(KnowledgeStore):
    """
    MongoDB implementation of KnowledgeStore.

    Collections:
    - knowledgebases: question/answer documents with both embeddings
    """

    def __init__(
        self,
        uri: str = "mongodb://localhost:27017",
        db_name: str = "dreamlife",
        collection_name: str = "knowledgebases",
        client: Optional[AsyncIOMotorClient] = None,
    ):
        self.uri = uri
        self.db_name = db_name
        self.collection_name = collection_name
        self.client: Optional[AsyncIOMotorClient] = client
        self.collection = None

    async def _ensure_connection(self):
        """Ensure database connection is established."""
        if self.collection is None:
            if self.client is None:
                self.client = AsyncIOMotorClient(self.uri)
            self.collection = self.client[self.db_name][self.collection_name]

            await self.collection.create_index("question")
            await self.collection.create_index([("createdAt", -1)])

            logger.info(
                "mongodb_connected",
                db_name=self.db_name,
                collection=self.collection_name,
            )

    async def find_all(self) -> list[KnowledgeEntry]:
        await self._ensure_connection()

        try:
            entries = []
            async for doc in self.collection.find({}, POOL_PROJECTION):
                entries.append(from_document(doc))
            return entries
        except Exception as e:
            logger.error("knowledge_find_all_failed", error=str(e), exc_info=True)
            raise KnowledgePoolUnavailable("Failed to load knowledge entries") from e

    async def insert(self, entry: KnowledgeEntry) -> None:
        await self._ensure_connection()

        try:
            await self.collection.insert_one(to_document(entry))
            logger.debug("knowledge_entry_saved", question=entry.question[:80])
        except Exception as e:
            logger.error("knowledge_insert_failed", error=str(e), exc_info=True)
            raise PersistenceError("Failed to save knowledge entry") from e

    async def upsert_by_question(self, entry: KnowledgeEntry) -> None:
        await self._ensure_connection()

        document = to_document(entry)
        created_at = document.pop("createdAt")
        document["updatedAt"] = utc_now()

        try:
            await self.collection.update_one(
                {"question": entry.question},
                {"$set": document, "$setOnInsert": {"createdAt": created_at}},
                upsert=True,
            )
        except Exception as e:
            logger.error(
                "knowledge_upsert_failed",
                question=entry.question[:80],
                error=str(e),
                exc_info=True,
            )
            raise

    async def count(self) -> int:
        await self._ensure_connection()
        return await self.collection.count_documents({})

    async def latest(self) -> Optional[KnowledgeEntry]:
        await self._ensure_connection()

        doc = await self.collection.find_one(
            {}, POOL_PROJECTION, sort=[("createdAt", -1)]
        )
        return from_document(doc) if doc else None

    async def delete_all(self) -> int:
        await self._ensure_connection()

        result = await self.collection.delete_many({})
        logger.info("knowledge_cleared", deleted=result.deleted_count)
        return result.deleted_count

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None
            self.collection = None
