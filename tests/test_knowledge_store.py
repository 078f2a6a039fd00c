"""
Tests for the in-memory and MongoDB knowledge stores.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from dreamlife.domain.knowledge import KnowledgeEntry
from dreamlife.exceptions import KnowledgePoolUnavailable, PersistenceError
from dreamlife.knowledge.memory import InMemoryKnowledgeStore
from dreamlife.knowledge.mongo import (
    POOL_PROJECTION,
    MongoKnowledgeStore,
    from_document,
    to_document,
)


def make_entry(question="What is EVE?", answer="EVE is your guide.", **kwargs):
    return KnowledgeEntry(
        question=question,
        answer=answer,
        question_embedding=kwargs.pop("question_embedding", [0.1, 0.2]),
        answer_embedding=kwargs.pop("answer_embedding", [0.3, 0.4]),
        **kwargs,
    )


class AsyncCursor:
    def __init__(self, docs, error=None):
        self.docs = docs
        self.error = error

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        if self.error is not None:
            raise self.error
        for doc in self.docs:
            yield doc


def test_entry_text_is_trimmed():
    entry = KnowledgeEntry(question="  What is EVE?\n", answer=" A guide. ")
    assert entry.question == "What is EVE?"
    assert entry.answer == "A guide."


class TestInMemoryKnowledgeStore:
    @pytest.mark.asyncio
    async def test_insert_and_find_all(self):
        store = InMemoryKnowledgeStore()
        await store.insert(make_entry())

        entries = await store.find_all()
        entries[0].answer = "changed"

        assert (await store.find_all())[0].answer == "EVE is your guide."
        assert await store.count() == 1

    @pytest.mark.asyncio
    async def test_upsert_replaces_by_question(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        store = InMemoryKnowledgeStore([make_entry(created_at=created)])

        await store.upsert_by_question(make_entry(answer="EVE is your AI guide."))
        await store.upsert_by_question(make_entry(question="Who is EVE?"))

        assert await store.count() == 2
        assert store.entries[0].answer == "EVE is your AI guide."
        assert store.entries[0].created_at == created

    @pytest.mark.asyncio
    async def test_latest_and_delete_all(self):
        now = datetime.now(timezone.utc)
        store = InMemoryKnowledgeStore(
            [
                make_entry(question="new", created_at=now),
                make_entry(question="old", created_at=now - timedelta(days=1)),
            ]
        )

        assert (await store.latest()).question == "new"
        assert await store.delete_all() == 2
        assert await store.latest() is None


@pytest.fixture
def collection():
    collection = MagicMock()
    collection.create_index = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.count_documents = AsyncMock(return_value=3)
    collection.find_one = AsyncMock(return_value=None)
    collection.delete_many = AsyncMock(return_value=MagicMock(deleted_count=3))
    return collection


@pytest.fixture
def mongo_store(collection):
    client = MagicMock()
    database = MagicMock()
    client.__getitem__.return_value = database
    database.__getitem__.return_value = collection
    return MongoKnowledgeStore(client=client)


class TestMongoKnowledgeStore:
    def test_document_uses_camel_case(self):
        doc = to_document(make_entry())

        assert doc["questionEmbedding"] == [0.1, 0.2]
        assert doc["answerEmbedding"] == [0.3, 0.4]
        assert "createdAt" in doc and "updatedAt" in doc

    def test_from_projected_document(self):
        entry = from_document({"question": "q", "answer": "a", "questionEmbedding": [1.0]})

        assert entry.question_embedding == [1.0]
        assert entry.answer_embedding == []

    @pytest.mark.asyncio
    async def test_connect_creates_indexes_once(self, mongo_store, collection):
        await mongo_store.count()
        await mongo_store.count()

        assert collection.create_index.await_count == 2

    @pytest.mark.asyncio
    async def test_find_all_projects_out_answer_embedding(self, mongo_store, collection):
        collection.find = MagicMock(
            return_value=AsyncCursor(
                [{"question": "q", "answer": "a", "questionEmbedding": [0.5, 0.5]}]
            )
        )

        entries = await mongo_store.find_all()

        collection.find.assert_called_once_with({}, POOL_PROJECTION)
        assert POOL_PROJECTION.get("answerEmbedding") is None
        assert entries[0].question_embedding == [0.5, 0.5]

    @pytest.mark.asyncio
    async def test_find_all_failure(self, mongo_store, collection):
        collection.find = MagicMock(return_value=AsyncCursor([], error=RuntimeError("down")))

        with pytest.raises(KnowledgePoolUnavailable):
            await mongo_store.find_all()

    @pytest.mark.asyncio
    async def test_insert(self, mongo_store, collection):
        await mongo_store.insert(make_entry())

        doc = collection.insert_one.await_args[0][0]
        assert doc["question"] == "What is EVE?"

    @pytest.mark.asyncio
    async def test_insert_failure(self, mongo_store, collection):
        collection.insert_one.side_effect = RuntimeError("write concern")

        with pytest.raises(PersistenceError):
            await mongo_store.insert(make_entry())

    @pytest.mark.asyncio
    async def test_upsert_keeps_created_at_on_update(self, mongo_store, collection):
        await mongo_store.upsert_by_question(make_entry())

        query, update = collection.update_one.await_args[0]
        assert query == {"question": "What is EVE?"}
        assert "createdAt" not in update["$set"]
        assert "createdAt" in update["$setOnInsert"]
        assert collection.update_one.await_args[1] == {"upsert": True}

    @pytest.mark.asyncio
    async def test_latest_sorts_by_created_at(self, mongo_store, collection):
        collection.find_one.return_value = {"question": "newest", "answer": "a"}

        latest = await mongo_store.latest()

        assert latest.question == "newest"
        assert collection.find_one.await_args[1]["sort"] == [("createdAt", -1)]

    @pytest.mark.asyncio
    async def test_delete_all_and_close(self, mongo_store):
        client = mongo_store.client

        assert await mongo_store.delete_all() == 3
        await mongo_store.close()

        client.close.assert_called_once()
        assert mongo_store.client is None
