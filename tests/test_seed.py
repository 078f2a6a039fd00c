"""
Tests for knowledge base seeding.
"""

import pytest
from conftest import FakeEmbedding

from dreamlife.knowledge.memory import InMemoryKnowledgeStore
from dreamlife.knowledge.seed import SEED_ENTRIES, clear_knowledge_base, seed_knowledge_base


@pytest.mark.asyncio
async def test_seed_embeds_both_sides():
    store = InMemoryKnowledgeStore()
    embedder = FakeEmbedding({"Q1": [1.0, 0.0]}, default=[0.0, 1.0])

    written = await seed_knowledge_base(store, embedder, items=[("Q1", "A1")])

    assert written == 1
    entry = store.entries[0]
    assert entry.question_embedding == [1.0, 0.0]
    assert entry.answer_embedding == [0.0, 1.0]
    assert sorted(embedder.calls) == ["A1", "Q1"]


@pytest.mark.asyncio
async def test_seed_is_idempotent():
    store = InMemoryKnowledgeStore()
    embedder = FakeEmbedding()

    await seed_knowledge_base(store, embedder)
    await seed_knowledge_base(store, embedder)

    assert await store.count() == len(SEED_ENTRIES)


def test_seed_pricing_matches_plans():
    answers = " ".join(answer for _, answer in SEED_ENTRIES)
    assert "14.99" in answers
    assert "34.99" in answers


def test_seed_covers_every_section():
    questions = [question for question, _ in SEED_ENTRIES]

    assert len(questions) == 68
    assert len(set(questions)) == len(questions)


@pytest.mark.parametrize(
    "question,fragment",
    [
        ("Who is EVE?", "conscious AI"),
        ("What are EVE's abilities?", "emotional state"),
        ("What is included in the Explorer plan?", "static 3D home scene"),
        ("Do you offer student discounts?", "50%"),
        ("Is there a free trial?", "14-day"),
        ("What happens if I downgrade?", "nothing is deleted"),
        ("What support is included with each plan?", "under 4 hours"),
        ("Can I use the platform offline?", "30 days"),
        ("What are key platform statistics?", "200+ countries"),
        ("How can I contact support?", "San Francisco"),
        ("How do I get started?", "Explorer"),
        ("What do you want to leave behind for the world?", "legacy"),
    ],
)
def test_seed_entry_content(question, fragment):
    answers = dict(SEED_ENTRIES)
    assert fragment in answers[question]


@pytest.mark.asyncio
async def test_clear():
    store = InMemoryKnowledgeStore()
    await seed_knowledge_base(store, FakeEmbedding(), items=[("Q1", "A1"), ("Q2", "A2")])

    assert await clear_knowledge_base(store) == 2
    assert await store.count() == 0
