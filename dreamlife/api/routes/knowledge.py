"""
Knowledge base routes.
"""

from fastapi import APIRouter, Depends

from dreamlife.api.deps import get_engine
from dreamlife.chat.engine import AnswerEngine
from dreamlife.domain.knowledge import KnowledgeStats

router = APIRouter(prefix="/knowledge")


@router.get("/stats", response_model=KnowledgeStats)
async def knowledge_stats(engine: AnswerEngine = Depends(get_engine)):
    return await engine.get_knowledge_stats()
