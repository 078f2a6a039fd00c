"""
Runtime metrics of the answer engine.
"""

from fastapi import APIRouter, Depends

from dreamlife.api.deps import get_engine
from dreamlife.chat.engine import AnswerEngine
from dreamlife.domain.answer import RuntimeStats

router = APIRouter(prefix="/metrics")


@router.get("/chat", response_model=RuntimeStats)
async def chat_metrics(engine: AnswerEngine = Depends(get_engine)):
    """Mode distribution since process start."""
    return engine.get_runtime_stats()
