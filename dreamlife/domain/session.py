"""
Chat session history kept for WebSocket clients.
"""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from dreamlife.domain.answer import AnswerMode, AnswerSource
from dreamlife.domain.knowledge import utc_now


class ChatMessage(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    message: str
    timestamp: datetime = Field(default_factory=utc_now)
    type: Literal["user", "bot", "system"]

    # Bot answers only
    mode: AnswerMode | None = None
    source: AnswerSource | None = None
    similarity: float | None = None


class ChatSession(BaseModel):
    session_id: str
    messages: list[ChatMessage] = Field(default_factory=list)
    last_activity: datetime = Field(default_factory=utc_now)
