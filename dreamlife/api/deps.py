"""
API dependency injection.

The engine and session manager live on ``app.state`` and are created by
the application lifespan.
"""

from fastapi import Request, WebSocket

from dreamlife.chat.engine import AnswerEngine
from dreamlife.chat.sessions import ChatSessionManager


def get_engine(request: Request) -> AnswerEngine:
    return request.app.state.engine


def get_ws_engine(websocket: WebSocket) -> AnswerEngine:
    return websocket.app.state.engine


def get_ws_sessions(websocket: WebSocket) -> ChatSessionManager:
    return websocket.app.state.sessions
