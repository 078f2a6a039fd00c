"""
Chat routes: one-shot HTTP questions and a WebSocket conversation.

WebSocket frames are JSON objects ``{"event": str, "data": ...}``.

Client events:
- user_message: {"message": str}
- get_chat_history
- clear_chat
- user_typing: {"is_typing": bool}

Server events: bot_message, bot_typing, chat_history, chat_cleared, error.
"""

import json
import uuid

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect
from pydantic import BaseModel

from dreamlife.api.deps import get_engine, get_ws_engine, get_ws_sessions
from dreamlife.chat.engine import AnswerEngine
from dreamlife.chat.prompts import CLEARED_MESSAGE, PROCESSING_FAILED_MESSAGE, WELCOME_MESSAGE
from dreamlife.chat.sessions import ChatSessionManager
from dreamlife.domain.answer import AnswerResult
from dreamlife.domain.session import ChatMessage
from dreamlife.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/chat")


class AskRequest(BaseModel):
    question: str


@router.post("/ask", response_model=AnswerResult)
async def ask(request: AskRequest, engine: AnswerEngine = Depends(get_engine)):
    """Resolve a single question."""
    try:
        return await engine.handle_question(request.question)
    except Exception as e:
        logger.error(
            "chat_ask_failed",
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        raise HTTPException(status_code=503, detail=PROCESSING_FAILED_MESSAGE)


async def _send(websocket: WebSocket, event: str, data) -> None:
    await websocket.send_json({"event": event, "data": data})


async def _send_bot_message(
    websocket: WebSocket,
    sessions: ChatSessionManager,
    session_id: str,
    message: ChatMessage,
) -> None:
    sessions.add_message(session_id, message)
    await _send(websocket, "bot_message", message.model_dump(mode="json"))


async def _handle_user_message(
    websocket: WebSocket,
    engine: AnswerEngine,
    sessions: ChatSessionManager,
    session_id: str,
    data,
) -> None:
    text = data.get("message", "") if isinstance(data, dict) else ""
    user_message = ChatMessage(message=text, type="user")
    sessions.add_message(session_id, user_message)

    await _send(websocket, "bot_typing", True)
    try:
        result = await engine.handle_question(text)
        reply = ChatMessage(
            message=result.answer,
            type="bot",
            mode=result.mode,
            source=result.source,
            similarity=result.similarity,
        )
    except Exception as e:
        logger.error(
            "chat_message_failed",
            session_id=session_id,
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        reply = ChatMessage(message=PROCESSING_FAILED_MESSAGE, type="bot")

    await _send_bot_message(websocket, sessions, session_id, reply)
    await _send(websocket, "bot_typing", False)


@router.websocket("/ws")
async def chat_websocket(
    websocket: WebSocket,
    engine: AnswerEngine = Depends(get_ws_engine),
    sessions: ChatSessionManager = Depends(get_ws_sessions),
):
    await websocket.accept()
    session_id = uuid.uuid4().hex
    logger.info("chat_session_connected", session_id=session_id)

    await _send_bot_message(
        websocket, sessions, session_id, ChatMessage(message=WELCOME_MESSAGE, type="bot")
    )

    try:
        while True:
            try:
                frame = await websocket.receive_json()
            except json.JSONDecodeError as e:
                sessions.touch(session_id)
                logger.warning("chat_frame_malformed", session_id=session_id, error=str(e))
                await _send(websocket, "error", {"message": "Malformed frame: expected JSON"})
                continue
            sessions.touch(session_id)
            event = frame.get("event") if isinstance(frame, dict) else None
            data = frame.get("data") if isinstance(frame, dict) else None

            if event == "user_message":
                await _handle_user_message(websocket, engine, sessions, session_id, data)
            elif event == "get_chat_history":
                history = sessions.get_history(session_id)
                await _send(
                    websocket,
                    "chat_history",
                    [message.model_dump(mode="json") for message in history],
                )
            elif event == "clear_chat":
                sessions.clear(session_id)
                await _send(websocket, "chat_cleared", None)
                await _send_bot_message(
                    websocket,
                    sessions,
                    session_id,
                    ChatMessage(message=CLEARED_MESSAGE, type="bot"),
                )
            elif event == "user_typing":
                logger.debug("user_typing", session_id=session_id, data=data)
            else:
                await _send(websocket, "error", {"message": f"Unknown event: {event}"})
    except WebSocketDisconnect:
        sessions.touch(session_id)
        logger.info("chat_session_disconnected", session_id=session_id)
