"""
FastAPI application for the DreamLife chat API.
"""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dreamlife import __version__
from dreamlife.chat.engine import AnswerEngine
from dreamlife.chat.sessions import ChatSessionManager
from dreamlife.config import DreamLifeSettings
from dreamlife.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


async def _cleanup_sessions_periodically(sessions: ChatSessionManager, interval: float):
    while True:
        await asyncio.sleep(interval)
        sessions.cleanup_inactive()


def create_app(
    engine: AnswerEngine | None = None,
    settings: DreamLifeSettings | None = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        engine: Pre-built engine; built from settings at startup when omitted
        settings: Defaults to the global settings instance

    Returns:
        Configured FastAPI application
    """
    from .router import create_router

    if settings is None:
        from dreamlife.config import settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan event handler for startup and shutdown."""
        configure_logging(settings.log_level, json_logs=settings.log_json)
        logger.info("dreamlife_api_starting")

        if engine is None:
            from dreamlife.chat.factory import build_engine

            try:
                app.state.engine = build_engine(settings)
            except Exception as e:
                logger.error("dreamlife_api_init_failed", error=str(e), exc_info=True)
                raise
        else:
            app.state.engine = engine

        app.state.sessions = ChatSessionManager(
            history_limit=settings.session_history_limit,
            idle_timeout=settings.session_idle_timeout,
        )
        cleanup_task = asyncio.create_task(
            _cleanup_sessions_periodically(
                app.state.sessions, settings.session_cleanup_interval
            )
        )

        yield

        cleanup_task.cancel()
        try:
            await cleanup_task
        except asyncio.CancelledError:
            pass
        await app.state.engine.store.close()
        logger.info("dreamlife_api_shutdown")

    app = FastAPI(
        title="DreamLife Chat API",
        description="Answer resolution over a self-growing knowledge base.",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_router(prefix=settings.api_prefix))

    return app
