"""
Main API router - aggregates all sub-routers.
"""

from fastapi import APIRouter


def create_router(prefix: str = "/api") -> APIRouter:
    """
    Create the main API router.

    Args:
        prefix: URL prefix for all routes (default: "/api")

    Returns:
        Configured APIRouter with all sub-routers included
    """
    from .routes import chat, health, knowledge, metrics

    router = APIRouter(prefix=prefix)

    router.include_router(health.router, tags=["Health"])
    router.include_router(chat.router, tags=["Chat"])
    router.include_router(knowledge.router, tags=["Knowledge"])
    router.include_router(metrics.router, tags=["Metrics"])

    return router
