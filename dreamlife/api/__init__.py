"""
DreamLife chat API.

Usage:
    # Mode 1: Standalone server
    from dreamlife.api import start_server
    start_server(host="0.0.0.0", port=3000)

    # Mode 2: Integrate with existing FastAPI
    from fastapi import FastAPI
    from dreamlife.api import create_router

    app = FastAPI()
    app.include_router(create_router())
"""

from .app import create_app
from .router import create_router


def start_server(
    host: str = "0.0.0.0",
    port: int = 3000,
    reload: bool = False,
    **kwargs,
):
    """Start standalone DreamLife API server.

    Args:
        host: Bind host
        port: Bind port
        reload: Enable auto-reload for development
        **kwargs: Additional uvicorn arguments
    """
    import uvicorn

    uvicorn.run(
        "dreamlife.api.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
        **kwargs,
    )


__all__ = ["create_app", "create_router", "start_server"]
