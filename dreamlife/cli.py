"""
Command-line interface for DreamLife.
"""

import argparse
import asyncio
import json
import sys

from dreamlife.config import settings
from dreamlife.utils.logging import configure_logging


async def _seed() -> int:
    from dreamlife.chat.factory import build_embedder, build_knowledge_store
    from dreamlife.knowledge.seed import seed_knowledge_base

    store = build_knowledge_store(settings)
    try:
        return await seed_knowledge_base(store, build_embedder(settings))
    finally:
        await store.close()


async def _clear() -> int:
    from dreamlife.chat.factory import build_knowledge_store
    from dreamlife.knowledge.seed import clear_knowledge_base

    store = build_knowledge_store(settings)
    try:
        return await clear_knowledge_base(store)
    finally:
        await store.close()


async def _ask(question: str) -> dict:
    from dreamlife.chat.factory import build_engine

    engine = build_engine(settings)
    try:
        result = await engine.handle_question(question)
    finally:
        await engine.store.close()
    return result.model_dump(mode="json")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="DreamLife - dream life chat assistant")
    subparsers = parser.add_subparsers(dest="command")

    serve = subparsers.add_parser("serve", help="Run the HTTP/WebSocket API (default)")
    serve.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind to (default: {settings.port})",
    )
    serve.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    subparsers.add_parser("seed", help="Embed and upsert the starter knowledge base")
    subparsers.add_parser("clear", help="Delete every knowledge entry")

    ask = subparsers.add_parser("ask", help="Resolve one question and print the result")
    ask.add_argument("question")

    args = parser.parse_args(argv)
    configure_logging(settings.log_level, json_logs=settings.log_json)

    if args.command == "seed":
        count = asyncio.run(_seed())
        print(f"Seeded {count} knowledge entries")
        return
    if args.command == "clear":
        removed = asyncio.run(_clear())
        print(f"Removed {removed} knowledge entries")
        return
    if args.command == "ask":
        print(json.dumps(asyncio.run(_ask(args.question)), indent=2))
        return

    from dreamlife.api import start_server

    try:
        start_server(
            host=getattr(args, "host", settings.host),
            port=getattr(args, "port", settings.port),
            reload=getattr(args, "reload", False),
        )
    except KeyboardInterrupt:
        print("\nShutting down DreamLife server...")
        sys.exit(0)


if __name__ == "__main__":
    main()
