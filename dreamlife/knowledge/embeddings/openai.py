"""
OpenAI Embeddings implementation
"""

import os

from openai import (
    APIConnectionError,
    APITimeoutError,
    AsyncOpenAI,
    InternalServerError,
    RateLimitError,
)

from dreamlife.exceptions import EmbeddingError
from dreamlife.knowledge.embeddings.base import EmbeddingModel
from dreamlife.utils.logging import get_logger
from dreamlife.utils.retry import retry_async

logger = get_logger(__name__)

OPENAI_RETRYABLE = (
    APIConnectionError,
    RateLimitError,
    InternalServerError,
    APITimeoutError,
)


class OpenAIEmbedding(EmbeddingModel):
    """OpenAI Embeddings API implementation."""

    def __init__(
        self,
        model: str = "text-embedding-3-small",
        api_key: str | None = None,
        base_url: str | None = None,
        client: AsyncOpenAI | None = None,
    ):
        from dreamlife.config import settings

        self.model = model

        # Resolve API Key: argument > config > env
        if api_key is None and settings.openai_api_key:
            api_key = settings.openai_api_key.get_secret_value()
        api_key = api_key or os.getenv("OPENAI_API_KEY")
        base_url = base_url or settings.openai_base_url or os.getenv("OPENAI_BASE_URL")

        self.client = client or AsyncOpenAI(api_key=api_key, base_url=base_url)

    @retry_async(exceptions=OPENAI_RETRYABLE)
    async def _create(self, payload: str | list[str]):
        return await self.client.embeddings.create(model=self.model, input=payload)

    async def embed_text(self, text: str) -> list[float]:
        """Embed a single text using OpenAI API."""
        try:
            response = await self._create(text)
        except Exception as e:
            logger.error(
                "embedding_request_failed",
                model=self.model,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise EmbeddingError("Failed to generate embedding") from e

        if not response.data or not response.data[0].embedding:
            logger.error("embedding_response_empty", model=self.model)
            raise EmbeddingError("Invalid embedding response from OpenAI")

        return list(response.data[0].embedding)

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        """Embed multiple texts in batch using OpenAI API."""
        if not texts:
            return []

        try:
            response = await self._create(texts)
        except Exception as e:
            logger.error(
                "embedding_batch_failed",
                model=self.model,
                texts_count=len(texts),
                error=str(e),
                exc_info=True,
            )
            raise EmbeddingError("Failed to generate embeddings") from e

        if len(response.data) != len(texts):
            raise EmbeddingError(
                f"Expected {len(texts)} embeddings, got {len(response.data)}"
            )
        return [list(d.embedding) for d in response.data]
