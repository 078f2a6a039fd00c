"""
OpenAI completion model implementation
"""

import os

from openai import (
    APIConnectionError,
    APITimeoutError,
    AsyncOpenAI,
    InternalServerError,
    RateLimitError,
)
from pydantic import ConfigDict, Field, SecretStr

from dreamlife.llm.base import CompletionModel
from dreamlife.utils.logging import get_logger
from dreamlife.utils.retry import retry_async

logger = get_logger(__name__)

# Retryable exceptions for OpenAI
OPENAI_RETRYABLE = (
    APIConnectionError,
    RateLimitError,
    InternalServerError,
    APITimeoutError,
)


class OpenAICompletionModel(CompletionModel):
    """
    OpenAI chat completion model.

    Supports gpt-3.5-turbo, GPT-4 and all OpenAI API compatible models.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, protected_namespaces=())

    id: str = "openai/gpt-3.5-turbo"
    name: str = "gpt-3.5-turbo"
    model_name: str | None = Field(
        default=None,
        description="Actual model name for API calls (e.g., gpt-4o-mini)",
    )
    api_key: SecretStr | None = Field(default=None, exclude=True)
    base_url: str | None = Field(default=None)
    client: AsyncOpenAI | None = Field(default=None, exclude=True)

    def model_post_init(self, __context) -> None:
        """Initialize AsyncOpenAI client after model creation."""
        from dreamlife.config import settings

        # Resolve API Key: argument > config > env
        if self.api_key:
            resolved_api_key = self.api_key.get_secret_value()
        elif settings.openai_api_key:
            resolved_api_key = settings.openai_api_key.get_secret_value()
        else:
            resolved_api_key = os.getenv("OPENAI_API_KEY")

        resolved_base_url = (
            self.base_url or settings.openai_base_url or os.getenv("OPENAI_BASE_URL")
        )

        if self.client is None:
            self.client = AsyncOpenAI(
                api_key=resolved_api_key,
                base_url=resolved_base_url,
            )

        super().model_post_init(__context)

    @retry_async(exceptions=OPENAI_RETRYABLE)
    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 300,
    ) -> str:
        actual_model = self.model_name or self.name

        logger.info(
            "llm_request",
            model=actual_model,
            temperature=temperature,
            max_tokens=max_tokens,
            prompt_chars=len(system_prompt) + len(user_prompt),
        )

        try:
            completion = await self.client.chat.completions.create(
                model=actual_model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except Exception as e:
            logger.error(
                "llm_request_failed",
                model=actual_model,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise

        if not completion.choices:
            return ""

        usage = getattr(completion, "usage", None)
        if usage is not None:
            logger.debug(
                "llm_usage",
                model=actual_model,
                total_tokens=usage.total_tokens,
            )

        content = completion.choices[0].message.content
        return (content or "").strip()


__all__ = ["OpenAICompletionModel"]
