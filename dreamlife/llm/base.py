"""
Completion model abstraction layer

Responsibilities:
- Encapsulate different LLM provider APIs
- Provide a single-shot completion interface

Does NOT handle:
- Timeouts and fallbacks (the answer engine owns those)
- Prompt construction
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field


class CompletionModel(BaseModel, ABC):
    """
    Unified completion model abstract base class.

    Implementations return the assistant text for one system + user prompt.
    """

    id: str = Field(description="Model identifier, format: provider/model-name")
    name: str = Field(description="Model name")

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="allow")

    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 300,
    ) -> str:
        """
        Produce a completion.

        Args:
            system_prompt: Instructions for the model
            user_prompt: The user turn
            temperature: Sampling temperature
            max_tokens: Completion length limit

        Returns:
            Completion text, possibly empty
        """
        pass


__all__ = ["CompletionModel"]
