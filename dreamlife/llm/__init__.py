"""
Completion model layer
"""

from dreamlife.llm.base import CompletionModel
from dreamlife.llm.openai import OpenAICompletionModel

__all__ = ["CompletionModel", "OpenAICompletionModel"]
