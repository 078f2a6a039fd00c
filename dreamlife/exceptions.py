"""Chat answer-resolution exceptions."""


class ChatError(Exception):
    """Base exception for chat answer resolution."""

    pass


class EmbeddingError(ChatError):
    """Embedding provider returned no usable vector."""

    pass


class KnowledgePoolUnavailable(ChatError):
    """Knowledge store could not be read."""

    pass


class GenerativeError(ChatError):
    """Completion provider failed, timed out or returned nothing."""

    pass


class PersistenceError(ChatError):
    """Knowledge store write failed."""

    pass
