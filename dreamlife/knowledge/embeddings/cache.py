"""
Process-local embedding cache.
"""

from collections import OrderedDict


class EmbeddingCache:
    """
    Maps raw text to the vector the provider returned for it.

    Unbounded unless ``max_size`` is given, in which case the least recently
    used entry is evicted first.
    """

    def __init__(self, max_size: int | None = None):
        if max_size is not None and max_size < 1:
            raise ValueError("max_size must be >= 1")
        self.max_size = max_size
        self._entries: OrderedDict[str, list[float]] = OrderedDict()

    def get(self, text: str) -> list[float] | None:
        vector = self._entries.get(text)
        if vector is not None and self.max_size is not None:
            self._entries.move_to_end(text)
        return vector

    def put(self, text: str, vector: list[float]) -> None:
        self._entries[text] = vector
        self._entries.move_to_end(text)
        if self.max_size is not None:
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, text: str) -> bool:
        return text in self._entries

    def __len__(self) -> int:
        return len(self._entries)
