"""Vector index port - embedding-keyed chunk store."""

from typing import Protocol

from ragchat.domain.entities import DocumentChunk
from ragchat.domain.value_objects import IndexMatch


class VectorIndex(Protocol):
    """Port for storing chunk embeddings and similarity search."""

    async def add(self, embedding: list[float], chunk: DocumentChunk) -> None: ...

    async def search(
        self, query_embedding: list[float], k: int, min_score: float
    ) -> list[IndexMatch]: ...

    async def clear(self) -> None: ...
