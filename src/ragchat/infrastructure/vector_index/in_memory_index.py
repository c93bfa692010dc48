"""In-memory vector index."""

import asyncio

from ragchat.domain.entities import DocumentChunk
from ragchat.domain.value_objects import IndexMatch
from ragchat.infrastructure.vector_index.similarity import relevance_score


class InMemoryVectorIndex:
    """Brute-force cosine index kept in process memory. Contents are lost on restart."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._entries: list[tuple[list[float], DocumentChunk]] = []

    async def add(self, embedding: list[float], chunk: DocumentChunk) -> None:
        async with self._lock:
            self._entries.append((list(embedding), chunk))

    async def search(
        self, query_embedding: list[float], k: int, min_score: float
    ) -> list[IndexMatch]:
        if k <= 0:
            return []
        async with self._lock:
            entries = list(self._entries)
        matches = [
            IndexMatch(score=relevance_score(query_embedding, emb), chunk=chunk)
            for emb, chunk in entries
        ]
        matches = [m for m in matches if m.score >= min_score]
        matches.sort(key=lambda m: m.score, reverse=True)
        return matches[:k]

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
