"""Vector index search match."""

from dataclasses import dataclass

from ragchat.domain.entities import DocumentChunk


@dataclass(frozen=True)
class IndexMatch:
    """Chunk returned by a similarity search with its relevance score."""

    score: float
    chunk: DocumentChunk
