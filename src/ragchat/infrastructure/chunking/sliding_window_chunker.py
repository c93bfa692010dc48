"""Sliding window text chunker implementation."""

from ragchat.application.dto.chunking_config import ChunkingConfig
from ragchat.domain.entities import DocumentChunk


class SlidingWindowChunker:
    """Chunker using fixed-size character windows with overlap."""

    def split(
        self, text: str, source_path: str, config: ChunkingConfig
    ) -> list[DocumentChunk]:
        """Split text into windows of chunk_size advancing by chunk_size - overlap.

        Windows cover the whole text; only the last one may be shorter. Text is
        not stripped, so offsets map directly onto the source document.
        """
        chunks: list[DocumentChunk] = []
        length = len(text)
        start = 0
        while start < length:
            end = min(start + config.chunk_size, length)
            chunks.append(
                DocumentChunk(
                    source_path=source_path,
                    chunk_index=len(chunks),
                    text=text[start:end],
                )
            )
            if end >= length:
                break
            start += config.step
        return chunks
