"""Document chunk entity - contiguous window of a source document."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentChunk:
    """Chunk - text window with its source path and position in the document."""

    source_path: str
    chunk_index: int
    text: str
