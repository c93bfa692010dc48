"""Chunker port - text splitting strategies."""

from typing import Protocol

from ragchat.application.dto.chunking_config import ChunkingConfig
from ragchat.domain.entities import DocumentChunk


class Chunker(Protocol):
    """Port for splitting document text into chunks."""

    def split(
        self, text: str, source_path: str, config: ChunkingConfig
    ) -> list[DocumentChunk]: ...
