"""Chunking configuration DTO."""

from dataclasses import dataclass

from ragchat.domain.exceptions import ValidationError


@dataclass(frozen=True)
class ChunkingConfig:
    """Configuration for text chunking. Requires 0 < chunk_overlap < chunk_size."""

    chunk_size: int = 500
    chunk_overlap: int = 100

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValidationError(f"chunk_size must be positive, got {self.chunk_size}")
        if not 0 < self.chunk_overlap < self.chunk_size:
            raise ValidationError(
                f"chunk_overlap must be in (0, {self.chunk_size}), got {self.chunk_overlap}"
            )

    @property
    def step(self) -> int:
        return self.chunk_size - self.chunk_overlap
