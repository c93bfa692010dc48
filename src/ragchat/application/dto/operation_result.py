"""Outcome DTOs for index maintenance operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OperationResult:
    """Overall outcome of an ingestion or reset run."""

    success: bool
    message: str | None = None
    documents: int = 0
    chunks: int = 0

    @classmethod
    def failed(cls, message: str) -> "OperationResult":
        return cls(success=False, message=message)
