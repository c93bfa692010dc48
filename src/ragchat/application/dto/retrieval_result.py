"""Retrieval result DTO."""

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RetrievalResult:
    """Context texts ordered by descending similarity (scores are not exposed)."""

    contexts: list[str] = field(default_factory=list)

    def __iter__(self) -> Iterator[str]:
        return iter(self.contexts)

    def __len__(self) -> int:
        return len(self.contexts)

    @classmethod
    def empty(cls) -> "RetrievalResult":
        return cls(contexts=[])
