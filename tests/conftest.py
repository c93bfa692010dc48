"""Pytest fixtures for ragchat tests."""

from __future__ import annotations

import asyncio

import pytest

from ragchat.application.dto.chat_message import ChatMessage
from ragchat.application.dto.chunking_config import ChunkingConfig
from ragchat.infrastructure.chunking.sliding_window_chunker import SlidingWindowChunker
from ragchat.infrastructure.conversation.in_memory_registry import InMemoryConversationRegistry
from ragchat.infrastructure.vector_index.in_memory_index import InMemoryVectorIndex


# --- Fake capabilities ---


class FakeEmbeddingProvider:
    """Deterministic embeddings: explicit vectors per text, else a default vector."""

    def __init__(
        self,
        vectors: dict[str, list[float]] | None = None,
        default: list[float] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.vectors = vectors or {}
        self.default = default or [1.0, 0.0, 0.0]
        self.error = error
        self.calls: list[list[str]] = []

    async def embed(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        if self.error:
            raise self.error
        return [self.vectors.get(t, self.default) for t in texts]


class FakeChatModel:
    """Replays scripted partials, then completes or fails."""

    def __init__(
        self,
        partials: list[str] | None = None,
        complete: str | None = None,
        error: Exception | None = None,
    ) -> None:
        self.partials = partials or []
        self.complete = complete
        self.error = error
        self.messages: list[ChatMessage] | None = None

    async def stream_chat(self, messages, handler) -> None:
        self.messages = messages
        for p in self.partials:
            await asyncio.sleep(0)
            handler.on_partial(p)
        if self.error is not None:
            handler.on_error(self.error)
        else:
            handler.on_complete(
                self.complete if self.complete is not None else "".join(self.partials)
            )


class HangingChatModel:
    """Emits one partial and then waits until cancelled."""

    def __init__(self) -> None:
        self.started = asyncio.Event()
        self.stopped = asyncio.Event()
        self.cancelled = False

    async def stream_chat(self, messages, handler) -> None:
        handler.on_partial("thinking")
        self.started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            self.stopped.set()
            raise


class FakeDocumentSource:
    """In-memory document source: path -> text, or path -> exception to raise."""

    def __init__(self, documents: dict[str, str | Exception] | None = None, exists: bool = True) -> None:
        self.documents = documents or {}
        self._exists = exists

    @property
    def location(self) -> str:
        return "memory://raw_data"

    def exists(self) -> bool:
        return self._exists

    def list_documents(self) -> list[str]:
        return sorted(self.documents)

    def read_text(self, path: str) -> str:
        value = self.documents[path]
        if isinstance(value, Exception):
            raise value
        return value


# --- Fixtures ---


@pytest.fixture
def chunking_config() -> ChunkingConfig:
    """Reference chunking parameters: 500 characters, 100 overlap."""
    return ChunkingConfig(chunk_size=500, chunk_overlap=100)


@pytest.fixture
def chunker() -> SlidingWindowChunker:
    return SlidingWindowChunker()


@pytest.fixture
def embedding_provider() -> FakeEmbeddingProvider:
    return FakeEmbeddingProvider()


@pytest.fixture
def vector_index() -> InMemoryVectorIndex:
    return InMemoryVectorIndex()


@pytest.fixture
def registry() -> InMemoryConversationRegistry:
    return InMemoryConversationRegistry()
