"""Fixtures for API tests."""

from dataclasses import dataclass

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from ragchat.application.dto.chunking_config import ChunkingConfig
from ragchat.application.use_cases.conversation.generate_answer import GenerateAnswerUseCase
from ragchat.application.use_cases.conversation.stream_answer import StreamAnswerUseCase
from ragchat.application.use_cases.conversation.submit_question import SubmitQuestionUseCase
from ragchat.application.use_cases.index.check_connection import CheckConnectionUseCase
from ragchat.application.use_cases.index.ingest_documents import IngestDocumentsUseCase
from ragchat.application.use_cases.index.reset_index import ResetIndexUseCase
from ragchat.application.use_cases.search.retrieve_contexts import RetrieveContextsUseCase
from ragchat.infrastructure.chunking.sliding_window_chunker import SlidingWindowChunker
from ragchat.infrastructure.conversation.in_memory_registry import InMemoryConversationRegistry
from ragchat.infrastructure.vector_index.in_memory_index import InMemoryVectorIndex
from ragchat.interfaces.api.app import create_app
from ragchat.interfaces.api.middleware.cors import CORSMiddleware
from ragchat.interfaces.api.resources.chat import ChatResource
from ragchat.interfaces.api.resources.health import HealthResource
from ragchat.interfaces.api.resources.index import IndexResource

from tests.conftest import FakeChatModel, FakeDocumentSource, FakeEmbeddingProvider


@dataclass
class AppDeps:
    """Swappable collaborators behind the test app."""

    chat_model: object
    embedding_provider: FakeEmbeddingProvider
    vector_index: object
    document_source: FakeDocumentSource
    registry: InMemoryConversationRegistry


def build_app(
    deps: AppDeps, cors_origins: list[str] | None = None, heartbeat: float = 15.0
) -> App:
    """Falcon ASGI app wired the way the composition root wires it."""
    retrieve_contexts = RetrieveContextsUseCase(
        embedding_provider=deps.embedding_provider,
        vector_index=deps.vector_index,
        min_score=0.7,
        default_k=3,
    )
    stream_answer = StreamAnswerUseCase(
        registry=deps.registry,
        retrieve_contexts=retrieve_contexts,
        generate_answer=GenerateAnswerUseCase(deps.chat_model),
    )
    ingest_documents = IngestDocumentsUseCase(
        chunker=SlidingWindowChunker(),
        embedding_provider=deps.embedding_provider,
        vector_index=deps.vector_index,
        chunking_config=ChunkingConfig(chunk_size=500, chunk_overlap=100),
    )
    return create_app(
        ChatResource(SubmitQuestionUseCase(deps.registry), stream_answer, heartbeat=heartbeat),
        IndexResource(ingest_documents, ResetIndexUseCase(deps.vector_index), deps.document_source),
        HealthResource(CheckConnectionUseCase(deps.embedding_provider, deps.vector_index)),
        middleware=[CORSMiddleware(cors_origins or ["http://localhost:8080"])],
    )


def build_client(deps: AppDeps, cors_origins: list[str] | None = None) -> TestClient:
    return TestClient(build_app(deps, cors_origins))


@pytest.fixture
def deps() -> AppDeps:
    return AppDeps(
        chat_model=FakeChatModel(partials=["Hel", "lo"]),
        embedding_provider=FakeEmbeddingProvider(),
        vector_index=InMemoryVectorIndex(),
        document_source=FakeDocumentSource({"raw_data/a.md": "Ragchat answers questions."}),
        registry=InMemoryConversationRegistry(),
    )


@pytest.fixture
def client(deps: AppDeps) -> TestClient:
    return build_client(deps)


@pytest.fixture
def make_client():
    """Factory for tests that swap collaborators before building the app."""
    return build_client


@pytest.fixture
def make_app():
    """Factory for tests that drive the ASGI app directly."""
    return build_app
