"""Application entry point and composition root."""

from ragchat import __version__
from ragchat.application.dto.chunking_config import ChunkingConfig
from ragchat.application.ports import VectorIndex
from ragchat.application.use_cases.conversation.generate_answer import GenerateAnswerUseCase
from ragchat.application.use_cases.conversation.stream_answer import StreamAnswerUseCase
from ragchat.application.use_cases.conversation.submit_question import SubmitQuestionUseCase
from ragchat.application.use_cases.index.check_connection import CheckConnectionUseCase
from ragchat.application.use_cases.index.ingest_documents import IngestDocumentsUseCase
from ragchat.application.use_cases.index.reset_index import ResetIndexUseCase
from ragchat.application.use_cases.search.retrieve_contexts import RetrieveContextsUseCase
from ragchat.config import Settings, get_settings
from ragchat.infrastructure.chat.openai_chat_model import OpenAIChatModel
from ragchat.infrastructure.chunking.sliding_window_chunker import SlidingWindowChunker
from ragchat.infrastructure.conversation.in_memory_registry import InMemoryConversationRegistry
from ragchat.infrastructure.document_sources.filesystem_source import FileSystemDocumentSource
from ragchat.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider
from ragchat.infrastructure.persistence.postgres.connection import create_pool
from ragchat.infrastructure.vector_index.in_memory_index import InMemoryVectorIndex
from ragchat.infrastructure.vector_index.postgres_index import PostgresVectorIndex
from ragchat.interfaces.api.app import create_app
from ragchat.interfaces.api.middleware.cors import CORSMiddleware
from ragchat.interfaces.api.middleware.lifespan import VectorIndexLifespanMiddleware
from ragchat.interfaces.api.resources.chat import ChatResource
from ragchat.interfaces.api.resources.health import HealthResource
from ragchat.interfaces.api.resources.index import IndexResource
from ragchat.log_config import configure_logging


def main() -> None:
    """CLI entry point."""
    print(f"ragchat v{__version__}")


def _build_vector_index(settings: Settings) -> tuple[VectorIndex, list]:
    """Vector index selected by configuration plus the middleware it needs."""
    if settings.vector_index_backend == "memory":
        return InMemoryVectorIndex(), []
    pool = create_pool(settings.database_url)
    vector_index = PostgresVectorIndex(pool, table=settings.vector_table)
    return vector_index, [VectorIndexLifespanMiddleware(pool, vector_index)]


def create_ragchat_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    vector_index, index_middleware = _build_vector_index(settings)
    embedding_provider = OpenAIEmbeddingProvider(
        base_url=settings.embedding_api_url,
        api_key=settings.embedding_api_key,
        model=settings.embedding_model,
        dimensions=settings.embedding_dimensions,
    )
    chat_model = OpenAIChatModel(
        base_url=settings.chat_api_url,
        api_key=settings.chat_api_key,
        model=settings.chat_model,
    )
    registry = InMemoryConversationRegistry()
    document_source = FileSystemDocumentSource(
        settings.raw_data_dir,
        allowed_extensions=settings.allowed_extension_list,
    )

    retrieve_contexts = RetrieveContextsUseCase(
        embedding_provider=embedding_provider,
        vector_index=vector_index,
        min_score=settings.effective_min_score,
        default_k=settings.retrieval_max_results,
    )
    stream_answer = StreamAnswerUseCase(
        registry=registry,
        retrieve_contexts=retrieve_contexts,
        generate_answer=GenerateAnswerUseCase(chat_model),
    )
    ingest_documents = IngestDocumentsUseCase(
        chunker=SlidingWindowChunker(),
        embedding_provider=embedding_provider,
        vector_index=vector_index,
        chunking_config=ChunkingConfig(
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
        ),
    )

    chat_resource = ChatResource(
        SubmitQuestionUseCase(registry),
        stream_answer,
        heartbeat=settings.sse_heartbeat_seconds,
    )
    index_resource = IndexResource(
        ingest_documents, ResetIndexUseCase(vector_index), document_source
    )
    health_resource = HealthResource(
        CheckConnectionUseCase(embedding_provider, vector_index)
    )

    return create_app(
        chat_resource,
        index_resource,
        health_resource,
        middleware=[CORSMiddleware(settings.cors_origin_list), *index_middleware],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_ragchat_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
