"""Ingest documents use case - chunk, embed and index a document source."""

import logging

from ragchat.application.dto.chunking_config import ChunkingConfig
from ragchat.application.dto.operation_result import OperationResult
from ragchat.application.ports import Chunker, DocumentSource, EmbeddingProvider, VectorIndex
from ragchat.domain.exceptions import IngestionFailure

logger = logging.getLogger(__name__)


class IngestDocumentsUseCase:
    """Load every eligible document of a source into the vector index.

    The run stops at the first failing document. Chunks written before the
    failure stay in the index; re-running without a reset duplicates them.
    """

    def __init__(
        self,
        chunker: Chunker,
        embedding_provider: EmbeddingProvider,
        vector_index: VectorIndex,
        chunking_config: ChunkingConfig,
    ) -> None:
        self._chunker = chunker
        self._embedding_provider = embedding_provider
        self._vector_index = vector_index
        self._chunking_config = chunking_config

    async def execute(self, source: DocumentSource) -> OperationResult:
        """Ingest source; failures are reported in the result, not raised."""
        try:
            return await self._ingest(source)
        except IngestionFailure as e:
            logger.error("Ingestion of %s failed: %s", source.location, e)
            return OperationResult.failed(str(e))

    async def _ingest(self, source: DocumentSource) -> OperationResult:
        if not source.exists():
            raise IngestionFailure(f"Document source {source.location} does not exist")

        try:
            paths = source.list_documents()
        except OSError as e:
            raise IngestionFailure(f"Cannot list {source.location}: {e}") from e

        if not paths:
            logger.info("No documents found to process in %s", source.location)
            return OperationResult(success=True, message="No documents found to process")

        logger.info("Processing %d documents from %s", len(paths), source.location)
        total_chunks = 0
        for path in paths:
            total_chunks += await self._ingest_document(source, path)

        logger.info("Indexed %d documents, %d chunks", len(paths), total_chunks)
        return OperationResult(
            success=True,
            message=f"Processed {len(paths)} documents ({total_chunks} chunks)",
            documents=len(paths),
            chunks=total_chunks,
        )

    async def _ingest_document(self, source: DocumentSource, path: str) -> int:
        try:
            text = source.read_text(path)
        except OSError as e:
            raise IngestionFailure(f"Cannot read {path}: {e}") from e

        chunks = self._chunker.split(text, path, self._chunking_config)
        if not chunks:
            logger.info("Processed document %s (0 chunks)", path)
            return 0

        try:
            embeddings = await self._embedding_provider.embed([c.text for c in chunks])
        except Exception as e:
            raise IngestionFailure(f"Embedding failed for {path}: {e}") from e
        if len(embeddings) != len(chunks):
            raise IngestionFailure(
                f"Embedding provider returned {len(embeddings)} vectors for {len(chunks)} chunks of {path}"
            )

        try:
            for chunk, embedding in zip(chunks, embeddings, strict=True):
                await self._vector_index.add(embedding, chunk)
        except Exception as e:
            raise IngestionFailure(f"Indexing failed for {path}: {e}") from e

        logger.info("Processed document %s (%d chunks)", path, len(chunks))
        return len(chunks)
