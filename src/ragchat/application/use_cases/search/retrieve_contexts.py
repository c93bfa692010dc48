"""Retrieve contexts use case - query embedding + vector search."""

import logging

from ragchat.application.dto.retrieval_result import RetrievalResult
from ragchat.application.ports import EmbeddingProvider, VectorIndex
from ragchat.domain.exceptions import RetrievalFailure

logger = logging.getLogger(__name__)


class RetrieveContextsUseCase:
    """Turn a query into the k most similar chunk texts.

    Failures never propagate: a broken embedding model or an unreachable index
    yields an empty result so the conversation still gets an answer.
    """

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_index: VectorIndex,
        min_score: float,
        default_k: int = 3,
    ) -> None:
        self._embedding_provider = embedding_provider
        self._vector_index = vector_index
        self._min_score = min_score
        self._default_k = default_k

    async def execute(self, query: str, k: int | None = None) -> RetrievalResult:
        """Search the index; returns at most k texts ordered best first."""
        k = self._default_k if k is None else k
        if k <= 0:
            return RetrievalResult.empty()
        try:
            matches = await self._search(query, k)
        except RetrievalFailure as e:
            logger.warning("Retrieval failed, continuing without context: %s", e)
            return RetrievalResult.empty()
        logger.debug("Retrieved %d contexts (k=%d, min_score=%s)", len(matches), k, self._min_score)
        return RetrievalResult(contexts=[m.chunk.text for m in matches])

    async def _search(self, query: str, k: int):
        try:
            embeddings = await self._embedding_provider.embed([query])
        except Exception as e:
            raise RetrievalFailure(f"Query embedding failed: {e}") from e
        if not embeddings:
            raise RetrievalFailure("Embedding provider returned no vector for query")
        try:
            return await self._vector_index.search(embeddings[0], k, self._min_score)
        except Exception as e:
            raise RetrievalFailure(f"Vector index search failed: {e}") from e
