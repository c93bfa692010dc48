"""Check connection use case - readiness probe for embedding model and index."""

import logging

from ragchat.application.ports import EmbeddingProvider, VectorIndex

logger = logging.getLogger(__name__)

_PROBE_TEXT = "test"


class CheckConnectionUseCase:
    """Embed a probe text and run a one-result search against the index."""

    def __init__(self, embedding_provider: EmbeddingProvider, vector_index: VectorIndex) -> None:
        self._embedding_provider = embedding_provider
        self._vector_index = vector_index

    async def execute(self) -> tuple[bool, str | None]:
        """Return (ready, error message)."""
        try:
            embeddings = await self._embedding_provider.embed([_PROBE_TEXT])
            if not embeddings:
                return False, "Embedding provider returned no vector"
            await self._vector_index.search(embeddings[0], 1, 0.0)
        except Exception as e:
            logger.warning("Connection check failed: %s", e)
            return False, str(e)
        return True, None
