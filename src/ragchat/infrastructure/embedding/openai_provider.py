"""OpenAI-compatible embedding provider."""

from openai import AsyncOpenAI


class OpenAIEmbeddingProvider:
    """Embedding provider using OpenAI-compatible API (OpenAI, Ollama /v1, vLLM).

    Large inputs are sent in batches of `batch_size`; results keep input order.
    When `dimensions` is set, a vector of any other length raises ValueError.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        dimensions: int | None = None,
        batch_size: int = 64,
    ) -> None:
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key)
        self._model = model
        self._dimensions = dimensions
        self._batch_size = batch_size

    async def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for texts."""
        embeddings: list[list[float]] = []
        for start in range(0, len(texts), self._batch_size):
            response = await self._client.embeddings.create(
                model=self._model,
                input=texts[start : start + self._batch_size],
            )
            embeddings.extend(d.embedding for d in response.data)
        if self._dimensions is not None:
            for emb in embeddings:
                if len(emb) != self._dimensions:
                    raise ValueError(
                        f"Model {self._model} returned {len(emb)} dimensions, "
                        f"expected {self._dimensions}"
                    )
        return embeddings
