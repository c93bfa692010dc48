"""Vector index maintenance resources."""

import falcon.asgi

from ragchat.application.dto.operation_result import OperationResult
from ragchat.application.ports import DocumentSource
from ragchat.application.use_cases.index.ingest_documents import IngestDocumentsUseCase
from ragchat.application.use_cases.index.reset_index import ResetIndexUseCase


class IndexResource:
    """POST /v1/index/ingest - index raw documents; POST /v1/index/reset - clear index."""

    def __init__(
        self,
        ingest_documents: IngestDocumentsUseCase,
        reset_index: ResetIndexUseCase,
        document_source: DocumentSource,
    ) -> None:
        self._ingest_documents = ingest_documents
        self._reset_index = reset_index
        self._document_source = document_source

    async def on_post_ingest(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Chunk, embed and index every eligible document of the source."""
        result = await self._ingest_documents.execute(self._document_source)
        _write_result(resp, result)
        resp.media["documents"] = result.documents
        resp.media["chunks"] = result.chunks

    async def on_post_reset(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Remove every entry from the index."""
        result = await self._reset_index.execute()
        _write_result(resp, result)


def _write_result(resp: falcon.asgi.Response, result: OperationResult) -> None:
    resp.status = falcon.HTTP_200 if result.success else falcon.HTTP_500
    resp.media = {"success": result.success, "message": result.message}
