"""Reset index use case."""

import logging

from ragchat.application.dto.operation_result import OperationResult
from ragchat.application.ports import VectorIndex

logger = logging.getLogger(__name__)


class ResetIndexUseCase:
    """Remove every entry from the vector index."""

    def __init__(self, vector_index: VectorIndex) -> None:
        self._vector_index = vector_index

    async def execute(self) -> OperationResult:
        try:
            await self._vector_index.clear()
        except Exception as e:
            logger.error("Failed to reset index: %s", e)
            return OperationResult.failed(f"Failed to reset vector store index: {e}")
        logger.info("Vector store index reset")
        return OperationResult(success=True, message="Vector store index reset successfully")
