"""ASGI lifespan middleware for the pgvector index."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from ragchat.infrastructure.vector_index.postgres_index import PostgresVectorIndex

logger = logging.getLogger(__name__)


class VectorIndexLifespanMiddleware:
    """Opens the pool and checks the vector table on startup; closes the pool on shutdown.

    A missing table is logged, not raised: the schema belongs to the Alembic
    migration and readiness reports the index as unavailable until it is applied.
    """

    def __init__(
        self,
        pool: AsyncConnectionPool,
        vector_index: PostgresVectorIndex,
        open_timeout: float = 30.0,
    ) -> None:
        self._pool = pool
        self._vector_index = vector_index
        self._open_timeout = open_timeout

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.open(wait=True, timeout=self._open_timeout)
        logger.info("Database pool opened (max_size=%d)", self._pool.max_size)
        if not await self._vector_index.table_exists():
            logger.warning(
                "Vector table %s not found, run `alembic upgrade head`",
                self._vector_index.table,
            )

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close()
        logger.info("Database pool closed")
