"""PostgreSQL (pgvector) vector index implementation."""

from uuid import uuid4

from psycopg import sql
from psycopg_pool import AsyncConnectionPool

from ragchat.domain.entities import DocumentChunk
from ragchat.domain.value_objects import IndexMatch


class PostgresVectorIndex:
    """Vector index over one pgvector table: id, embedding, text, source_path, chunk_index.

    The table is created by the Alembic migration; this class only reads and writes
    rows. Scores are (2 - cosine_distance) / 2, i.e. cosine similarity mapped to [0, 1].
    """

    def __init__(self, pool: AsyncConnectionPool, table: str = "embeddings") -> None:
        self._pool = pool
        self._table_name = table
        self._table = sql.Identifier(table)

    @property
    def table(self) -> str:
        return self._table_name

    async def table_exists(self) -> bool:
        """Whether the migration has created the vector table."""
        async with self._pool.connection() as conn:
            cur = await conn.execute("SELECT to_regclass(%s) IS NOT NULL", (self._table_name,))
            row = await cur.fetchone()
        return bool(row and row[0])

    async def add(self, embedding: list[float], chunk: DocumentChunk) -> None:
        """Insert one row. No uniqueness check: re-adding a chunk duplicates it."""
        query = sql.SQL(
            "INSERT INTO {} (id, embedding, text, source_path, chunk_index) "
            "VALUES (%s, %s::vector, %s, %s, %s)"
        ).format(self._table)
        async with self._pool.connection() as conn:
            await conn.execute(
                query,
                (uuid4(), embedding, chunk.text, chunk.source_path, chunk.chunk_index),
            )

    async def search(
        self, query_embedding: list[float], k: int, min_score: float
    ) -> list[IndexMatch]:
        """Nearest rows by cosine distance with score >= min_score, best first."""
        if k <= 0:
            return []
        query = sql.SQL(
            """
            SELECT text, source_path, chunk_index,
                   (2 - (embedding <=> %(q)s::vector)) / 2 AS score
            FROM {}
            WHERE (2 - (embedding <=> %(q)s::vector)) / 2 >= %(min_score)s
            ORDER BY embedding <=> %(q)s::vector
            LIMIT %(k)s
            """
        ).format(self._table)
        async with self._pool.connection() as conn:
            cur = await conn.execute(
                query, {"q": query_embedding, "min_score": min_score, "k": k}
            )
            rows = await cur.fetchall()
        return [
            IndexMatch(
                score=float(r[3]),
                chunk=DocumentChunk(source_path=r[1], chunk_index=r[2], text=r[0]),
            )
            for r in rows
        ]

    async def clear(self) -> None:
        """Delete all rows."""
        async with self._pool.connection() as conn:
            await conn.execute(sql.SQL("DELETE FROM {}").format(self._table))
