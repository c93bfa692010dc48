"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool


def create_pool(
    conninfo: str,
    min_size: int = 1,
    max_size: int = 10,
    application_name: str = "ragchat",
) -> AsyncConnectionPool:
    """Create async connection pool for the vector index.

    Pool is created with open=False. Caller must call await pool.open()
    before use (VectorIndexLifespanMiddleware does it in the ASGI lifespan).
    Connections are health-checked on checkout so a restarted database
    does not surface as a failed search.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
        kwargs={"application_name": application_name},
        check=AsyncConnectionPool.check_connection,
    )
