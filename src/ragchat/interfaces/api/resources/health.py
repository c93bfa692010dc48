"""Health check endpoints."""

import falcon.asgi

from ragchat.application.use_cases.index.check_connection import CheckConnectionUseCase


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, check_connection: CheckConnectionUseCase | None = None) -> None:
        self._check_connection = check_connection

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (embedding model, vector index)."""
        if self._check_connection is None:
            resp.media = {"status": "ready"}
            resp.status = falcon.HTTP_200
            return
        ready, error = await self._check_connection.execute()
        if ready:
            resp.media = {"status": "ready"}
            resp.status = falcon.HTTP_200
        else:
            resp.media = {"status": "unavailable", "error": error}
            resp.status = falcon.HTTP_503
