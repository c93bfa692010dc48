"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from ragchat.interfaces.api.resources.chat import ChatResource
from ragchat.interfaces.api.resources.health import HealthResource
from ragchat.interfaces.api.resources.index import IndexResource

logger = logging.getLogger(__name__)


async def _log_exception(req, resp, ex, params):
    logger.error(
        "Unhandled error on %s %s", req.method, req.path, exc_info=(type(ex), ex, ex.__traceback__)
    )
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    chat_resource: ChatResource,
    index_resource: IndexResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/chat", chat_resource)
    app.add_route("/v1/chat/{conversation_id}/stream", chat_resource, suffix="stream")
    app.add_route("/v1/index/ingest", index_resource, suffix="ingest")
    app.add_route("/v1/index/reset", index_resource, suffix="reset")
    return app
