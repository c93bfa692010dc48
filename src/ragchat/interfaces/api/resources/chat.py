"""Chat API resources: question submission and answer stream."""

import asyncio
import json
import logging
from collections.abc import AsyncGenerator, AsyncIterator

import falcon.asgi
from falcon.asgi import SSEvent

from ragchat.application.use_cases.conversation.stream_answer import StreamAnswerUseCase
from ragchat.application.use_cases.conversation.submit_question import SubmitQuestionUseCase
from ragchat.domain.exceptions import GenerationFailure, NotFound, ValidationError

logger = logging.getLogger(__name__)

GENERATION_ERROR_MESSAGE = "The answer could not be generated"


def _error_event(message: str) -> SSEvent:
    """Named `error` event carrying {"message": ...}."""
    return SSEvent(event="error", text=json.dumps({"message": message}, ensure_ascii=False))


async def _read_message(req: falcon.asgi.Request) -> str:
    """Message from JSON body {"message": ...} or from a raw text body."""
    content_type = req.content_type or ""
    if "application/json" in content_type:
        body = await req.get_media()
        message = body.get("message") if isinstance(body, dict) else None
        if not isinstance(message, str):
            raise ValidationError("JSON body must contain a string 'message'")
        return message
    data = await req.stream.read()
    return data.decode("utf-8")


class ChatResource:
    """POST /v1/chat - submit question; GET /v1/chat/{id}/stream - SSE answer."""

    def __init__(
        self,
        submit_question: SubmitQuestionUseCase,
        stream_answer: StreamAnswerUseCase,
        heartbeat: float = 15.0,
    ) -> None:
        self._submit_question = submit_question
        self._stream_answer = stream_answer
        self._heartbeat = heartbeat

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Register question, return conversation id."""
        try:
            message = await _read_message(req)
            conversation_id = self._submit_question.execute(message)
        except (ValidationError, UnicodeDecodeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except falcon.MediaMalformedError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid request body"}
            return
        resp.status = falcon.HTTP_200
        resp.media = {"conversation_id": conversation_id}

    async def on_get_stream(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        conversation_id: str,
    ) -> None:
        """Stream answer frames {"text", "done"}; 404 if the id is unknown or used."""
        try:
            frames = await self._stream_answer.execute(conversation_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Conversation not found"}
            return

        resp.status = falcon.HTTP_200
        resp.cache_control = ["no-cache"]
        resp.sse = self._stream_events(conversation_id, frames)

    async def _stream_events(
        self, conversation_id: str, frames: AsyncGenerator[str, None]
    ) -> AsyncIterator[SSEvent | None]:
        """Yield one data event per frame, or one error event on generation failure.

        Falcon checks for a client disconnect after every event it sends. When no
        frame arrives within the heartbeat a ping (None) is yielded instead, so a
        stalled model cannot keep a dead connection open. Closing this generator
        closes `frames`, which cancels generation.
        """
        pending: asyncio.Future | None = None
        try:
            while True:
                if pending is None:
                    pending = asyncio.ensure_future(anext(frames))
                done, _ = await asyncio.wait({pending}, timeout=self._heartbeat)
                if not done:
                    yield None
                    continue
                finished, pending = pending, None
                try:
                    frame = finished.result()
                except StopAsyncIteration:
                    return
                yield SSEvent(data=frame.encode("utf-8"))
        except GenerationFailure as e:
            logger.warning("Conversation %s: generation failed: %s", conversation_id, e)
            yield _error_event(GENERATION_ERROR_MESSAGE)
        finally:
            if pending is not None and not pending.done():
                pending.cancel()
                try:
                    await pending
                except asyncio.CancelledError:
                    pass
            await frames.aclose()
