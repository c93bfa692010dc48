"""OpenAI-compatible streaming chat model."""

import logging

from openai import AsyncOpenAI

from ragchat.application.dto.chat_message import ChatMessage
from ragchat.application.ports import StreamingResponseHandler

logger = logging.getLogger(__name__)


class OpenAIChatModel:
    """Streams chat completions and relays them to a response handler."""

    def __init__(self, base_url: str, api_key: str, model: str) -> None:
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key)
        self._model = model

    async def stream_chat(
        self, messages: list[ChatMessage], handler: StreamingResponseHandler
    ) -> None:
        """Call handler.on_partial per delta, then on_complete or on_error once.

        Cancellation is not reported to the handler; the task simply stops.
        """
        parts: list[str] = []
        try:
            stream = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": m.role, "content": m.content} for m in messages],
                stream=True,
            )
            async for chunk in stream:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta.content
                if delta:
                    parts.append(delta)
                    handler.on_partial(delta)
        except Exception as e:
            logger.warning("Chat model %s failed while streaming: %s", self._model, e)
            handler.on_error(e)
            return
        handler.on_complete("".join(parts))
