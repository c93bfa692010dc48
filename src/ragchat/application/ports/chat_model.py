"""Chat model port - streaming text generation."""

from typing import Protocol

from ragchat.application.dto.chat_message import ChatMessage


class StreamingResponseHandler(Protocol):
    """Receives generation callbacks: partials, then exactly one terminal call."""

    def on_partial(self, text: str) -> None: ...

    def on_complete(self, full_text: str) -> None: ...

    def on_error(self, cause: BaseException) -> None: ...


class ChatModel(Protocol):
    """Port for streaming chat completion."""

    async def stream_chat(
        self, messages: list[ChatMessage], handler: StreamingResponseHandler
    ) -> None: ...
