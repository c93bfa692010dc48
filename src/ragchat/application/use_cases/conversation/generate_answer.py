"""Generate answer use case - prompt assembly and chat model invocation."""

import asyncio

from ragchat.application.ports import ChatModel, StreamingResponseHandler
from ragchat.application.use_cases.conversation.rag_prompt import build_messages


class GenerateAnswerUseCase:
    """Start streaming generation for a question and its retrieved contexts."""

    def __init__(self, chat_model: ChatModel) -> None:
        self._chat_model = chat_model

    def execute(
        self,
        question: str,
        contexts: list[str],
        handler: StreamingResponseHandler,
    ) -> asyncio.Task:
        """Schedule generation and return its task without awaiting it.

        Tokens reach the caller through handler callbacks. Cancelling the task
        stops generation.
        """
        messages = build_messages(question, contexts)
        return asyncio.create_task(self._chat_model.stream_chat(messages, handler))
