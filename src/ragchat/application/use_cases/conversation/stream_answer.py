"""Stream answer use case - conversation subscription pipeline."""

import asyncio
import logging
from collections.abc import AsyncGenerator

from ragchat.application.ports import ConversationRegistry
from ragchat.application.streaming.response_adapter import StreamingResponseAdapter
from ragchat.application.use_cases.conversation.generate_answer import GenerateAnswerUseCase
from ragchat.application.use_cases.search.retrieve_contexts import RetrieveContextsUseCase
from ragchat.domain.exceptions import GenerationFailure

logger = logging.getLogger(__name__)


class StreamAnswerUseCase:
    """Take the pending question, retrieve contexts and relay generated frames."""

    def __init__(
        self,
        registry: ConversationRegistry,
        retrieve_contexts: RetrieveContextsUseCase,
        generate_answer: GenerateAnswerUseCase,
    ) -> None:
        self._registry = registry
        self._retrieve_contexts = retrieve_contexts
        self._generate_answer = generate_answer

    async def execute(self, conversation_id: str) -> AsyncGenerator[str, None]:
        """Consume the conversation and return its frame iterator.

        Raises NotFound before anything is streamed when the id is unknown or
        already consumed. The returned iterator raises GenerationFailure as its
        terminal error.
        """
        question = self._registry.take(conversation_id)
        result = await self._retrieve_contexts.execute(question)
        logger.info(
            "Conversation %s: %d contexts retrieved", conversation_id, len(result)
        )
        return self._relay(conversation_id, question, list(result))

    async def _relay(
        self, conversation_id: str, question: str, contexts: list[str]
    ) -> AsyncGenerator[str, None]:
        adapter = StreamingResponseAdapter()
        task = self._generate_answer.execute(question, contexts, adapter)
        task.add_done_callback(lambda t: _fail_if_unterminated(t, adapter))
        try:
            async for frame in adapter.frames():
                yield frame
        finally:
            if not task.done() and not adapter.state.is_terminal:
                task.cancel()
                logger.info("Conversation %s: subscriber gone, generation cancelled", conversation_id)


def _fail_if_unterminated(task: asyncio.Task, adapter: StreamingResponseAdapter) -> None:
    """Close the stream when the chat model stops without a terminal callback."""
    if task.cancelled() or adapter.state.is_terminal:
        return
    exc = task.exception()
    adapter.on_error(exc or GenerationFailure("Chat model finished without a terminal event"))
