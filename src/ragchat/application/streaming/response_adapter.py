"""Streaming response adapter: chat model callbacks -> ordered push stream.

The chat model calls on_partial / on_complete / on_error; a single consumer
iterates events() or frames(). Events go through an unbounded asyncio.Queue, so
a slow consumer makes the buffer grow instead of blocking the producer.
Callbacks must be made from the event loop thread that owns the adapter.
"""

import asyncio
import json
import logging
from collections.abc import AsyncIterator
from dataclasses import asdict, dataclass

from ragchat.domain.exceptions import GenerationFailure, SerializationFailure
from ragchat.domain.value_objects import Complete, Error, Partial, StreamEvent, StreamState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreamFrame:
    """Wire payload sent to the subscriber."""

    text: str
    done: bool


def serialize_frame(frame: StreamFrame) -> str:
    """Encode frame as single-line JSON. Raises SerializationFailure."""
    try:
        return json.dumps(asdict(frame), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationFailure(str(e)) from e


def encode_frame(frame: StreamFrame) -> str:
    """Serialize frame, degrading to an empty payload on failure."""
    try:
        return serialize_frame(frame)
    except SerializationFailure as e:
        logger.warning("Dropping frame payload, serialization failed: %s", e)
        return ""


class StreamingResponseAdapter:
    """Per-conversation state machine: IDLE -> STREAMING -> COMPLETED | FAILED."""

    def __init__(self) -> None:
        self._queue: asyncio.Queue[StreamEvent] = asyncio.Queue()
        self._state = StreamState.IDLE

    @property
    def state(self) -> StreamState:
        return self._state

    def on_partial(self, text: str) -> None:
        if self._reject("partial"):
            return
        self._state = StreamState.STREAMING
        self._queue.put_nowait(Partial(text))

    def on_complete(self, full_text: str) -> None:
        if self._reject("complete"):
            return
        self._state = StreamState.COMPLETED
        self._queue.put_nowait(Complete(full_text))

    def on_error(self, cause: BaseException) -> None:
        if self._reject("error"):
            return
        self._state = StreamState.FAILED
        self._queue.put_nowait(Error(cause))

    def _reject(self, kind: str) -> bool:
        if self._state.is_terminal:
            logger.warning("Ignoring %s callback after stream %s", kind, self._state)
            return True
        return False

    async def events(self) -> AsyncIterator[StreamEvent]:
        """Yield events in arrival order; stops after the terminal event."""
        while True:
            event = await self._queue.get()
            yield event
            if isinstance(event, (Complete, Error)):
                return

    async def frames(self) -> AsyncIterator[str]:
        """Yield serialized frames. Raises GenerationFailure on an Error event."""
        async for event in self.events():
            if isinstance(event, Partial):
                yield encode_frame(StreamFrame(text=event.text, done=False))
            elif isinstance(event, Complete):
                yield encode_frame(StreamFrame(text=event.text, done=True))
            else:
                message = str(event.cause) or type(event.cause).__name__
                raise GenerationFailure(message) from event.cause
