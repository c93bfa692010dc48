"""Lifecycle states of a streamed answer."""

from enum import StrEnum


class StreamState(StrEnum):
    """States of the streaming response adapter."""

    IDLE = "idle"
    STREAMING = "streaming"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (StreamState.COMPLETED, StreamState.FAILED)
