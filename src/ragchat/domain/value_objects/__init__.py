"""Domain value objects."""

from ragchat.domain.value_objects.index_match import IndexMatch
from ragchat.domain.value_objects.stream_event import Complete, Error, Partial, StreamEvent
from ragchat.domain.value_objects.stream_state import StreamState

__all__ = [
    "Complete",
    "Error",
    "IndexMatch",
    "Partial",
    "StreamEvent",
    "StreamState",
]
