"""Conversation registry port - single-use question store."""

from typing import Protocol


class ConversationRegistry(Protocol):
    """Port binding conversation ids to pending questions."""

    def submit(self, question: str) -> str: ...

    def take(self, conversation_id: str) -> str: ...

    def pending_count(self) -> int: ...
