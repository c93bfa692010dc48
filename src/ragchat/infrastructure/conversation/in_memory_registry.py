"""In-memory conversation registry."""

import threading
from uuid import uuid4

from ragchat.domain.entities import Conversation
from ragchat.domain.exceptions import NotFound


class InMemoryConversationRegistry:
    """Lock-guarded map of conversation id -> Conversation.

    Entries live until taken; nothing expires them, so questions that are never
    subscribed to stay in memory for the life of the process.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: dict[str, Conversation] = {}

    def submit(self, question: str) -> str:
        """Store question under a fresh id and return the id."""
        conversation = Conversation(id=str(uuid4()), question=question)
        with self._lock:
            self._pending[conversation.id] = conversation
        return conversation.id

    def take(self, conversation_id: str) -> str:
        """Remove and return the question. Raises NotFound if absent."""
        with self._lock:
            conversation = self._pending.pop(conversation_id, None)
        if conversation is None:
            raise NotFound(f"Conversation {conversation_id} not found")
        return conversation.question

    def pending(self) -> list[Conversation]:
        """Snapshot of conversations still waiting for a subscriber."""
        with self._lock:
            return list(self._pending.values())

    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)
