"""Domain entities."""

from ragchat.domain.entities.conversation import Conversation
from ragchat.domain.entities.document_chunk import DocumentChunk

__all__ = [
    "Conversation",
    "DocumentChunk",
]
