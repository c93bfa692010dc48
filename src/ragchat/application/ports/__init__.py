"""Application ports - interfaces for external adapters."""

from ragchat.application.ports.chat_model import ChatModel, StreamingResponseHandler
from ragchat.application.ports.chunker import Chunker
from ragchat.application.ports.conversation_registry import ConversationRegistry
from ragchat.application.ports.document_source import DocumentSource
from ragchat.application.ports.embedding_provider import EmbeddingProvider
from ragchat.application.ports.vector_index import VectorIndex

__all__ = [
    "ChatModel",
    "Chunker",
    "ConversationRegistry",
    "DocumentSource",
    "EmbeddingProvider",
    "StreamingResponseHandler",
    "VectorIndex",
]
