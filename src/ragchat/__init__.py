"""RAG chat service: retrieval-augmented answers streamed over SSE."""

__version__ = "0.1.0"
