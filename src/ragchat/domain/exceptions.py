"""Domain exceptions."""


class RagChatError(Exception):
    """Base exception for ragchat."""

    pass


class NotFound(RagChatError):
    """Requested resource was not found."""

    pass


class ValidationError(RagChatError):
    """Validation failed for input data."""

    pass


class IngestionFailure(RagChatError):
    """Document ingestion run was aborted."""

    pass


class RetrievalFailure(RagChatError):
    """Query embedding or index search failed."""

    pass


class GenerationFailure(RagChatError):
    """Chat model reported an error while streaming."""

    pass


class SerializationFailure(RagChatError):
    """A stream frame could not be serialized."""

    pass
