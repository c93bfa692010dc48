"""Submit question use case."""

from ragchat.application.ports import ConversationRegistry
from ragchat.domain.exceptions import ValidationError


class SubmitQuestionUseCase:
    """Register a question and return the conversation id to subscribe with."""

    def __init__(self, registry: ConversationRegistry) -> None:
        self._registry = registry

    def execute(self, question: str) -> str:
        if not question or not question.strip():
            raise ValidationError("Message must not be empty")
        return self._registry.submit(question)
