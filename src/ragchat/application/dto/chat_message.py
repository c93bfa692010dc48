"""Chat message DTO passed to the chat model port."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class ChatMessage:
    """Single prompt message."""

    role: Literal["system", "user", "assistant"]
    content: str
