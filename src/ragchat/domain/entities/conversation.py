"""Conversation entity - pending question awaiting a stream subscriber."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Conversation:
    """Conversation - opaque id bound to the question it was submitted with."""

    id: str
    question: str
