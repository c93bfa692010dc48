"""Stream events relayed from the chat model to a subscriber."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Partial:
    """Token (or token group) produced while the answer is being generated."""

    text: str


@dataclass(frozen=True)
class Complete:
    """Terminal event carrying the full generated answer."""

    text: str


@dataclass(frozen=True)
class Error:
    """Terminal event carrying the failure reported by the chat model."""

    cause: BaseException


StreamEvent = Partial | Complete | Error
