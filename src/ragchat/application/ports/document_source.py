"""Document source port - enumerates and reads eligible documents."""

from typing import Protocol


class DocumentSource(Protocol):
    """Port for a collection of raw text documents."""

    @property
    def location(self) -> str: ...

    def exists(self) -> bool: ...

    def list_documents(self) -> list[str]: ...

    def read_text(self, path: str) -> str: ...
