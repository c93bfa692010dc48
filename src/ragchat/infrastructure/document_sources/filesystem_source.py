"""Filesystem document source: text files under a root directory."""

from pathlib import Path

DEFAULT_ALLOWED_EXTENSIONS: tuple[str, ...] = ("md", "txt")


def decode_text(data: bytes) -> str:
    """Decode as UTF-8, falling back to cp1251, then UTF-8 with replacement."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        try:
            return data.decode("cp1251")
        except UnicodeDecodeError:
            return data.decode("utf-8", errors="replace")


def is_allowed_file_type(filename: str, allowed_extensions: tuple[str, ...]) -> bool:
    """Case-insensitive extension check (extension without the dot)."""
    ext = Path(filename).suffix.lstrip(".").lower()
    return bool(ext) and ext in {e.lower() for e in allowed_extensions}


class FileSystemDocumentSource:
    """Walks a directory recursively and reads eligible text documents."""

    def __init__(
        self,
        root: str | Path,
        allowed_extensions: tuple[str, ...] = DEFAULT_ALLOWED_EXTENSIONS,
    ) -> None:
        self._root = Path(root)
        self._allowed_extensions = tuple(allowed_extensions)

    @property
    def location(self) -> str:
        return str(self._root)

    def exists(self) -> bool:
        return self._root.is_dir()

    def list_documents(self) -> list[str]:
        """Return eligible regular files, sorted for a stable ingestion order."""
        return sorted(
            str(p)
            for p in self._root.rglob("*")
            if p.is_file() and is_allowed_file_type(p.name, self._allowed_extensions)
        )

    def read_text(self, path: str) -> str:
        """Read full document text. Raises OSError when unreadable."""
        return decode_text(Path(path).read_bytes())
