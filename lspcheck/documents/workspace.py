"""Open-document registry keyed by resolved path."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Final, Mapping

from lspcheck.documents.document import Document
from lspcheck.protocol.uri import uri_to_path

logger = logging.getLogger(__name__)

CloseListener = Callable[[Document], None]

LANGUAGE_IDS_BY_SUFFIX: Final[Mapping[str, str]] = MappingProxyType(
    {
        ".c": "c",
        ".cpp": "cpp",
        ".go": "go",
        ".java": "java",
        ".js": "javascript",
        ".py": "python",
        ".rs": "rust",
        ".ts": "typescript",
    }
)


def guess_language_id(path: Path) -> str:
    return LANGUAGE_IDS_BY_SUFFIX.get(path.suffix.lower(), "text")


class Workspace:
    """Tracks open documents; can open files silently when a URI refers to one."""

    def __init__(self) -> None:
        self._documents: dict[Path, Document] = {}
        self._close_listeners: list[CloseListener] = []

    @property
    def documents(self) -> tuple[Document, ...]:
        return tuple(self._documents.values())

    def open(self, path: Path, text: str | None = None, *, language_id: str | None = None) -> Document:
        """Return the open document for `path`, reading it from disk if `text` is not given."""
        key = _key(path)
        existing = self._documents.get(key)
        if existing is not None:
            return existing
        if text is None:
            text = key.read_text(encoding="utf-8")
        document = Document(key, text, language_id=language_id or guess_language_id(key))
        self._documents[key] = document
        return document

    def find(self, path: Path) -> Document | None:
        return self._documents.get(_key(path))

    def resolve(self, uri: str) -> Document | None:
        """Find the document a URI refers to, opening it silently if needed."""
        path = uri_to_path(uri)
        if path is None:
            logger.debug("No local path for URI %s", uri)
            return None
        document = self.find(path)
        if document is not None:
            return document
        try:
            return self.open(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Could not open %s: %s", path, exc)
            return None

    def close(self, document: Document) -> None:
        if self._documents.get(document.path) is not document:
            return
        del self._documents[document.path]
        for listener in tuple(self._close_listeners):
            listener(document)

    def add_close_listener(self, listener: CloseListener) -> None:
        self._close_listeners.append(listener)

    def remove_close_listener(self, listener: CloseListener) -> None:
        if listener in self._close_listeners:
            self._close_listeners.remove(listener)


def _key(path: Path) -> Path:
    return path.expanduser().absolute()
