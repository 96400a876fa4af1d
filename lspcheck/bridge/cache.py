"""Per-document cache of the latest published diagnostics."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from lspcheck.diagnostics import Diagnostic
from lspcheck.documents import Document


@dataclass(frozen=True, slots=True)
class CacheEntry:
    document: Document
    diagnostics: tuple[Diagnostic, ...]
    version: int | None = None


class DiagnosticCache:
    """
    Latest diagnostics per document path.

    Every accepted publish replaces the document's entry wholesale, and the
    markers of the replaced records are released.
    """

    def __init__(self) -> None:
        self._entries: dict[Path, CacheEntry] = {}

    def get(self, document: Document) -> tuple[Diagnostic, ...]:
        entry = self.entry(document)
        return entry.diagnostics if entry is not None else ()

    def entry(self, document: Document) -> CacheEntry | None:
        entry = self._entries.get(document.path)
        # entries left behind by an earlier document at the same path do not count
        if entry is None or entry.document is not document:
            return None
        return entry

    def is_stale(self, document: Document, version: int | None) -> bool:
        """A versioned publish older than the cached one is stale; unversioned ones never are."""
        entry = self.entry(document)
        if entry is None or entry.version is None or version is None:
            return False
        return version < entry.version

    def replace(self, document: Document, diagnostics: Iterable[Diagnostic], version: int | None = None) -> None:
        previous = self._entries.get(document.path)
        self._entries[document.path] = CacheEntry(document=document, diagnostics=tuple(diagnostics), version=version)
        if previous is not None:
            _release(previous)

    def clear(self, document: Document) -> None:
        entry = self._entries.pop(document.path, None)
        if entry is not None:
            _release(entry)

    def clear_all(self) -> None:
        entries = list(self._entries.values())
        self._entries.clear()
        for entry in entries:
            _release(entry)

    def __contains__(self, document: object) -> bool:
        return isinstance(document, Document) and self.entry(document) is not None

    def __len__(self) -> int:
        return len(self._entries)


def _release(entry: CacheEntry) -> None:
    for diagnostic in entry.diagnostics:
        for marker in diagnostic.markers:
            owner = marker.document
            if owner is not None:
                owner.release_markers((marker,))
