"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from lspcheck.documents import Marker


class Severity(StrEnum):
    """Diagnostic importance, most severe first."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANKS[self]


_SEVERITY_RANKS = {Severity.ERROR: 0, Severity.WARNING: 1, Severity.INFO: 2}


class DiagnosticTag(StrEnum):
    UNNECESSARY = "unnecessary"
    DEPRECATED = "deprecated"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Internal diagnostic record; positions are live markers in the owning document."""

    start: Marker
    end: Marker
    severity: Severity
    message: str
    code: str | None = None
    tags: frozenset[DiagnosticTag] = frozenset()
    source: str | None = None

    @property
    def markers(self) -> tuple[Marker, Marker]:
        return (self.start, self.end)
