"""Protocol severity and tag codes."""

from collections.abc import Iterable
from types import MappingProxyType
from typing import Final, Mapping

from lspcheck.diagnostics.diagnostic import DiagnosticTag, Severity

PROTOCOL_ERROR: Final[int] = 1
PROTOCOL_WARNING: Final[int] = 2
PROTOCOL_INFORMATION: Final[int] = 3
PROTOCOL_HINT: Final[int] = 4

TAGS_BY_PROTOCOL_CODE: Final[Mapping[int, DiagnosticTag]] = MappingProxyType(
    {
        1: DiagnosticTag.UNNECESSARY,
        2: DiagnosticTag.DEPRECATED,
    }
)


def severity_from_protocol(code: int | None) -> Severity:
    """Missing or <= 1 is an error, 2 a warning, everything else info."""
    if code is None or code <= PROTOCOL_ERROR:
        return Severity.ERROR
    if code == PROTOCOL_WARNING:
        return Severity.WARNING
    return Severity.INFO


def tags_from_protocol(codes: Iterable[int]) -> frozenset[DiagnosticTag]:
    # unknown tag codes are dropped
    return frozenset(TAGS_BY_PROTOCOL_CODE[code] for code in codes if code in TAGS_BY_PROTOCOL_CODE)
