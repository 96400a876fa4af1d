"""`textDocument/publishDiagnostics` payloads decoded from JSON."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Mapping

from lspcheck.text import LinePosition

PUBLISH_DIAGNOSTICS: Final[str] = "textDocument/publishDiagnostics"


class ProtocolError(ValueError):
    """Raised when a notification payload does not have the expected shape."""


@dataclass(frozen=True, slots=True)
class LspRange:
    start: LinePosition
    end: LinePosition


@dataclass(frozen=True, slots=True)
class LspDiagnostic:
    """One protocol-level diagnostic; severity and tags keep their protocol codes."""

    range: LspRange
    message: str
    severity: int | None = None
    code: str | None = None
    source: str | None = None
    tags: tuple[int, ...] = ()


@dataclass(frozen=True, slots=True)
class PublishDiagnosticsParams:
    uri: str
    diagnostics: tuple[LspDiagnostic, ...]
    version: int | None = None


def parse_publish_diagnostics(params: Mapping[str, Any]) -> PublishDiagnosticsParams:
    uri = params.get("uri")
    if not isinstance(uri, str):
        raise ProtocolError("publishDiagnostics params need a string `uri`")
    raw_diagnostics = params.get("diagnostics")
    if not isinstance(raw_diagnostics, list):
        raise ProtocolError("publishDiagnostics params need a `diagnostics` list")
    return PublishDiagnosticsParams(
        uri=uri,
        diagnostics=tuple(parse_diagnostic(item) for item in raw_diagnostics),
        version=_optional_int(params, "version"),
    )


def parse_diagnostic(raw: Any) -> LspDiagnostic:
    if not isinstance(raw, Mapping):
        raise ProtocolError(f"Diagnostic must be an object, got {type(raw).__name__}")
    message = raw.get("message")
    if not isinstance(message, str):
        raise ProtocolError("Diagnostic needs a string `message`")
    raw_tags = raw.get("tags") or []
    if not isinstance(raw_tags, list):
        raise ProtocolError("Diagnostic `tags` must be a list")
    source = raw.get("source")
    return LspDiagnostic(
        range=_parse_range(raw.get("range")),
        message=message,
        severity=_optional_int(raw, "severity"),
        code=_parse_code(raw.get("code")),
        source=source if isinstance(source, str) else None,
        tags=tuple(tag for tag in raw_tags if isinstance(tag, int) and not isinstance(tag, bool)),
    )


def _parse_range(raw: Any) -> LspRange:
    if not isinstance(raw, Mapping):
        raise ProtocolError("Diagnostic needs a `range` object")
    return LspRange(start=_parse_position(raw.get("start")), end=_parse_position(raw.get("end")))


def _parse_position(raw: Any) -> LinePosition:
    if not isinstance(raw, Mapping):
        raise ProtocolError("Range needs `start` and `end` positions")
    line = raw.get("line")
    character = raw.get("character")
    if not _is_index(line) or not _is_index(character):
        raise ProtocolError(f"Invalid position {dict(raw)!r}")
    return LinePosition(line, character)


def _parse_code(raw: Any) -> str | None:
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ProtocolError("Diagnostic `code` must be a string or an integer")
    if isinstance(raw, (str, int)):
        return str(raw)
    raise ProtocolError("Diagnostic `code` must be a string or an integer")


def _optional_int(raw: Mapping[str, Any], key: str) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ProtocolError(f"`{key}` must be an integer")
    return value


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
