"""Turns published protocol diagnostics into cached internal records."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from lspcheck.bridge.cache import DiagnosticCache
from lspcheck.checking import CheckingFramework
from lspcheck.diagnostics import Diagnostic, severity_from_protocol, tags_from_protocol
from lspcheck.documents import Document, Workspace
from lspcheck.protocol import (
    PUBLISH_DIAGNOSTICS,
    LspDiagnostic,
    ProtocolError,
    PublishDiagnosticsParams,
    parse_publish_diagnostics,
)

logger = logging.getLogger(__name__)


def convert_diagnostic(document: Document, diagnostic: LspDiagnostic) -> Diagnostic:
    return Diagnostic(
        start=document.marker_at(diagnostic.range.start),
        end=document.marker_at(diagnostic.range.end),
        severity=severity_from_protocol(diagnostic.severity),
        message=diagnostic.message,
        code=diagnostic.code,
        tags=tags_from_protocol(diagnostic.tags),
        source=diagnostic.source,
    )


class NotificationAdapter:
    """Fire-and-forget handler for `textDocument/publishDiagnostics`."""

    def __init__(self, workspace: Workspace, framework: CheckingFramework, cache: DiagnosticCache) -> None:
        self.workspace = workspace
        self.framework = framework
        self.cache = cache

    def handle_notification(self, method: str, params: Mapping[str, Any]) -> None:
        if method != PUBLISH_DIAGNOSTICS:
            return
        self.handle_raw(params)

    def handle_raw(self, params: Mapping[str, Any]) -> None:
        try:
            publish = parse_publish_diagnostics(params)
        except ProtocolError as exc:
            logger.warning("Dropping malformed %s notification: %s", PUBLISH_DIAGNOSTICS, exc)
            return
        self.handle_publish(publish)

    def handle_publish(self, params: PublishDiagnosticsParams) -> None:
        document = self.workspace.resolve(params.uri)
        if document is None:
            logger.debug("Dropping diagnostics for unresolved %s", params.uri)
            return
        if self.cache.is_stale(document, params.version):
            logger.debug("Dropping stale diagnostics (version %s) for %s", params.version, document.path)
            return

        diagnostics = [convert_diagnostic(document, item) for item in params.diagnostics]
        self.cache.replace(document, diagnostics, params.version)
        logger.debug("Cached %d diagnostic(s) for %s", len(diagnostics), document.path)

        if self.framework.is_display_enabled(document):
            self.framework.request_check(document)

    def forget(self, document: Document) -> None:
        self.cache.clear(document)
