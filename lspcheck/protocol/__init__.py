"""Language-server protocol payloads consumed by the bridge."""

from lspcheck.protocol.messages import (
    PUBLISH_DIAGNOSTICS,
    LspDiagnostic,
    LspRange,
    ProtocolError,
    PublishDiagnosticsParams,
    parse_diagnostic,
    parse_publish_diagnostics,
)
from lspcheck.protocol.uri import path_to_uri, uri_to_path

__all__ = [
    "PUBLISH_DIAGNOSTICS",
    "LspDiagnostic",
    "LspRange",
    "ProtocolError",
    "PublishDiagnosticsParams",
    "parse_diagnostic",
    "parse_publish_diagnostics",
    "path_to_uri",
    "uri_to_path",
]
