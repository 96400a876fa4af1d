"""Diagnostics."""

from lspcheck.diagnostics.codes import (
    PROTOCOL_ERROR,
    PROTOCOL_HINT,
    PROTOCOL_INFORMATION,
    PROTOCOL_WARNING,
    TAGS_BY_PROTOCOL_CODE,
    severity_from_protocol,
    tags_from_protocol,
)
from lspcheck.diagnostics.diagnostic import Diagnostic, DiagnosticTag, Severity
from lspcheck.diagnostics.report import count_by_severity, has_errors

__all__ = [
    "PROTOCOL_ERROR",
    "PROTOCOL_HINT",
    "PROTOCOL_INFORMATION",
    "PROTOCOL_WARNING",
    "TAGS_BY_PROTOCOL_CODE",
    "Diagnostic",
    "DiagnosticTag",
    "Severity",
    "count_by_severity",
    "has_errors",
    "severity_from_protocol",
    "tags_from_protocol",
]
