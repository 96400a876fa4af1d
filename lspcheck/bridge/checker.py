"""Pseudo-checker that serves cached language-server diagnostics to the checking framework."""

from __future__ import annotations

from lspcheck.bridge.cache import DiagnosticCache
from lspcheck.bridge.options import BridgeOptions, render_level_label
from lspcheck.checking import CheckContext, CheckResult, CheckStatus, OrderedSet, ResultCallback
from lspcheck.client import LanguageClient
from lspcheck.diagnostics import Diagnostic
from lspcheck.documents import Document


def to_check_result(
    checker: str,
    document: Document,
    diagnostic: Diagnostic,
    options: BridgeOptions,
) -> CheckResult:
    start = document.line_column(diagnostic.start)
    end = document.line_column(diagnostic.end)
    return CheckResult(
        checker=checker,
        filename=document.filename,
        document=document,
        level=diagnostic.severity,
        message=diagnostic.message,
        id=diagnostic.code,
        line=start.line,
        column=start.column,
        end_line=end.line,
        end_column=end.column,
        level_label=render_level_label(diagnostic.severity, diagnostic.tags, options),
    )


class LspChecker:
    """Applicable only while the language client manages the document; always finishes synchronously."""

    def __init__(self, client: LanguageClient, cache: DiagnosticCache, options: BridgeOptions | None = None) -> None:
        self.client = client
        self.cache = cache
        self.options = options or BridgeOptions()
        self._modes: OrderedSet[str] = OrderedSet()

    @property
    def name(self) -> str:
        return self.options.checker_name

    @property
    def modes(self) -> OrderedSet[str]:
        return self._modes

    def is_applicable(self, document: Document) -> bool:
        return self.client.manages(document)

    def start(self, context: CheckContext, callback: ResultCallback) -> None:
        document = context.document
        results = [
            to_check_result(context.checker, document, diagnostic, self.options)
            for diagnostic in self.cache.get(document)
        ]
        callback(CheckStatus.FINISHED, results)
