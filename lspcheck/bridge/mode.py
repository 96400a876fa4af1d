"""Per-document and global switches that hand diagnostics display over to the checking framework."""

from __future__ import annotations

import logging
from pathlib import Path

from lspcheck.bridge.cache import DiagnosticCache
from lspcheck.bridge.checker import LspChecker
from lspcheck.bridge.notifications import NotificationAdapter
from lspcheck.bridge.options import BridgeOptions
from lspcheck.checking import CheckingFramework
from lspcheck.client import LanguageClient
from lspcheck.documents import Document, Workspace
from lspcheck.protocol import PUBLISH_DIAGNOSTICS

logger = logging.getLogger(__name__)


class BridgeMode:
    """Enables/disables the bridge for single documents."""

    def __init__(
        self,
        *,
        client: LanguageClient,
        framework: CheckingFramework,
        cache: DiagnosticCache,
        checker: LspChecker,
        options: BridgeOptions | None = None,
    ) -> None:
        self.client = client
        self.framework = framework
        self.cache = cache
        self.checker = checker
        self.options = options or checker.options
        self._enabled: dict[Path, Document] = {}

    @property
    def enabled_documents(self) -> tuple[Document, ...]:
        return tuple(self._enabled.values())

    def is_enabled(self, document: Document) -> bool:
        return self._enabled.get(document.path) is document

    def enable(self, document: Document) -> bool:
        """Make the bridge checker the document's diagnostics source; False if the client does not manage it."""
        if not self.client.manages(document):
            logger.debug("Not enabling for %s: not managed by the language client", document.path)
            return False

        name = self.checker.name
        self.framework.register(self.checker, first=True)
        state = self.framework.state(document)
        state.disabled_checkers.discard(name)
        self.checker.modes.add(document.language_id)

        selected = state.selected_checker
        if self.options.exclusive or selected is None:
            self.framework.select_checker(document, name)
        elif selected != name:
            self.framework.add_next_checker(selected, name)

        self.client.set_diagnostics_display(document, False)
        self.framework.enable_display(document)
        self._enabled[document.path] = document
        logger.debug("Enabled for %s (exclusive=%s)", document.path, self.options.exclusive)
        return True

    def disable(self, document: Document) -> None:
        name = self.checker.name
        self.client.set_diagnostics_display(document, True)
        self.framework.select_checker(document, None)
        self.framework.state(document).disabled_checkers.add(name)
        self.cache.clear(document)
        self.framework.defer_check(document)
        self._enabled.pop(document.path, None)
        logger.debug("Disabled for %s", document.path)


class GlobalBridgeMode:
    """Follows the language client: enables the bridge wherever it manages a document."""

    def __init__(
        self,
        *,
        mode: BridgeMode,
        adapter: NotificationAdapter,
        workspace: Workspace,
    ) -> None:
        self.mode = mode
        self.adapter = adapter
        self.workspace = workspace
        self.enabled = False

    def enable(self) -> None:
        if self.enabled:
            return
        client = self.mode.client
        client.add_managed_listener(self._on_managed)
        client.add_unmanaged_listener(self._on_unmanaged)
        client.on_notification(PUBLISH_DIAGNOSTICS, self.adapter.handle_raw)
        self.workspace.add_close_listener(self._on_closed)
        self.enabled = True
        for document in client.managed_documents:
            self.mode.enable(document)

    def disable(self) -> None:
        if not self.enabled:
            return
        client = self.mode.client
        client.remove_managed_listener(self._on_managed)
        client.remove_unmanaged_listener(self._on_unmanaged)
        client.remove_notification_handler(PUBLISH_DIAGNOSTICS, self.adapter.handle_raw)
        self.workspace.remove_close_listener(self._on_closed)
        for document in self.mode.enabled_documents:
            self.mode.disable(document)
        # Publishes can land on documents the bridge never enabled.
        self.mode.cache.clear_all()
        self.mode.framework.unregister(self.mode.checker.name)
        self.enabled = False

    def _on_managed(self, document: Document) -> None:
        self.mode.enable(document)

    def _on_unmanaged(self, document: Document) -> None:
        if self.mode.is_enabled(document):
            self.mode.disable(document)

    def _on_closed(self, document: Document) -> None:
        if self.mode.is_enabled(document):
            self.mode.disable(document)
        self.adapter.forget(document)
        self.mode.framework.forget(document)
