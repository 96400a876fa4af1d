"""Language-server client facade: managed documents, built-in diagnostics display and notifications."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path
from typing import Any, Mapping

from lspcheck.documents import Document

logger = logging.getLogger(__name__)

DocumentListener = Callable[[Document], None]
NotificationHandler = Callable[[Mapping[str, Any]], None]


class LanguageClient:
    """
    The parts of a language-server client the bridge talks to.

    A document is "managed" while a server session is attached to it. The
    client shows diagnostics itself unless that display is turned off per
    document.
    """

    def __init__(self) -> None:
        self._managed: dict[Path, Document] = {}
        self._display_disabled: set[Path] = set()
        self._managed_listeners: list[DocumentListener] = []
        self._unmanaged_listeners: list[DocumentListener] = []
        self._handlers: dict[str, list[NotificationHandler]] = {}

    @property
    def managed_documents(self) -> tuple[Document, ...]:
        return tuple(self._managed.values())

    def manages(self, document: Document) -> bool:
        return self._managed.get(document.path) is document

    def manage(self, document: Document) -> None:
        if self.manages(document):
            return
        self._managed[document.path] = document
        for listener in tuple(self._managed_listeners):
            listener(document)

    def release(self, document: Document) -> None:
        if not self.manages(document):
            return
        del self._managed[document.path]
        for listener in tuple(self._unmanaged_listeners):
            listener(document)
        self._display_disabled.discard(document.path)

    def diagnostics_display_enabled(self, document: Document) -> bool:
        return document.path not in self._display_disabled

    def set_diagnostics_display(self, document: Document, enabled: bool) -> None:
        if enabled:
            self._display_disabled.discard(document.path)
        else:
            self._display_disabled.add(document.path)

    def add_managed_listener(self, listener: DocumentListener) -> None:
        self._managed_listeners.append(listener)

    def remove_managed_listener(self, listener: DocumentListener) -> None:
        if listener in self._managed_listeners:
            self._managed_listeners.remove(listener)

    def add_unmanaged_listener(self, listener: DocumentListener) -> None:
        self._unmanaged_listeners.append(listener)

    def remove_unmanaged_listener(self, listener: DocumentListener) -> None:
        if listener in self._unmanaged_listeners:
            self._unmanaged_listeners.remove(listener)

    def on_notification(self, method: str, handler: NotificationHandler) -> None:
        self._handlers.setdefault(method, []).append(handler)

    def remove_notification_handler(self, method: str, handler: NotificationHandler) -> None:
        handlers = self._handlers.get(method)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def deliver(self, method: str, params: Mapping[str, Any]) -> None:
        """Hand a notification received from the server to its handlers."""
        handlers = self._handlers.get(method)
        if not handlers:
            logger.debug("No handler for %s", method)
            return
        for handler in tuple(handlers):
            handler(params)
