"""Language-server client facade."""

from lspcheck.client.client import DocumentListener, LanguageClient, NotificationHandler

__all__ = [
    "DocumentListener",
    "LanguageClient",
    "NotificationHandler",
]
