"""Documents, live markers and the workspace that owns them."""

from lspcheck.documents.document import Document, Marker
from lspcheck.documents.workspace import Workspace, guess_language_id

__all__ = [
    "Document",
    "Marker",
    "Workspace",
    "guess_language_id",
]
