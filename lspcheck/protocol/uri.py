"""Document URI helpers."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote, unquote, urlsplit


def uri_to_path(uri: str) -> Path | None:
    """Map a `file:` URI to a local path; other schemes have no local path."""
    parts = urlsplit(uri)
    if parts.scheme != "file":
        return None
    path = unquote(parts.path)
    if parts.netloc and parts.netloc != "localhost":
        path = f"//{parts.netloc}{path}"
    if not path:
        return None
    return Path(path)


def path_to_uri(path: Path) -> str:
    return "file://" + quote(path.absolute().as_posix())
