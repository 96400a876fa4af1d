"""Bridge from language-server diagnostics to the checking framework."""

from lspcheck.bridge.cache import CacheEntry, DiagnosticCache
from lspcheck.bridge.checker import LspChecker, to_check_result
from lspcheck.bridge.mode import BridgeMode, GlobalBridgeMode
from lspcheck.bridge.notifications import NotificationAdapter, convert_diagnostic
from lspcheck.bridge.options import DEFAULT_TAG_LABELS, BridgeOptions, render_level_label
from lspcheck.bridge.setup import Bridge, build_bridge

__all__ = [
    "DEFAULT_TAG_LABELS",
    "Bridge",
    "BridgeMode",
    "BridgeOptions",
    "CacheEntry",
    "DiagnosticCache",
    "GlobalBridgeMode",
    "LspChecker",
    "NotificationAdapter",
    "build_bridge",
    "convert_diagnostic",
    "render_level_label",
    "to_check_result",
]
