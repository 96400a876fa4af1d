"""Language-server diagnostics served through a pluggable checking framework."""

from lspcheck.bridge import Bridge, BridgeOptions, build_bridge

__all__ = [
    "Bridge",
    "BridgeOptions",
    "build_bridge",
]
