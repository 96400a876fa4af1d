"""Wiring of the bridge pieces around one client/framework/workspace trio."""

from __future__ import annotations

from dataclasses import dataclass

from lspcheck.bridge.cache import DiagnosticCache
from lspcheck.bridge.checker import LspChecker
from lspcheck.bridge.mode import BridgeMode, GlobalBridgeMode
from lspcheck.bridge.notifications import NotificationAdapter
from lspcheck.bridge.options import BridgeOptions
from lspcheck.checking import CheckingFramework
from lspcheck.client import LanguageClient
from lspcheck.documents import Workspace


@dataclass(frozen=True, slots=True)
class Bridge:
    """All bridge components sharing one diagnostics cache."""

    workspace: Workspace
    client: LanguageClient
    framework: CheckingFramework
    options: BridgeOptions
    cache: DiagnosticCache
    checker: LspChecker
    adapter: NotificationAdapter
    mode: BridgeMode
    global_mode: GlobalBridgeMode


def build_bridge(
    *,
    workspace: Workspace | None = None,
    client: LanguageClient | None = None,
    framework: CheckingFramework | None = None,
    options: BridgeOptions | None = None,
) -> Bridge:
    workspace = workspace or Workspace()
    client = client or LanguageClient()
    framework = framework or CheckingFramework()
    options = options or BridgeOptions()
    cache = DiagnosticCache()
    checker = LspChecker(client, cache, options)
    adapter = NotificationAdapter(workspace, framework, cache)
    mode = BridgeMode(client=client, framework=framework, cache=cache, checker=checker, options=options)
    return Bridge(
        workspace=workspace,
        client=client,
        framework=framework,
        options=options,
        cache=cache,
        checker=checker,
        adapter=adapter,
        mode=mode,
        global_mode=GlobalBridgeMode(mode=mode, adapter=adapter, workspace=workspace),
    )
