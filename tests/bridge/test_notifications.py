import logging

import pytest

from lspcheck.diagnostics import DiagnosticTag, Severity
from lspcheck.protocol import PUBLISH_DIAGNOSTICS
from lspcheck.text import LineColumn, TextSize
from tests._shared_cases import (
    FOO_GO_URI,
    bridge_with_foo_go,
    enabled_bridge_with_foo_go,
    lsp_diagnostic,
    publish_params,
    undefined_x,
)


def test_publish_caches_converted_diagnostics() -> None:
    bridge, document = bridge_with_foo_go()

    bridge.adapter.handle_raw(publish_params(FOO_GO_URI, [undefined_x()]))

    (diagnostic,) = bridge.cache.get(document)
    assert diagnostic.severity is Severity.ERROR
    assert diagnostic.message == "undefined: x"
    assert diagnostic.code == "UndeclaredName"
    assert document.line_column(diagnostic.start) == LineColumn(5, 3)
    assert document.line_column(diagnostic.end) == LineColumn(5, 11)


def test_publish_carries_tags_and_source() -> None:
    bridge, document = bridge_with_foo_go()

    bridge.adapter.handle_raw(
        publish_params(
            FOO_GO_URI,
            [lsp_diagnostic((2, 0), (2, 12), '"fmt" imported and not used', severity=2, tags=[1], source="compiler")],
        )
    )

    (diagnostic,) = bridge.cache.get(document)
    assert diagnostic.severity is Severity.WARNING
    assert diagnostic.tags == frozenset({DiagnosticTag.UNNECESSARY})
    assert diagnostic.source == "compiler"


def test_second_publish_replaces_the_first() -> None:
    bridge, document = bridge_with_foo_go()
    first = [undefined_x(), lsp_diagnostic((0, 0), (0, 7), "first only")]
    second = [lsp_diagnostic((5, 1), (5, 4), "second only", severity=3)]

    bridge.adapter.handle_raw(publish_params(FOO_GO_URI, first))
    replaced = bridge.cache.get(document)
    bridge.adapter.handle_raw(publish_params(FOO_GO_URI, second))

    assert [d.message for d in bridge.cache.get(document)] == ["second only"]
    assert all(d.start.is_released and d.end.is_released for d in replaced)
    assert document.marker_count == 2


def test_empty_publish_clears_previous_diagnostics() -> None:
    bridge, document = bridge_with_foo_go()
    bridge.adapter.handle_raw(publish_params(FOO_GO_URI, [undefined_x()]))

    bridge.adapter.handle_raw(publish_params(FOO_GO_URI, []))

    assert bridge.cache.get(document) == ()
    assert document in bridge.cache


def test_unresolvable_document_is_silently_dropped() -> None:
    bridge, document = bridge_with_foo_go()

    bridge.adapter.handle_raw(publish_params("file:///nowhere/missing.go", [undefined_x()]))
    bridge.adapter.handle_raw(publish_params("untitled:Untitled-1", [undefined_x()]))

    assert len(bridge.cache) == 0
    assert bridge.cache.get(document) == ()


def test_stale_versions_are_discarded() -> None:
    bridge, document = bridge_with_foo_go()
    bridge.adapter.handle_raw(publish_params(FOO_GO_URI, [undefined_x()], version=5))

    bridge.adapter.handle_raw(publish_params(FOO_GO_URI, [], version=4))
    assert [d.message for d in bridge.cache.get(document)] == ["undefined: x"]

    bridge.adapter.handle_raw(publish_params(FOO_GO_URI, [], version=5))
    assert bridge.cache.get(document) == ()

    bridge.adapter.handle_raw(publish_params(FOO_GO_URI, [undefined_x()]))
    assert len(bridge.cache.get(document)) == 1


def test_recheck_requested_only_when_display_is_active() -> None:
    bridge, document = bridge_with_foo_go()

    bridge.adapter.handle_raw(publish_params(FOO_GO_URI, [undefined_x()]))
    assert bridge.framework.state(document).check_count == 0

    bridge.framework.enable_display(document)
    bridge.adapter.handle_raw(publish_params(FOO_GO_URI, [undefined_x()]))
    assert bridge.framework.state(document).check_count == 1


def test_cached_positions_track_edits_until_the_next_check() -> None:
    bridge, document = enabled_bridge_with_foo_go()
    bridge.client.deliver(PUBLISH_DIAGNOSTICS, publish_params(FOO_GO_URI, [undefined_x()]))

    document.insert(TextSize(0), "// Code generated.\n")
    (result,) = bridge.framework.request_check(document)

    assert (result.line, result.column) == (6, 3)


def test_handle_notification_ignores_other_methods() -> None:
    bridge, document = bridge_with_foo_go()

    bridge.adapter.handle_notification("window/logMessage", {"type": 3, "message": "hi"})
    bridge.adapter.handle_notification(PUBLISH_DIAGNOSTICS, publish_params(FOO_GO_URI, [undefined_x()]))

    assert len(bridge.cache.get(document)) == 1


def test_malformed_payload_is_dropped_with_a_warning(caplog: pytest.LogCaptureFixture) -> None:
    bridge, document = enabled_bridge_with_foo_go()
    bridge.client.deliver(PUBLISH_DIAGNOSTICS, publish_params(FOO_GO_URI, [undefined_x()]))

    with caplog.at_level(logging.WARNING, logger="lspcheck.bridge.notifications"):
        bridge.client.deliver(PUBLISH_DIAGNOSTICS, {"uri": FOO_GO_URI})

    assert len(bridge.cache.get(document)) == 1
    assert len(bridge.framework.results(document)) == 1
    assert any("diagnostics" in record.getMessage() for record in caplog.records)
