from collections.abc import Sequence

from lspcheck.bridge import BridgeOptions, LspChecker
from lspcheck.checking import CheckContext, CheckResult, CheckStatus
from lspcheck.diagnostics import Severity
from lspcheck.protocol import PUBLISH_DIAGNOSTICS
from tests._shared_cases import (
    FOO_GO_URI,
    bridge_with_foo_go,
    enabled_bridge_with_foo_go,
    lsp_diagnostic,
    publish_params,
    undefined_x,
)


def _start(checker: LspChecker, context: CheckContext) -> list[tuple[CheckStatus, Sequence[CheckResult]]]:
    calls: list[tuple[CheckStatus, Sequence[CheckResult]]] = []
    checker.start(context, lambda status, results: calls.append((status, results)))
    return calls


def test_foo_go_scenario_reports_one_indexed_error() -> None:
    bridge, document = enabled_bridge_with_foo_go()

    bridge.client.deliver(PUBLISH_DIAGNOSTICS, publish_params(FOO_GO_URI, [undefined_x()]))

    (result,) = bridge.framework.results(document)
    assert result.checker == "lsp"
    assert result.filename == document.filename
    assert result.document is document
    assert result.level is Severity.ERROR
    assert result.level_label == "error"
    assert result.message == "undefined: x"
    assert result.id == "UndeclaredName"
    assert (result.line, result.column, result.end_line, result.end_column) == (5, 3, 5, 11)


def test_start_reports_finished_synchronously_with_full_list() -> None:
    bridge, document = bridge_with_foo_go()
    bridge.adapter.handle_raw(
        publish_params(
            FOO_GO_URI,
            [undefined_x(), lsp_diagnostic((6, 0), (6, 1), "note", severity=4)],
        )
    )

    calls = _start(bridge.checker, CheckContext(checker="lsp", document=document))

    assert len(calls) == 1
    status, results = calls[0]
    assert status is CheckStatus.FINISHED
    assert [(r.level, r.message) for r in results] == [(Severity.ERROR, "undefined: x"), (Severity.INFO, "note")]


def test_start_uses_the_active_checker_identity() -> None:
    bridge, document = bridge_with_foo_go()
    bridge.adapter.handle_raw(publish_params(FOO_GO_URI, [undefined_x()]))

    ((_, results),) = _start(bridge.checker, CheckContext(checker="lsp-chained", document=document))

    assert results[0].checker == "lsp-chained"


def test_start_without_cached_diagnostics_reports_empty_list() -> None:
    bridge, document = bridge_with_foo_go()

    assert _start(bridge.checker, CheckContext(checker="lsp", document=document)) == [(CheckStatus.FINISHED, [])]


def test_round_trip_preserves_message_id_and_coordinates() -> None:
    bridge, document = bridge_with_foo_go()
    cases = [
        ((0, 0), (0, 7), "package clause", "P1"),
        ((2, 7), (2, 12), "import", 42),
        ((5, 1), (5, 15), "call", None),
    ]
    bridge.adapter.handle_raw(
        publish_params(
            FOO_GO_URI,
            [lsp_diagnostic(start, end, message, code=code) for start, end, message, code in cases],
        )
    )

    ((_, results),) = _start(bridge.checker, CheckContext(checker="lsp", document=document))

    for (start, end, message, code), result in zip(cases, results, strict=True):
        assert result.message == message
        assert result.id == (None if code is None else str(code))
        assert (result.line, result.column) == (start[0] + 1, start[1] + 1)
        assert (result.end_line, result.end_column) == (end[0] + 1, end[1] + 1)


def test_republishing_same_list_is_idempotent() -> None:
    bridge, document = enabled_bridge_with_foo_go()
    params = publish_params(FOO_GO_URI, [undefined_x(), lsp_diagnostic((0, 0), (0, 7), "w", severity=2)])

    bridge.client.deliver(PUBLISH_DIAGNOSTICS, params)
    first_cache = [(d.severity, d.message, d.code, d.start.offset, d.end.offset) for d in bridge.cache.get(document)]
    first_results = bridge.framework.results(document)
    bridge.client.deliver(PUBLISH_DIAGNOSTICS, params)
    second_cache = [(d.severity, d.message, d.code, d.start.offset, d.end.offset) for d in bridge.cache.get(document)]
    second_results = bridge.framework.results(document)

    assert first_cache == second_cache
    assert first_results == second_results


def test_tag_labels_are_rendered_next_to_the_level() -> None:
    bridge, document = enabled_bridge_with_foo_go()
    bridge.client.deliver(
        PUBLISH_DIAGNOSTICS,
        publish_params(FOO_GO_URI, [lsp_diagnostic((2, 0), (2, 12), "old", severity=2, tags=[2, 1])]),
    )

    (result,) = bridge.framework.results(document)

    assert result.level is Severity.WARNING
    assert result.level_label == "warning [unnecessary, deprecated]"


def test_tag_labels_can_be_turned_off() -> None:
    bridge, document = enabled_bridge_with_foo_go(BridgeOptions(show_tags=False))
    bridge.client.deliver(
        PUBLISH_DIAGNOSTICS,
        publish_params(FOO_GO_URI, [lsp_diagnostic((2, 0), (2, 12), "old", severity=2, tags=[2])]),
    )

    (result,) = bridge.framework.results(document)

    assert result.level_label == "warning"


def test_checker_is_applicable_only_while_client_manages_document() -> None:
    bridge, document = bridge_with_foo_go()

    assert not bridge.checker.is_applicable(document)
    bridge.client.manage(document)
    assert bridge.checker.is_applicable(document)
    bridge.client.release(document)
    assert not bridge.checker.is_applicable(document)
