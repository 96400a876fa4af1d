#!/usr/bin/env python
"""Replay a saved publishDiagnostics notification and print the resulting check results."""

import argparse
import json
import logging
from pathlib import Path

from lspcheck import BridgeOptions, build_bridge
from lspcheck.checking import CheckResult
from lspcheck.diagnostics import count_by_severity, has_errors
from lspcheck.protocol import PUBLISH_DIAGNOSTICS, parse_publish_diagnostics


def format_result(result: CheckResult) -> str:
    code = f" [{result.id}]" if result.id else ""
    return (
        f"{result.filename}:{result.line}:{result.column}-{result.end_line}:{result.end_column}: "
        f"{result.level_label}: {result.message}{code}"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("notification", type=Path, help="JSON file with publishDiagnostics params")
    parser.add_argument("--options", type=Path, help="JSON file with bridge options")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    payload = json.loads(args.notification.read_text(encoding="utf-8"))
    params = payload.get("params", payload)
    options = BridgeOptions()
    if args.options is not None:
        options = BridgeOptions.from_mapping(json.loads(args.options.read_text(encoding="utf-8")))

    bridge = build_bridge(options=options)
    document = bridge.workspace.resolve(parse_publish_diagnostics(params).uri)
    if document is None:
        raise SystemExit(f"Cannot open the document referenced by {args.notification}")

    bridge.global_mode.enable()
    bridge.client.manage(document)
    bridge.client.deliver(PUBLISH_DIAGNOSTICS, params)

    results = bridge.framework.results(document)
    for result in results:
        print(format_result(result))
    diagnostics = bridge.cache.get(document)
    counts = ", ".join(f"{count} {severity}" for severity, count in count_by_severity(diagnostics).items())
    print(f"{len(results)} result(s) ({counts})")
    if has_errors(diagnostics):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
