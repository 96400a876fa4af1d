"""In-memory checking framework: checker registry, per-document state and check runs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
from pathlib import Path

from lspcheck.checking.checker import (
    Checker,
    CheckContext,
    CheckResult,
    CheckStatus,
)
from lspcheck.checking.ordered_set import OrderedSet
from lspcheck.documents import Document

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DocumentCheckState:
    """Checking state owned by one document."""

    selected_checker: str | None = None
    disabled_checkers: OrderedSet[str] = field(default_factory=OrderedSet)
    display_enabled: bool = False
    results: list[CheckResult] = field(default_factory=list)
    check_count: int = 0


class CheckingFramework:
    """
    Process-wide checker registry plus per-document checking state.

    `checkers` is the global list consulted for automatic selection; a
    document can pin one checker with `select_checker`, and any checker can
    have next checkers that run after it in order.
    """

    def __init__(self) -> None:
        self.checkers: OrderedSet[str] = OrderedSet()
        self._definitions: dict[str, Checker] = {}
        self._next_checkers: dict[str, OrderedSet[str]] = {}
        self._states: dict[Path, DocumentCheckState] = {}
        self._deferred: dict[Path, Document] = {}

    def define(self, checker: Checker) -> None:
        self._definitions[checker.name] = checker

    def register(self, checker: Checker, *, first: bool = False) -> None:
        """Define `checker` and add it to the global checker list."""
        self.define(checker)
        if first:
            self.checkers.add_first(checker.name)
        else:
            self.checkers.add(checker.name)

    def unregister(self, name: str) -> None:
        self.checkers.discard(name)

    def add_next_checker(self, after: str, name: str) -> None:
        if after == name:
            raise ValueError(f"Checker `{name}` cannot follow itself")
        self._next_checkers.setdefault(after, OrderedSet()).add(name)

    def next_checkers(self, name: str) -> tuple[str, ...]:
        return tuple(self._next_checkers.get(name, ()))

    def state(self, document: Document) -> DocumentCheckState:
        state = self._states.get(document.path)
        if state is None:
            state = DocumentCheckState()
            self._states[document.path] = state
        return state

    def select_checker(self, document: Document, name: str | None) -> None:
        self.state(document).selected_checker = name

    def enable_display(self, document: Document, enabled: bool = True) -> None:
        state = self.state(document)
        state.display_enabled = enabled
        if not enabled:
            state.results = []
            self._deferred.pop(document.path, None)

    def is_display_enabled(self, document: Document) -> bool:
        state = self._states.get(document.path)
        return state is not None and state.display_enabled

    def results(self, document: Document) -> list[CheckResult]:
        state = self._states.get(document.path)
        return list(state.results) if state is not None else []

    def may_use(self, name: str, document: Document) -> bool:
        checker = self._definitions.get(name)
        if checker is None:
            return False
        state = self.state(document)
        if name in state.disabled_checkers:
            return False
        if len(checker.modes) and document.language_id not in checker.modes:
            return False
        return checker.is_applicable(document)

    def checker_for(self, document: Document) -> str | None:
        """The selected checker if usable, otherwise the first usable registered one."""
        selected = self.state(document).selected_checker
        if selected is not None:
            return selected if self.may_use(selected, document) else None
        for name in self.checkers:
            if self.may_use(name, document):
                return name
        return None

    def request_check(self, document: Document) -> list[CheckResult]:
        """Run the document's checker chain now and store the merged results."""
        state = self.state(document)
        self._deferred.pop(document.path, None)
        results: list[CheckResult] = []
        first = self.checker_for(document)
        if first is not None:
            visited: set[str] = set()
            pending = [first]
            while pending:
                name = pending.pop(0)
                if name in visited:
                    continue
                visited.add(name)
                results.extend(self._run_checker(name, document))
                pending.extend(
                    next_name for next_name in self.next_checkers(name) if self.may_use(next_name, document)
                )
        state.results = results
        state.check_count += 1
        logger.debug("Checked %s with %s: %d result(s)", document.path, first, len(results))
        return list(results)

    def defer_check(self, document: Document) -> None:
        self._deferred[document.path] = document

    def has_deferred(self, document: Document) -> bool:
        return document.path in self._deferred

    def run_deferred(self) -> int:
        """Run every deferred check; return how many documents were checked."""
        pending = list(self._deferred.values())
        self._deferred.clear()
        for document in pending:
            self.request_check(document)
        return len(pending)

    def forget(self, document: Document) -> None:
        self._states.pop(document.path, None)
        self._deferred.pop(document.path, None)

    def _run_checker(self, name: str, document: Document) -> list[CheckResult]:
        checker = self._definitions[name]
        reported: list[tuple[CheckStatus, Sequence[CheckResult]]] = []

        def callback(status: CheckStatus, results: Sequence[CheckResult]) -> None:
            reported.append((status, results))

        checker.start(CheckContext(checker=name, document=document), callback)
        if not reported:
            logger.debug("Checker %s reported nothing for %s", name, document.path)
            return []
        status, results = reported[-1]
        if status is not CheckStatus.FINISHED:
            logger.warning("Checker %s %s on %s", name, status.value, document.path)
            return []
        return list(results)
