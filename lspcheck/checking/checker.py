"""Checker plugin contract and the result shape checkers report."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from lspcheck.checking.ordered_set import OrderedSet
from lspcheck.diagnostics import Severity
from lspcheck.documents import Document


class CheckStatus(StrEnum):
    FINISHED = "finished"
    ERRORED = "errored"
    INTERRUPTED = "interrupted"


@dataclass(frozen=True, slots=True)
class CheckResult:
    """One reported issue; line and column fields are one-indexed."""

    checker: str
    filename: str
    document: Document
    level: Severity
    message: str
    id: str | None
    line: int
    column: int
    end_line: int
    end_column: int
    level_label: str = ""

    def __post_init__(self):
        if not self.level_label:
            object.__setattr__(self, "level_label", self.level.value)


@dataclass(frozen=True, slots=True)
class CheckContext:
    """What a checker gets when it is started: its own identity and the document."""

    checker: str
    document: Document


ResultCallback = Callable[[CheckStatus, Sequence[CheckResult]], None]


class Checker(Protocol):
    """Pluggable diagnostics source recognized by the checking framework."""

    @property
    def name(self) -> str: ...

    @property
    def modes(self) -> OrderedSet[str]: ...

    def is_applicable(self, document: Document) -> bool: ...

    def start(self, context: CheckContext, callback: ResultCallback) -> None: ...
