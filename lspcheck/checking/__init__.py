"""Checking framework model: checker contract, registry and check runs."""

from lspcheck.checking.checker import (
    Checker,
    CheckContext,
    CheckResult,
    CheckStatus,
    ResultCallback,
)
from lspcheck.checking.framework import CheckingFramework, DocumentCheckState
from lspcheck.checking.ordered_set import OrderedSet

__all__ = [
    "CheckContext",
    "CheckResult",
    "CheckStatus",
    "Checker",
    "CheckingFramework",
    "DocumentCheckState",
    "OrderedSet",
    "ResultCallback",
]
