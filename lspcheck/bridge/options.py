"""Bridge configuration."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Final, Mapping

from lspcheck.diagnostics import DiagnosticTag, Severity

DEFAULT_TAG_LABELS: Final[Mapping[DiagnosticTag, str]] = MappingProxyType(
    {
        DiagnosticTag.UNNECESSARY: "unnecessary",
        DiagnosticTag.DEPRECATED: "deprecated",
    }
)


@dataclass(frozen=True, slots=True)
class BridgeOptions:
    """User-facing switches for how the bridge registers itself and labels results."""

    exclusive: bool = True
    show_tags: bool = True
    tag_labels: Mapping[DiagnosticTag, str] = field(default_factory=lambda: DEFAULT_TAG_LABELS)
    tag_prefix: str = " ["
    tag_separator: str = ", "
    tag_suffix: str = "]"
    checker_name: str = "lsp"

    def __post_init__(self):
        if not self.checker_name:
            raise ValueError("checker_name cannot be empty")

    @staticmethod
    def from_mapping(values: Mapping[str, Any]) -> "BridgeOptions":
        """Build options from plain settings, e.g. a decoded JSON/TOML table."""
        known = {option.name for option in fields(BridgeOptions)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown bridge option(s): {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            if key in {"exclusive", "show_tags"}:
                if not isinstance(value, bool):
                    raise ValueError(f"`{key}` must be a boolean")
                kwargs[key] = value
            elif key == "tag_labels":
                kwargs[key] = _parse_tag_labels(value)
            else:
                if not isinstance(value, str):
                    raise ValueError(f"`{key}` must be a string")
                kwargs[key] = value
        return BridgeOptions(**kwargs)


def render_level_label(severity: Severity, tags: Iterable[DiagnosticTag], options: BridgeOptions) -> str:
    """Severity name, followed by the labels of `tags` when tag display is on."""
    if not options.show_tags:
        return severity.value
    present = set(tags)
    labels = [options.tag_labels[tag] for tag in DiagnosticTag if tag in present and options.tag_labels.get(tag)]
    if not labels:
        return severity.value
    return f"{severity.value}{options.tag_prefix}{options.tag_separator.join(labels)}{options.tag_suffix}"


def _parse_tag_labels(value: Any) -> Mapping[DiagnosticTag, str]:
    if not isinstance(value, Mapping):
        raise ValueError("`tag_labels` must be a table of tag -> label")
    labels: dict[DiagnosticTag, str] = {}
    for tag_name, label in value.items():
        try:
            tag = DiagnosticTag(tag_name)
        except ValueError:
            raise ValueError(f"Unknown diagnostic tag `{tag_name}`") from None
        if not isinstance(label, str):
            raise ValueError(f"Label for `{tag_name}` must be a string")
        labels[tag] = label
    return MappingProxyType(labels)
