"""Findings reported by the selector rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cssbuilder.model.fragment import FragmentKind


class Severity(Enum):
    ERROR = "ERROR"  # the append is refused
    WARNING = "WARNING"  # lint only; the selector still renders
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """One rule finding, located by fragment kind and/or position.

    ``index`` is a fragment position for fragment rules and a chunk position
    for combinator rules. ``fix`` is an optional hint for the caller.
    """

    rule: str
    severity: Severity
    message: str
    kind: FragmentKind | None = None
    index: int | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def location(self) -> str:
        """``kind=class index=2`` style locator; empty when neither is set."""
        parts: list[str] = []
        if self.kind is not None:
            parts.append(f"kind={self.kind.label}")
        if self.index is not None:
            parts.append(f"index={self.index}")
        return " ".join(parts)

    def __str__(self) -> str:
        where = f" [{self.location}]" if self.location else ""
        return f"{self.severity.value}{where} {self.rule}: {self.message}"
