"""Error hierarchy for selector construction and JSON helpers."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.model.diagnostic import Diagnostic
    from cssbuilder.model.fragment import FragmentKind


class SelectorError(ValueError):
    """Base error for all selector building failures."""

    def __init__(
        self,
        message: str,
        *,
        kind: FragmentKind | None = None,
        diagnostic: Diagnostic | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.diagnostic = diagnostic


class OrderError(SelectorError):
    """A fragment kind was appended after a higher-ranked kind."""


class DuplicateKindError(SelectorError):
    """A second element, id or pseudo-element fragment was appended."""


class CombinatorError(SelectorError):
    """Unknown combinator token passed to ``combine`` in strict mode."""

    def __init__(self, message: str, *, combinator: str, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.combinator = combinator


class SerializationError(ValueError):
    """JSON input cannot be turned into an object of the requested type."""


class ConfigError(ValueError):
    """Configuration value from the environment is not usable."""
