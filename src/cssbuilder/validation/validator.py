"""Selector validator: applies append rules and lint rules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Sequence

from cssbuilder.errors import DuplicateKindError, OrderError, SelectorError
from cssbuilder.model.diagnostic import Diagnostic
from cssbuilder.model.fragment import Fragment, FragmentKind
from cssbuilder.validation.rules import (
    APPEND_RULES,
    COMBINATOR_LINT_RULES,
    FRAGMENT_LINT_RULES,
)

if TYPE_CHECKING:
    from cssbuilder.selector.combined import CombinedSelector
    from cssbuilder.selector.simple import SimpleSelector

logger = logging.getLogger(__name__)

AppendRule = Callable[[Sequence[Fragment], FragmentKind], list[Diagnostic]]

_ERROR_TYPES: dict[str, type[SelectorError]] = {
    "check_order": OrderError,
    "check_occurrences": DuplicateKindError,
}


def check_append(
    fragments: Sequence[Fragment],
    kind: FragmentKind,
    extra_rules: list[AppendRule] | None = None,
) -> list[Diagnostic]:
    """Run every append rule and return all diagnostics, in rule order."""
    rules: list[AppendRule] = list(APPEND_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(fragments, kind))
    return diagnostics


def validate_append(
    fragments: Sequence[Fragment],
    kind: FragmentKind,
    extra_rules: list[AppendRule] | None = None,
) -> None:
    """Raise the typed error for the first failing append rule, if any.

    The ordering rule runs before the cardinality rule, so appending an
    element after a pseudo-element that follows another element reports an
    :class:`OrderError` even though both rules are violated.
    """
    for diag in check_append(fragments, kind, extra_rules=extra_rules):
        if diag.is_error:
            logger.debug("Rejected %s fragment: %s", kind.label, diag)
            error_type = _ERROR_TYPES.get(diag.rule, SelectorError)
            raise error_type(diag.message, kind=kind, diagnostic=diag)


def lint(selector: SimpleSelector | CombinedSelector) -> list[Diagnostic]:
    """Return non-fatal diagnostics for a built selector.

    Simple selectors are checked fragment by fragment; combined selectors
    have their combinator tokens checked.
    """
    # selector modules import this one, so they are resolved at call time
    from cssbuilder.selector.combined import CombinedSelector
    from cssbuilder.selector.simple import SimpleSelector

    diagnostics: list[Diagnostic] = []
    if isinstance(selector, SimpleSelector):
        for rule in FRAGMENT_LINT_RULES:
            diagnostics.extend(rule(selector.fragments))
    elif isinstance(selector, CombinedSelector):
        for rule in COMBINATOR_LINT_RULES:
            diagnostics.extend(rule(selector.chunks))
    else:
        raise TypeError(
            f"lint() expects a SimpleSelector or CombinedSelector, got {type(selector).__name__}"
        )
    return diagnostics
