"""Validation rules for selector fragments.

Append rules take the fragments already present plus the kind about to be
appended and return a list of Diagnostic objects; an ERROR diagnostic means
the append must be refused. Lint rules inspect finished selectors and only
ever report WARNING diagnostics.
"""

from __future__ import annotations

from typing import Sequence

from cssbuilder.model.diagnostic import Diagnostic, Severity
from cssbuilder.model.fragment import Fragment, FragmentKind


# ---------------------------------------------------------------------------
# Known value sets
# ---------------------------------------------------------------------------

KNOWN_COMBINATORS = frozenset({" ", "+", "~", ">"})

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

OCCURRENCE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


# ---------------------------------------------------------------------------
# Append rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_order(fragments: Sequence[Fragment], kind: FragmentKind) -> list[Diagnostic]:
    """The new kind must not rank below the most recently appended kind."""
    if not fragments:
        return []
    last = fragments[-1]
    if last.kind.rank > kind.rank:
        return [
            Diagnostic(
                rule="check_order",
                severity=Severity.ERROR,
                message=ORDER_MESSAGE,
                kind=kind,
                index=len(fragments),
                fix=f"Append the {kind.label} fragment before any {last.kind.label} fragment.",
            )
        ]
    return []


def check_occurrences(
    fragments: Sequence[Fragment], kind: FragmentKind
) -> list[Diagnostic]:
    """Element, id and pseudo-element may appear at most once."""
    if not kind.unique:
        return []
    for i, fragment in enumerate(fragments):
        if fragment.kind is kind:
            return [
                Diagnostic(
                    rule="check_occurrences",
                    severity=Severity.ERROR,
                    message=OCCURRENCE_MESSAGE,
                    kind=kind,
                    index=i,
                    fix=f"Remove the extra {kind.label} fragment.",
                )
            ]
    return []


# ---------------------------------------------------------------------------
# Lint rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_value_not_empty(fragments: Sequence[Fragment]) -> list[Diagnostic]:
    """Blank raw values render verbatim and usually indicate a mistake."""
    diagnostics: list[Diagnostic] = []
    for i, fragment in enumerate(fragments):
        if not fragment.value.strip():
            diagnostics.append(
                Diagnostic(
                    rule="check_value_not_empty",
                    severity=Severity.WARNING,
                    message=f"Fragment {i} ({fragment.kind.label}) has an empty value.",
                    kind=fragment.kind,
                    index=i,
                )
            )
    return diagnostics


def check_combinator_known(chunks: Sequence[str]) -> list[Diagnostic]:
    """Combinators sit at odd chunk positions; flag anything non-standard."""
    diagnostics: list[Diagnostic] = []
    for i in range(1, len(chunks), 2):
        token = chunks[i]
        if token not in KNOWN_COMBINATORS:
            diagnostics.append(
                Diagnostic(
                    rule="check_combinator_known",
                    severity=Severity.WARNING,
                    message=f"Combinator {token!r} is not one of ' ', '+', '~', '>'.",
                    index=i,
                    fix="Use a descendant, child, adjacent or general sibling combinator.",
                )
            )
    return diagnostics


APPEND_RULES = [
    check_order,
    check_occurrences,
]

FRAGMENT_LINT_RULES = [
    check_value_not_empty,
]

COMBINATOR_LINT_RULES = [
    check_combinator_known,
]
