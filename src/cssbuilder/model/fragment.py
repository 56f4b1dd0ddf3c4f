"""Fragment model: the typed atoms a compound selector is built from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """Kind of a selector fragment, declared in the required CSS order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"

    @property
    def rank(self) -> int:
        """Position of this kind in :data:`FRAGMENT_ORDER`."""
        return FRAGMENT_ORDER.index(self)

    @property
    def unique(self) -> bool:
        """True for kinds that may occur at most once per compound selector."""
        return self in UNIQUE_KINDS

    @property
    def label(self) -> str:
        return self.value.replace("_", "-")


FRAGMENT_ORDER: tuple[FragmentKind, ...] = tuple(FragmentKind)

UNIQUE_KINDS = frozenset({
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.PSEUDO_ELEMENT,
})

_FORMATS: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
}


def format_fragment(kind: FragmentKind, value: str) -> str:
    """Render *value* with the prefix/brackets for *kind*."""
    return _FORMATS[kind].format(value)


@dataclass(frozen=True)
class Fragment:
    """One selector atom, e.g. ``Fragment(FragmentKind.CLASS, "container")``.

    The raw value is stored verbatim; no syntax checking is applied.
    """

    kind: FragmentKind
    value: str

    def render(self) -> str:
        return format_fragment(self.kind, self.value)
