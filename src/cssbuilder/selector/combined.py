"""Combined selector: rendered compound selectors joined by combinators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class Combinator(Enum):
    """The four standard CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def resolve(cls, token: str) -> str:
        """Map a combinator alias to its token; unknown text is returned as-is.

        Accepts the literal tokens plus the names ``descendant``, ``child``,
        ``adjacent`` and ``sibling`` (case-insensitive).
        """
        alias = _ALIASES.get(token.strip().lower())
        if alias is not None:
            return alias.value
        return token


_ALIASES: dict[str, Combinator] = {
    "descendant": Combinator.DESCENDANT,
    "child": Combinator.CHILD,
    "adjacent": Combinator.ADJACENT_SIBLING,
    "sibling": Combinator.GENERAL_SIBLING,
}


@runtime_checkable
class Renderable(Protocol):
    """Anything that can render itself as selector text."""

    def stringify(self) -> str: ...


@dataclass(frozen=True)
class CombinedSelector:
    """Selector text chunks interleaved with combinator tokens.

    ``chunks`` always has odd length: ``(text0, comb1, text1, comb2, text2, ...)``.
    Rendering joins every chunk with a single space, so a descendant
    combinator (itself a space) shows up as three consecutive spaces.
    """

    chunks: tuple[str, ...]

    @property
    def combinators(self) -> tuple[str, ...]:
        return self.chunks[1::2]

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        """Combine through the shared ``css_selector_builder``; the receiver takes no part."""
        from cssbuilder.selector.builder import css_selector_builder

        return css_selector_builder.combine(left, combinator, right)

    def stringify(self) -> str:
        return " ".join(self.chunks)

    def __str__(self) -> str:
        return self.stringify()


def chunks_of(selector: Renderable) -> tuple[str, ...]:
    """Rendered chunks for *selector*; combined selectors keep their structure."""
    if isinstance(selector, CombinedSelector):
        return selector.chunks
    return (selector.stringify(),)
