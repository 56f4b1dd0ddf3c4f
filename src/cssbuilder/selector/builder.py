"""Selector builder facade: entry point for building and combining selectors.

Example::

    builder = css_selector_builder
    builder.combine(
        builder.element("div").id("main").class_("container"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # 'div#main.container + table#data'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import CombinatorError
from cssbuilder.selector.combined import CombinedSelector, Renderable, chunks_of
from cssbuilder.selector.simple import SimpleSelector
from cssbuilder.validation.rules import KNOWN_COMBINATORS

logger = logging.getLogger(__name__)

Selector = SimpleSelector | CombinedSelector


@dataclass(frozen=True)
class SelectorBuilder:
    """Stateless facade; every call starts from a fresh, empty selector."""

    config: BuilderConfig = field(default_factory=BuilderConfig)

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        """Join two selectors with *combinator*.

        The operands are rendered, not referenced, so they stay untouched and
        may be discarded afterwards. Unknown combinators are accepted unless
        ``config.strict_combinators`` is set.
        """
        if self.config.strict_combinators and combinator not in KNOWN_COMBINATORS:
            raise CombinatorError(
                f"Unknown combinator {combinator!r}; expected one of ' ', '+', '~', '>'",
                combinator=combinator,
            )
        combined = CombinedSelector(
            chunks=chunks_of(left) + (combinator,) + chunks_of(right)
        )
        logger.debug("Combined selector with %r: %s", combinator, combined)
        return combined

    def stringify(self) -> str:
        return ""


css_selector_builder = SelectorBuilder()
