"""Simple (compound) selector: an immutable, validated run of fragments."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cssbuilder.model.fragment import Fragment, FragmentKind
from cssbuilder.selector.combined import CombinedSelector, Renderable
from cssbuilder.validation.validator import validate_append

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimpleSelector:
    """A compound selector such as ``div#main.container``.

    Every fluent method returns a new selector; the receiver is never
    modified, so intermediate selectors can be reused freely::

        base = SimpleSelector().element("a")
        base.class_("nav").stringify()   # 'a.nav'
        base.attr("href").stringify()    # 'a[href]'

    Raises :class:`~cssbuilder.errors.OrderError` when a fragment is
    appended after a higher-ranked kind and
    :class:`~cssbuilder.errors.DuplicateKindError` when an element, id or
    pseudo-element is appended twice.
    """

    fragments: tuple[Fragment, ...] = ()

    # --- fluent appends ---------------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    def append(self, kind: FragmentKind, value: str) -> SimpleSelector:
        """Return a copy of this selector with one more fragment."""
        validate_append(self.fragments, kind)
        logger.debug("Appending %s fragment %r", kind.label, value)
        return SimpleSelector(fragments=self.fragments + (Fragment(kind, value),))

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        """Combine through the shared ``css_selector_builder``; the receiver takes no part."""
        from cssbuilder.selector.builder import css_selector_builder

        return css_selector_builder.combine(left, combinator, right)

    # --- queries ----------------------------------------------------------------

    @property
    def last_kind(self) -> FragmentKind | None:
        return self.fragments[-1].kind if self.fragments else None

    def stringify(self) -> str:
        return "".join(fragment.render() for fragment in self.fragments)

    def __str__(self) -> str:
        return self.stringify()

    def __len__(self) -> int:
        return len(self.fragments)
