from cssbuilder.selector.builder import Selector, SelectorBuilder, css_selector_builder
from cssbuilder.selector.combined import CombinedSelector, Combinator, Renderable
from cssbuilder.selector.simple import SimpleSelector

__all__ = [
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    "CombinedSelector",
    "Combinator",
    "Renderable",
    "SimpleSelector",
]
