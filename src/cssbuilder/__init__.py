"""cssbuilder -- immutable CSS selector builder plus small object helpers."""

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import (
    CombinatorError,
    ConfigError,
    DuplicateKindError,
    OrderError,
    SelectorError,
    SerializationError,
)
from cssbuilder.model import Fragment, FragmentKind, Rectangle, make_rectangle
from cssbuilder.selector import (
    CombinedSelector,
    Combinator,
    Selector,
    SelectorBuilder,
    SimpleSelector,
    css_selector_builder,
)
from cssbuilder.serialization import from_json, to_json

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # config
    "BuilderConfig",
    # errors
    "SelectorError",
    "OrderError",
    "DuplicateKindError",
    "CombinatorError",
    "SerializationError",
    "ConfigError",
    # model
    "FragmentKind",
    "Fragment",
    "Rectangle",
    "make_rectangle",
    # selectors
    "Selector",
    "SimpleSelector",
    "CombinedSelector",
    "Combinator",
    "SelectorBuilder",
    "css_selector_builder",
    # json
    "to_json",
    "from_json",
]
