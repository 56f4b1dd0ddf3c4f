"""cssbuilder model layer -- public type re-exports."""

from cssbuilder.model.diagnostic import Diagnostic, Severity
from cssbuilder.model.fragment import (
    FRAGMENT_ORDER,
    UNIQUE_KINDS,
    Fragment,
    FragmentKind,
    format_fragment,
)
from cssbuilder.model.rectangle import Rectangle, make_rectangle

__all__ = [
    # fragment
    "FragmentKind",
    "Fragment",
    "FRAGMENT_ORDER",
    "UNIQUE_KINDS",
    "format_fragment",
    # diagnostic
    "Severity",
    "Diagnostic",
    # rectangle
    "Rectangle",
    "make_rectangle",
]
