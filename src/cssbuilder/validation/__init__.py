from cssbuilder.validation.rules import KNOWN_COMBINATORS
from cssbuilder.validation.validator import check_append, lint, validate_append

__all__ = ["KNOWN_COMBINATORS", "check_append", "lint", "validate_append"]
