"""
Naming utilities for safe code generation.

Checks schema names against target-language keywords and derives
method names from field names.
"""

import re
from typing import Set, Optional

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def upper_first(name: str) -> str:
    """Uppercase the first character only: ``lazyInteger`` -> ``LazyInteger``."""
    return name[:1].upper() + name[1:]


class NameSanitizer:
    """Checks names against a language's reserved words and builtins."""

    def __init__(self, reserved_words: Set[str] = None, builtin_types: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()

    def is_reserved(self, name: str) -> bool:
        """Check whether ``name`` is a reserved word of the language."""
        return name in self.reserved_words

    def is_builtin(self, name: str) -> bool:
        """Check whether ``name`` shadows a builtin type."""
        return name in self.builtin_types

    def is_valid_identifier(self, name: str) -> bool:
        """Check the basic identifier shape shared by C-family languages."""
        return bool(_IDENTIFIER.match(name))

    def check_name(self, name: str, context: str) -> Optional[str]:
        """
        Describe why ``name`` cannot be used verbatim.

        Returns:
            Warning message, or None if the name is safe
        """
        if not self.is_valid_identifier(name):
            return f"{context} '{name}' is not a valid identifier"
        if self.is_reserved(name):
            return f"{context} '{name}' is a reserved word"
        if self.is_builtin(name):
            return f"{context} '{name}' shadows a builtin type"
        return None
