"""
Name matching strategies for merge field lookups.

The default strategy compares the raw instruction text against the canonical
prefix Word writes (" MERGEFIELD  <name>"). Because it is a prefix check, a
filter for "Foo" also matches a field named "FooBar". TokenNameMatcher
compares the name token exactly and can be passed wherever a matcher is
accepted.
"""

from typing import Protocol

from .constants import MERGEFIELD_KEYWORD, MERGEFIELD_PREFIX


class NameMatcher(Protocol):
    """Strategy deciding whether an instruction names a given field."""

    def matches(self, instruction: str, name: str) -> bool:
        """Return True if the instruction text refers to the field name."""
        ...


class PrefixNameMatcher:
    """Match on the canonical " MERGEFIELD  <name>" prefix.

    Case-sensitive, and sensitive to the exact spacing Word uses.

    Example:
        >>> PrefixNameMatcher().matches(' MERGEFIELD  FirstName ', "First")
        True
    """

    def matches(self, instruction: str, name: str) -> bool:
        return instruction.startswith(MERGEFIELD_PREFIX + name)

    def __repr__(self) -> str:
        return "PrefixNameMatcher()"


class TokenNameMatcher:
    """Match on the exact name token following the MERGEFIELD keyword.

    Whitespace between tokens is not significant and quoted names are
    unquoted before comparison.

    Example:
        >>> TokenNameMatcher().matches(' MERGEFIELD  FirstName ', "First")
        False
    """

    def matches(self, instruction: str, name: str) -> bool:
        tokens = instruction.split()
        if len(tokens) < 2 or tokens[0].upper() != MERGEFIELD_KEYWORD:
            return False
        return tokens[1].strip('"') == name

    def __repr__(self) -> str:
        return "TokenNameMatcher()"


DEFAULT_MATCHER: NameMatcher = PrefixNameMatcher()
