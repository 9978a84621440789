"""Exception hierarchy for tag tree construction, mutation and rendering.

All errors are raised synchronously and propagate to the caller. Lookup misses
and duplicate ids are not errors.
"""

from typing import List, Optional


class TagTreeError(Exception):
    """Base exception for all tag tree errors."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


class InvalidConfigError(TagTreeError):
    """Exception raised for malformed constructor input or configuration."""


class UnknownElementKindError(InvalidConfigError):
    """Exception raised when a factory is asked for an element kind it lacks."""


class NoParentError(TagTreeError):
    """Exception raised when removing a node that has no parent."""


class InvalidElementError(TagTreeError):
    """Exception raised when a tree cannot be rendered to XML."""
