"""Shared utilities for the tag tree.

This module provides the error hierarchy, configuration objects and logging
helpers used by the tree, renderer, factory and CLI layers.
"""

from .errors import (
    InvalidConfigError,
    InvalidElementError,
    NoParentError,
    TagTreeError,
    UnknownElementKindError,
)
from .config import (
    RenderConfig,
    ReparentPolicy,
    TagTreeConfig,
    TreeConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "InvalidConfigError",
    "InvalidElementError",
    "NoParentError",
    "TagTreeError",
    "UnknownElementKindError",
    "RenderConfig",
    "ReparentPolicy",
    "TagTreeConfig",
    "TreeConfig",
    "CorrelationLogger",
    "get_logger",
]
