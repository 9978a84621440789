"""Tag tree data structure.

Key Components:
    Tag: Mutable element node with attributes, ordered children and a weak
        back-reference to its parent
"""

from .node import DESCRIPTOR_KEYS, Tag

__all__ = [
    "DESCRIPTOR_KEYS",
    "Tag",
]
