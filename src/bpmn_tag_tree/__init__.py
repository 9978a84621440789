"""BPMN Tag Tree.

In-memory markup trees for process-definition elements (events, gateways,
tasks, sequence flows) with id lookup, structural mutation and single-line
XML serialization.

API layers:
- Tree: Tag class - build, mutate and query element trees
- Factory: create_element() and named constructors such as start_event()
- Rendering: XMLRenderer and to_xml_string() for any node-shaped value
"""

__version__ = "0.1.0"
__author__ = "BPMN Tag Tree Team"

from .render import XMLRenderer, render_element, to_xml_string

# Configuration classes for advanced usage
from .shared.config import RenderConfig, ReparentPolicy, TagTreeConfig, TreeConfig
from .shared.errors import (
    InvalidConfigError,
    InvalidElementError,
    NoParentError,
    TagTreeError,
    UnknownElementKindError,
)
from .tree import Tag
from .factory import CATALOG, create_element, types

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Tree
    "Tag",

    # Factory
    "CATALOG",
    "create_element",
    "types",

    # Rendering
    "XMLRenderer",
    "render_element",
    "to_xml_string",

    # Configuration classes
    "RenderConfig",
    "ReparentPolicy",
    "TagTreeConfig",
    "TreeConfig",

    # Errors
    "InvalidConfigError",
    "InvalidElementError",
    "NoParentError",
    "TagTreeError",
    "UnknownElementKindError",
]
