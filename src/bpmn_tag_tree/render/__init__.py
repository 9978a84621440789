"""XML rendering for tag trees.

Key Components:
    XMLRenderer: Stateless transformer from node-like values to XML text
    Renderable: Minimal protocol a node must satisfy to be rendered
"""

from .renderer import (
    Renderable,
    RenderSource,
    XMLRenderer,
    is_object_like,
    render_element,
    to_xml_string,
)

__all__ = [
    "Renderable",
    "RenderSource",
    "XMLRenderer",
    "is_object_like",
    "render_element",
    "to_xml_string",
]
