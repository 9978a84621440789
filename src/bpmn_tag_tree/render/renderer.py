"""XML rendering for tag trees.

The renderer works on anything shaped like a tag tree: objects exposing
``tag_name`` with optional ``attribute`` and ``children``, or plain mappings
with a ``name`` (or ``tag_name``) key. Each call builds a fresh lxml element
tree and serializes it without added whitespace.

Attributes named ``xmlns:<prefix>`` become namespace declarations, and
``<prefix>:<local>`` tag and attribute names resolve against the declarations
of the node and its ancestors.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Sequence, Tuple, Union

from lxml import etree

from bpmn_tag_tree.shared import (
    InvalidElementError,
    RenderConfig,
    get_logger,
)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
DECLARATION_PREFIX = "xmlns:"


class Renderable(Protocol):
    """Shape the renderer reads from a node.

    ``attribute`` and ``children`` may be missing at runtime (treated as empty)
    or exposed as zero-argument methods.
    """

    tag_name: str
    attribute: Mapping[str, Any]
    children: Sequence[Any]


RenderSource = Union[Renderable, Mapping[str, Any]]


def is_object_like(value: Any) -> bool:
    """Check whether a child value should render as an element."""
    return isinstance(value, Mapping) or hasattr(value, "tag_name")


def _describe(source: RenderSource) -> Tuple[Any, Mapping[str, Any], Iterable[Any]]:
    """Extract tag name, attributes and children from a node-like value."""
    if isinstance(source, Mapping):
        tag_name = source.get("tag_name", source.get("name"))
        attribute = source.get("attribute")
        children = source.get("children")
    else:
        tag_name = getattr(source, "tag_name", None)
        attribute = getattr(source, "attribute", None)
        children = getattr(source, "children", None)

    if callable(attribute):
        attribute = attribute()
    if callable(children):
        children = children()
    return tag_name, attribute or {}, children or ()


def _split_declarations(
    attribute: Mapping[str, Any]
) -> Tuple[Dict[str, str], List[Tuple[str, str]]]:
    """Separate ``xmlns:<prefix>`` declarations from ordinary attributes."""
    declarations: Dict[str, str] = {}
    plain: List[Tuple[str, str]] = []
    for key, value in attribute.items():
        key = str(key)
        if key.startswith(DECLARATION_PREFIX):
            declarations[key[len(DECLARATION_PREFIX):]] = str(value)
        else:
            plain.append((key, str(value)))
    return declarations, plain


def _qualify(name: str, scope: Mapping[str, str], tag_name: str) -> str:
    """Turn ``prefix:local`` into lxml's ``{uri}local`` form."""
    if ":" not in name:
        return name
    prefix, local = name.split(":", 1)
    uri = scope.get(prefix)
    if uri is None:
        raise InvalidElementError(
            f"Undeclared namespace prefix {prefix!r} in <{tag_name}>",
            field_name="attribute",
        )
    return f"{{{uri}}}{local}"


class XMLRenderer:
    """Stateless transformer from tag trees to XML strings."""

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        self.config = config or RenderConfig()
        self.logger = get_logger(__name__, None, "xml_renderer")

    def build(self, source: RenderSource) -> etree._Element:
        """Build an lxml element mirroring source and its subtree.

        Raises:
            InvalidElementError: If a node has no usable tag name, uses an
                undeclared prefix, or lxml rejects a name or a text value
        """
        return self._build(source, None, {"xml": XML_NAMESPACE})

    def _build(
        self,
        source: RenderSource,
        parent: Optional[etree._Element],
        scope: Mapping[str, str],
    ) -> etree._Element:
        tag_name, attribute, children = _describe(source)
        if not isinstance(tag_name, str) or not tag_name:
            raise InvalidElementError(
                f"Element has no tag name: {source!r}", field_name="tag_name"
            )

        declarations, plain = _split_declarations(attribute)
        if declarations:
            scope = {**scope, **declarations}

        try:
            qualified_tag = _qualify(tag_name, scope, tag_name)
            nsmap = declarations or None
            if parent is None:
                element = etree.Element(qualified_tag, nsmap=nsmap)
            else:
                element = etree.SubElement(parent, qualified_tag, nsmap=nsmap)
            for key, value in plain:
                element.set(_qualify(key, scope, tag_name), value)
        except ValueError as e:
            raise InvalidElementError(
                f"Cannot render <{tag_name}>: {e}", field_name="attribute"
            ) from e

        last_child: Optional[etree._Element] = None
        for child in children:
            if is_object_like(child):
                last_child = self._build(child, element, scope)
                continue

            try:
                if last_child is None:
                    element.text = (element.text or "") + str(child)
                else:
                    last_child.tail = (last_child.tail or "") + str(child)
            except ValueError as e:
                raise InvalidElementError(
                    f"Cannot render text inside <{tag_name}>: {e}",
                    field_name="children",
                ) from e

        if (
            not self.config.short_empty_elements
            and len(element) == 0
            and element.text is None
        ):
            element.text = ""

        return element

    def serialize(self, source: RenderSource) -> str:
        """Render source to a single-line XML string."""
        element = self.build(source)

        if self.config.xml_declaration:
            encoding = self.config.encoding
            output = etree.tostring(
                element, encoding=encoding, xml_declaration=True
            ).decode(encoding)
        else:
            output = etree.tostring(element, encoding="unicode")

        if self.logger.is_debug_enabled():
            self.logger.debug(
                "Serialized element tree",
                extra={"tag": element.tag, "length": len(output)},
            )
        return output


def render_element(source: RenderSource) -> etree._Element:
    """Build an lxml element from a node-like value."""
    return XMLRenderer().build(source)


def to_xml_string(source: RenderSource, config: Optional[RenderConfig] = None) -> str:
    """Serialize a node-like value to an XML string."""
    return XMLRenderer(config).serialize(source)
