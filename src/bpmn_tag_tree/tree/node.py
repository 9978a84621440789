"""Tag tree node implementation.

A :class:`Tag` is one markup element: a tag name, an optional lookup id, an
ordered attribute mapping and an ordered list of children. Children are either
``Tag`` instances or text leaves (any other value, rendered through ``str``).
The link from a child back to its parent is a weak reference, so a parent is
owned only by whoever holds the root.
"""

import weakref
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

from bpmn_tag_tree.render import XMLRenderer
from bpmn_tag_tree.shared import (
    InvalidConfigError,
    NoParentError,
    RenderConfig,
    ReparentPolicy,
    TreeConfig,
    get_logger,
)

DESCRIPTOR_KEYS = frozenset({"name", "id", "attribute", "children"})

logger = get_logger(__name__, component="tag_tree")


@dataclass(eq=False)
class Tag:
    """A named, attributed element with ordered children.

    Tags compare and hash by identity. Mapping children passed to the
    constructor are built into Tags; every Tag child gets this node as parent.
    """

    tag_name: str
    id: Optional[str] = None
    attribute: Dict[str, str] = field(default_factory=dict)
    children: List[Any] = field(default_factory=list)
    config: TreeConfig = field(default_factory=TreeConfig, repr=False)

    _parent_ref: Optional["weakref.ReferenceType[Tag]"] = field(
        default=None, init=False, repr=False
    )

    def __post_init__(self) -> None:
        """Validate input and adopt children."""
        if not isinstance(self.tag_name, str) or not self.tag_name:
            raise InvalidConfigError(
                "Tag name must be a non-empty string", field_name="name"
            )
        if self.id is not None and not isinstance(self.id, str):
            raise InvalidConfigError("Tag id must be a string", field_name="id")
        if self.config is None:
            self.config = TreeConfig()

        self.attribute = _coerce_attribute(self.attribute)
        children = _coerce_children(self.children)
        self.children = []
        for child in children:
            self.children.append(self._adopt(child, depth=1))

    @classmethod
    def from_descriptor(
        cls,
        descriptor: Mapping[str, Any],
        config: Optional[TreeConfig] = None,
    ) -> "Tag":
        """Build a tree from a ``{name, id?, attribute?, children?}`` mapping.

        Args:
            descriptor: Mapping describing the node; mapping children are built
                recursively, other non-Tag children become text leaves
            config: Tree configuration shared by every node built

        Returns:
            Root Tag of the new tree

        Raises:
            InvalidConfigError: If the descriptor or any nested one is malformed
        """
        return _build_from_descriptor(cls, descriptor, config or TreeConfig(), 0)

    @property
    def parent(self) -> Optional["Tag"]:
        """The node this one was last attached to, if it is still alive."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def set_attribute(self, key: str, value: str) -> "Tag":
        """Insert or overwrite an attribute."""
        self.attribute[key] = value
        return self

    def append_child(self, value: Any) -> "Tag":
        """Append a node or text leaf to the end of children.

        A node that already has a parent is re-pointed at this one. Under
        ``ReparentPolicy.KEEP`` it stays listed in the old parent's children;
        under ``ReparentPolicy.DETACH`` it is removed from there first.
        """
        if value is None or isinstance(value, Mapping):
            raise InvalidConfigError(
                "append_child expects a Tag or a text value",
                field_name="children",
                suggestions=["Build mapping descriptors with Tag.from_descriptor"],
            )

        if isinstance(value, Tag):
            self._check_not_descendant(value)
            self._claim(value)

        self.children.append(value)
        return self

    def remove_child(self, value: Any) -> "Tag":
        """Remove the first occurrence of value from children.

        Nodes are matched by identity, text leaves by equality. A value that
        is not a child is ignored.
        """
        for index, item in enumerate(self.children):
            if item is value or (
                not isinstance(value, Tag)
                and not isinstance(item, Tag)
                and item == value
            ):
                del self.children[index]
                break
        return self

    def remove(self) -> None:
        """Detach this node from its parent.

        The parent reference is kept, so calling ``remove`` again is a no-op.

        Raises:
            NoParentError: If the node was never attached or its parent is gone
        """
        parent = self.parent
        if parent is None:
            raise NoParentError(
                f"Cannot remove <{self.tag_name}>: node has no parent"
            )
        parent.remove_child(self)
        logger.debug(
            "Removed node from parent",
            extra={"tag": self.tag_name, "parent": parent.tag_name},
        )

    def get_element_by_id(
        self, id: str, children: Optional[Sequence[Any]] = None
    ) -> Optional["Tag"]:
        """Find the first node with a matching id in document order.

        Args:
            id: Id to look for
            children: Subtree roots to search, defaults to this node's children.
                The node itself is never matched.

        Returns:
            The first matching node, or None
        """
        if id is None:
            return None
        if children is None:
            children = self.children

        stack = list(reversed(children))
        while stack:
            item = stack.pop()
            if getattr(item, "id", None) == id:
                return item
            nested = getattr(item, "children", None)
            if nested:
                stack.extend(reversed(nested))
        return None

    def iter_elements(self) -> Iterator["Tag"]:
        """Iterate over this node and its descendant nodes in document order."""
        stack: List[Tag] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(
                child for child in reversed(node.children) if isinstance(child, Tag)
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the tree back into a descriptor mapping."""
        result: Dict[str, Any] = {"name": self.tag_name}
        if self.id is not None:
            result["id"] = self.id
        if self.attribute:
            result["attribute"] = dict(self.attribute)
        if self.children:
            result["children"] = [
                child.to_dict() if isinstance(child, Tag) else child
                for child in self.children
            ]
        return result

    def to_string(self, config: Optional[RenderConfig] = None) -> str:
        """Serialize this node and its subtree to an XML string."""
        return XMLRenderer(config).serialize(self)

    def __str__(self) -> str:
        return self.to_string()

    def _adopt(self, child: Any, depth: int) -> Any:
        if isinstance(child, Mapping):
            child = _build_from_descriptor(type(self), child, self.config, depth)
        if isinstance(child, Tag):
            self._claim(child)
        return child

    def _claim(self, value: "Tag") -> None:
        previous = value.parent
        if previous is not None:
            if self.config.reparent_policy is ReparentPolicy.DETACH:
                previous.remove_child(value)
            elif previous is not self:
                logger.debug(
                    "Re-parenting node without detaching it",
                    extra={"tag": value.tag_name, "previous": previous.tag_name},
                )
        value._parent_ref = weakref.ref(self)

    def _check_not_descendant(self, value: "Tag") -> None:
        # Covers stale entries left in old parents under ReparentPolicy.KEEP.
        if any(node is self for node in value.iter_elements()):
            raise InvalidConfigError(
                f"Cannot append <{value.tag_name}> to itself or a descendant",
                field_name="children",
            )


def _coerce_attribute(attribute: Any) -> Dict[str, str]:
    if attribute is None:
        return {}
    if not isinstance(attribute, Mapping):
        raise InvalidConfigError(
            "Tag attribute must be a mapping", field_name="attribute"
        )
    return dict(attribute)


def _coerce_children(children: Any) -> List[Any]:
    if children is None:
        return []
    if not isinstance(children, (list, tuple)):
        raise InvalidConfigError(
            "Tag children must be a list or tuple", field_name="children"
        )
    if any(child is None for child in children):
        raise InvalidConfigError(
            "Tag children must not contain None", field_name="children"
        )
    return list(children)


def _build_from_descriptor(
    cls: type, descriptor: Mapping[str, Any], config: TreeConfig, depth: int
) -> Tag:
    if not isinstance(descriptor, Mapping):
        raise InvalidConfigError("Descriptor must be a mapping")
    if depth >= config.max_depth:
        raise InvalidConfigError(
            f"Descriptor nesting exceeds max_depth ({config.max_depth})",
            field_name="children",
        )

    unknown = set(descriptor) - DESCRIPTOR_KEYS
    if unknown:
        raise InvalidConfigError(
            f"Unknown descriptor keys: {sorted(unknown)}",
            suggestions=sorted(DESCRIPTOR_KEYS),
        )
    if "name" not in descriptor:
        raise InvalidConfigError("Descriptor is missing 'name'", field_name="name")

    children = [
        _build_from_descriptor(cls, child, config, depth + 1)
        if isinstance(child, Mapping) else child
        for child in _coerce_children(descriptor.get("children"))
    ]
    return cls(
        tag_name=descriptor["name"],
        id=descriptor.get("id"),
        attribute=descriptor.get("attribute"),
        children=children,
        config=config,
    )
