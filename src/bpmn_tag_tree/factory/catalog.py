"""Catalog of process-definition element kinds.

Each entry names a BPMN element and the attributes it carries by convention.
Factories build plain :class:`Tag` nodes; conventional attributes are only
reported, never enforced.
"""

from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from bpmn_tag_tree.shared import TreeConfig, UnknownElementKindError, get_logger
from bpmn_tag_tree.tree import Tag

EVENT = "event"
GATEWAY = "gateway"
TASK = "task"
FLOW = "flow"

CATEGORIES = (EVENT, GATEWAY, TASK, FLOW)

logger = get_logger(__name__, component="element_factory")


@dataclass(frozen=True)
class ElementKind:
    """Static description of one element kind."""

    name: str
    category: str
    description: str
    required_attributes: Tuple[str, ...] = ("id",)
    optional_attributes: Tuple[str, ...] = ()

    def missing_attributes(self, tag: Tag) -> List[str]:
        """List conventional attributes absent from tag."""
        return [key for key in self.required_attributes if key not in tag.attribute]

    def create(
        self,
        attribute: Optional[Mapping[str, str]] = None,
        id: Optional[str] = None,
        children: Optional[Sequence[Any]] = None,
        config: Optional[TreeConfig] = None,
    ) -> Tag:
        """Build a Tag of this kind."""
        tag = Tag(
            tag_name=self.name,
            id=id,
            attribute=attribute,
            children=children,
            config=config,
        )
        missing = self.missing_attributes(tag)
        if missing:
            logger.debug(
                "Element created without conventional attributes",
                extra={"kind": self.name, "missing": missing},
            )
        return tag


CATALOG: Dict[str, ElementKind] = {
    kind.name: kind
    for kind in (
        ElementKind("startEvent", EVENT, "Start event"),
        ElementKind("endEvent", EVENT, "End event"),
        ElementKind("errorEventDefinition", EVENT, "Error event definition"),
        ElementKind(
            "exclusiveGateway", GATEWAY, "Exclusive gateway",
            optional_attributes=("name", "default"),
        ),
        ElementKind(
            "parallelGateway", GATEWAY, "Parallel gateway",
            optional_attributes=("name",),
        ),
        ElementKind(
            "inclusiveGateway", GATEWAY, "Inclusive gateway",
            optional_attributes=("name",),
        ),
        ElementKind(
            "userTask", TASK, "User task",
            optional_attributes=("name",),
        ),
        ElementKind(
            "serviceTask", TASK, "Service task",
            optional_attributes=("name",),
        ),
        ElementKind(
            "sequenceFlow", FLOW, "Sequence flow",
            required_attributes=("id", "sourceRef", "target"),
            optional_attributes=("name",),
        ),
    )
}


def get_kind(name: str) -> ElementKind:
    """Look up an element kind by its tag name."""
    try:
        return CATALOG[name]
    except KeyError:
        raise UnknownElementKindError(
            f"Unknown element kind: {name!r}",
            field_name="name",
            suggestions=sorted(CATALOG),
        ) from None


def kinds_in_category(category: str) -> List[ElementKind]:
    """List element kinds of one category in catalog order."""
    return [kind for kind in CATALOG.values() if kind.category == category]


def create_element(
    kind: str,
    attribute: Optional[Mapping[str, str]] = None,
    id: Optional[str] = None,
    children: Optional[Sequence[Any]] = None,
    config: Optional[TreeConfig] = None,
) -> Tag:
    """Build a Tag for the named element kind.

    Raises:
        UnknownElementKindError: If kind is not in the catalog
    """
    return get_kind(kind).create(
        attribute=attribute, id=id, children=children, config=config
    )


def start_event(**kwargs: Any) -> Tag:
    return create_element("startEvent", **kwargs)


def end_event(**kwargs: Any) -> Tag:
    return create_element("endEvent", **kwargs)


def error_event_definition(**kwargs: Any) -> Tag:
    return create_element("errorEventDefinition", **kwargs)


def exclusive_gateway(**kwargs: Any) -> Tag:
    return create_element("exclusiveGateway", **kwargs)


def parallel_gateway(**kwargs: Any) -> Tag:
    return create_element("parallelGateway", **kwargs)


def inclusive_gateway(**kwargs: Any) -> Tag:
    return create_element("inclusiveGateway", **kwargs)


def user_task(**kwargs: Any) -> Tag:
    return create_element("userTask", **kwargs)


def service_task(**kwargs: Any) -> Tag:
    return create_element("serviceTask", **kwargs)


def sequence_flow(**kwargs: Any) -> Tag:
    return create_element("sequenceFlow", **kwargs)


# Grouped access, e.g. types.gateway.exclusive_gateway(...)
types = SimpleNamespace(
    event=SimpleNamespace(
        start_event=start_event,
        end_event=end_event,
        error_event_definition=error_event_definition,
    ),
    gateway=SimpleNamespace(
        exclusive_gateway=exclusive_gateway,
        parallel_gateway=parallel_gateway,
        inclusive_gateway=inclusive_gateway,
    ),
    task=SimpleNamespace(
        user_task=user_task,
        service_task=service_task,
    ),
    flow=SimpleNamespace(
        sequence_flow=sequence_flow,
    ),
)
