"""Tests for the element kind catalog and named factories."""

import logging

import pytest

from bpmn_tag_tree.factory import (
    CATALOG,
    CATEGORIES,
    ElementKind,
    create_element,
    error_event_definition,
    exclusive_gateway,
    get_kind,
    kinds_in_category,
    sequence_flow,
    start_event,
    types,
)
from bpmn_tag_tree.shared import (
    InvalidConfigError,
    ReparentPolicy,
    TreeConfig,
    UnknownElementKindError,
)
from bpmn_tag_tree.tree import Tag


class TestCatalog:
    """Test the static catalog contents."""

    def test_catalog_contains_all_element_kinds(self) -> None:
        """Test every supported element kind is listed."""
        assert list(CATALOG) == [
            "startEvent",
            "endEvent",
            "errorEventDefinition",
            "exclusiveGateway",
            "parallelGateway",
            "inclusiveGateway",
            "userTask",
            "serviceTask",
            "sequenceFlow",
        ]

    def test_every_kind_requires_id(self) -> None:
        """Test that id is a conventional attribute of every kind."""
        assert all("id" in kind.required_attributes for kind in CATALOG.values())

    def test_sequence_flow_expects_references(self) -> None:
        """Test the flow kind lists its reference attributes."""
        kind = get_kind("sequenceFlow")

        assert kind.category == "flow"
        assert kind.required_attributes == ("id", "sourceRef", "target")

    def test_kinds_in_category(self) -> None:
        """Test grouping by category."""
        assert [kind.name for kind in kinds_in_category("gateway")] == [
            "exclusiveGateway", "parallelGateway", "inclusiveGateway",
        ]
        assert kinds_in_category("unknown") == []

    def test_categories_cover_catalog(self) -> None:
        """Test each kind belongs to a known category."""
        assert {kind.category for kind in CATALOG.values()} == set(CATEGORIES)

    def test_unknown_kind_raises_error(self) -> None:
        """Test looking up a kind that is not catalogued."""
        with pytest.raises(UnknownElementKindError) as exc_info:
            get_kind("boundaryEvent")

        assert isinstance(exc_info.value, InvalidConfigError)
        assert "startEvent" in exc_info.value.suggestions

    def test_missing_attributes(self) -> None:
        """Test reporting of absent conventional attributes."""
        kind = get_kind("sequenceFlow")
        tag = Tag("sequenceFlow", attribute={"id": "f", "target": "b"})

        assert kind.missing_attributes(tag) == ["sourceRef"]

    def test_element_kind_is_immutable(self) -> None:
        """Test catalog entries cannot be modified."""
        kind = get_kind("userTask")

        with pytest.raises(AttributeError):
            kind.name = "task"  # type: ignore


class TestFactories:
    """Test building tags through the factories."""

    def test_create_element(self) -> None:
        """Test generic creation with all arguments."""
        child = Tag("documentation")
        tag = create_element("userTask", attribute={"id": "u"}, id="u", children=[child])

        assert tag.tag_name == "userTask"
        assert tag.id == "u"
        assert tag.attribute == {"id": "u"}
        assert child.parent is tag

    def test_create_unknown_kind_raises_error(self) -> None:
        """Test creating a kind that is not catalogued."""
        with pytest.raises(UnknownElementKindError):
            create_element("task")

    def test_named_factory_sequence_flow(self) -> None:
        """Test the sequence flow factory end to end."""
        flow = sequence_flow(id="f1", attribute={"sourceRef": "a", "target": "b"})

        assert flow.to_string() == '<sequenceFlow sourceRef="a" target="b"/>'

    def test_start_event_with_error_definition(self) -> None:
        """Test nesting factory-built elements."""
        event = start_event(attribute={"id": "s"})
        event.append_child(error_event_definition(attribute={"id": "e"}))

        assert event.to_string() == (
            '<startEvent id="s"><errorEventDefinition id="e"/></startEvent>'
        )

    def test_grouped_factories(self) -> None:
        """Test the category namespaces."""
        gateway = types.gateway.exclusive_gateway(
            attribute={"id": "g", "default": "f2"}
        )

        assert gateway.tag_name == "exclusiveGateway"
        assert types.event.end_event().tag_name == "endEvent"
        assert types.task.service_task().tag_name == "serviceTask"
        assert types.flow.sequence_flow().tag_name == "sequenceFlow"

    def test_factory_passes_config(self) -> None:
        """Test factories forward the tree configuration."""
        config = TreeConfig(reparent_policy=ReparentPolicy.DETACH)

        assert exclusive_gateway(config=config).config is config

    def test_missing_attributes_are_logged_not_raised(self, caplog) -> None:
        """Test conventional attributes are not enforced."""
        with caplog.at_level(logging.DEBUG, logger="bpmn_tag_tree.factory.catalog"):
            tag = start_event()

        assert tag.attribute == {}
        assert any(
            "without conventional attributes" in record.getMessage()
            for record in caplog.records
        )

    def test_element_kind_create(self) -> None:
        """Test building directly from a custom kind."""
        kind = ElementKind("scriptTask", "task", "Script task")

        assert kind.create(attribute={"id": "x"}).tag_name == "scriptTask"
