"""Named constructors for process-definition elements.

Key Components:
    CATALOG: Element kind name to ElementKind lookup table
    create_element: Build a Tag for any catalogued kind
    types: Factories grouped by category (event, gateway, task, flow)
"""

from .catalog import (
    CATALOG,
    CATEGORIES,
    ElementKind,
    create_element,
    end_event,
    error_event_definition,
    exclusive_gateway,
    get_kind,
    inclusive_gateway,
    kinds_in_category,
    parallel_gateway,
    sequence_flow,
    service_task,
    start_event,
    types,
    user_task,
)

__all__ = [
    "CATALOG",
    "CATEGORIES",
    "ElementKind",
    "create_element",
    "end_event",
    "error_event_definition",
    "exclusive_gateway",
    "get_kind",
    "inclusive_gateway",
    "kinds_in_category",
    "parallel_gateway",
    "sequence_flow",
    "service_task",
    "start_event",
    "types",
    "user_task",
]
