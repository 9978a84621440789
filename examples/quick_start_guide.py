#!/usr/bin/env python3
"""
Quick Start Guide for BPMN Tag Tree.

Builds a small process with the element factories, edits it in place and
prints the resulting XML.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bpmn_tag_tree import RenderConfig, Tag, types


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - BPMN Tag Tree")
    print("=" * 30)

    # Step 1: Build a process from factories
    process = Tag("process", id="p1", attribute={"id": "p1", "isExecutable": "true"})
    process.append_child(types.event.start_event(id="start", attribute={"id": "start"}))
    process.append_child(types.task.user_task(id="review", attribute={"id": "review", "name": "Review"}))
    process.append_child(types.event.end_event(id="end", attribute={"id": "end"}))
    process.append_child(types.flow.sequence_flow(
        id="f1", attribute={"id": "f1", "sourceRef": "start", "target": "review"}
    ))
    process.append_child(types.flow.sequence_flow(
        id="f2", attribute={"id": "f2", "sourceRef": "review", "target": "end"}
    ))
    print(process)

    # Step 2: Look up and edit nodes by id
    review = process.get_element_by_id("review")
    review.set_attribute("name", "Review & approve")
    process.get_element_by_id("end").append_child(
        types.event.error_event_definition(attribute={"id": "err"})
    )

    # Step 3: Remove a node
    process.get_element_by_id("f2").remove()

    print(process.to_string(RenderConfig(xml_declaration=True)))


if __name__ == "__main__":
    quick_start_example()
