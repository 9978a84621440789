"""Main CLI entry point for the bpmn-tag-tree command-line tool.

Renders JSON element descriptors to XML and lists the element catalog.
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from bpmn_tag_tree import __version__
from bpmn_tag_tree.factory import CATALOG, CATEGORIES, kinds_in_category
from bpmn_tag_tree.render import XMLRenderer
from bpmn_tag_tree.shared import (
    InvalidConfigError,
    TagTreeConfig,
    TagTreeError,
    get_logger,
)
from bpmn_tag_tree.tree import Tag

logger = get_logger(__name__, None, "cli")


def load_descriptors(path: Path) -> List[Dict[str, Any]]:
    """Read one descriptor or a list of descriptors from a JSON file.

    ``-`` reads from standard input.
    """
    try:
        if str(path) == "-":
            data = json.load(sys.stdin)
        else:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidConfigError(f"Could not read descriptor {path}: {e}") from e

    if isinstance(data, dict):
        return [data]
    if isinstance(data, list) and all(isinstance(item, dict) for item in data):
        return data
    raise InvalidConfigError(
        "Descriptor file must hold an object or a list of objects"
    )


def render_descriptors(
    descriptors: List[Dict[str, Any]], config: TagTreeConfig
) -> List[str]:
    """Build each descriptor into a tree and serialize it."""
    renderer = XMLRenderer(config.render)
    return [
        renderer.serialize(Tag.from_descriptor(descriptor, config.tree))
        for descriptor in descriptors
    ]


def format_catalog(category: Optional[str], format_type: str) -> str:
    """Format the element catalog for output."""
    kinds = kinds_in_category(category) if category else list(CATALOG.values())

    if format_type == "json":
        return json.dumps(
            [
                {
                    "name": kind.name,
                    "category": kind.category,
                    "description": kind.description,
                    "required_attributes": list(kind.required_attributes),
                    "optional_attributes": list(kind.optional_attributes),
                }
                for kind in kinds
            ],
            indent=2,
        )

    lines = []
    for kind in kinds:
        attributes = ", ".join(kind.required_attributes)
        if kind.optional_attributes:
            attributes += " [" + ", ".join(kind.optional_attributes) + "]"
        lines.append(f"{kind.category:<8} {kind.name:<22} {attributes}")
    return "\n".join(lines)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="bpmn-tag-tree",
        description="Build process-definition markup trees and render them to XML"
    )

    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Render command
    render_parser = subparsers.add_parser(
        "render", help="Render JSON element descriptors to XML"
    )
    render_parser.add_argument(
        "descriptor",
        type=Path,
        help="JSON descriptor file, or - for standard input"
    )
    render_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )
    render_parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path"
    )
    render_parser.add_argument(
        "--no-short-empty",
        action="store_true",
        help="Write empty elements as <a></a> instead of <a/>"
    )
    render_parser.add_argument(
        "--declaration",
        action="store_true",
        help="Prepend an XML declaration"
    )

    # Catalog command
    catalog_parser = subparsers.add_parser("catalog", help="List element kinds")
    catalog_parser.add_argument(
        "--category",
        choices=CATEGORIES,
        help="Only list kinds of this category"
    )
    catalog_parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def cmd_render(args: argparse.Namespace) -> int:
    """Handle render command."""
    try:
        config = TagTreeConfig()
        if args.config:
            config = TagTreeConfig.from_file(args.config)

        # Apply command-line overrides
        if args.no_short_empty:
            config.render = replace(config.render, short_empty_elements=False)
        if args.declaration:
            config.render = replace(config.render, xml_declaration=True)

        documents = render_descriptors(load_descriptors(args.descriptor), config)
    except TagTreeError as e:
        logger.with_correlation(str(args.descriptor)).error(
            "Render failed", extra={"error": str(e)}, exc_info=False
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = "\n".join(documents)
    if args.output:
        try:
            args.output.write_text(output + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
        print(f"Results written to {args.output}", file=sys.stderr)
    else:
        print(output)
    return 0


def cmd_catalog(args: argparse.Namespace) -> int:
    """Handle catalog command."""
    print(format_catalog(args.category, args.format))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Set up logging verbosity
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)

    try:
        if args.command == "render":
            return cmd_render(args)
        elif args.command == "catalog":
            return cmd_catalog(args)
        else:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return 1

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
