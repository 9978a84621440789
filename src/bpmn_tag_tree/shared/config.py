"""Configuration classes for tag tree construction and XML rendering.

Configuration objects are plain dataclasses validated on creation. Invalid
values raise :class:`InvalidConfigError` with the offending field name.
"""

import codecs
import json
from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

from bpmn_tag_tree.shared.errors import InvalidConfigError


class ReparentPolicy(Enum):
    """What append_child does with a node that already has a parent."""

    KEEP = "keep"       # Leave the node in the previous parent's children
    DETACH = "detach"   # Remove the node from the previous parent first


@dataclass
class TreeConfig:
    """Configuration for tag tree construction and mutation."""

    reparent_policy: ReparentPolicy = ReparentPolicy.KEEP
    max_depth: int = 1000

    def __post_init__(self) -> None:
        """Validate tree configuration."""
        if isinstance(self.reparent_policy, str):
            try:
                self.reparent_policy = ReparentPolicy(self.reparent_policy)
            except ValueError as e:
                raise InvalidConfigError(
                    f"Unknown reparent_policy: {self.reparent_policy!r}",
                    field_name="reparent_policy",
                    suggestions=[policy.value for policy in ReparentPolicy],
                ) from e
        if not isinstance(self.reparent_policy, ReparentPolicy):
            raise InvalidConfigError(
                "reparent_policy must be a ReparentPolicy",
                field_name="reparent_policy",
            )
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise InvalidConfigError(
                "max_depth must be an integer", field_name="max_depth"
            )
        if self.max_depth <= 0:
            raise InvalidConfigError("max_depth must be > 0", field_name="max_depth")


@dataclass
class RenderConfig:
    """Configuration for XML serialization."""

    short_empty_elements: bool = True
    xml_declaration: bool = False
    encoding: str = "UTF-8"

    def __post_init__(self) -> None:
        """Validate render configuration."""
        if not isinstance(self.encoding, str) or not self.encoding:
            raise InvalidConfigError(
                "encoding must be a non-empty string", field_name="encoding"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise InvalidConfigError(
                f"Unknown encoding: {self.encoding!r}", field_name="encoding"
            ) from e


@dataclass
class TagTreeConfig:
    """Combined configuration for the tree and the renderer."""

    tree: TreeConfig = field(default_factory=TreeConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a JSON-compatible dictionary."""
        data = asdict(self)
        data["tree"]["reparent_policy"] = self.tree.reparent_policy.value
        return data

    def to_json(self, indent: int = 2) -> str:
        """Serialize configuration to JSON."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TagTreeConfig":
        """Create configuration from a dictionary.

        Args:
            data: Dictionary with optional ``tree`` and ``render`` sections

        Returns:
            TagTreeConfig instance

        Raises:
            InvalidConfigError: If a section is malformed or has unknown keys
        """
        if not isinstance(data, dict):
            raise InvalidConfigError("Configuration must be a JSON object")

        unknown = set(data) - {"tree", "render"}
        if unknown:
            raise InvalidConfigError(
                f"Unknown configuration sections: {sorted(unknown)}",
                suggestions=["tree", "render"],
            )

        sections: Dict[str, Any] = {}
        for name, section_class in (("tree", TreeConfig), ("render", RenderConfig)):
            section = data.get(name, {})
            if not isinstance(section, dict):
                raise InvalidConfigError(
                    f"Section '{name}' must be an object", field_name=name
                )
            try:
                sections[name] = section_class(**section)
            except TypeError as e:
                raise InvalidConfigError(
                    f"Invalid keys in section '{name}': {e}", field_name=name
                ) from e

        return cls(**sections)

    @classmethod
    def from_json(cls, json_str: str) -> "TagTreeConfig":
        """Create configuration from a JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise InvalidConfigError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "TagTreeConfig":
        """Load configuration from a JSON file."""
        path = Path(config_path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise InvalidConfigError(
                f"Could not read configuration file {path}: {e}"
            ) from e
        return cls.from_json(text)
