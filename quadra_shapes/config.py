"""
Configuration schema for Quadra.

Defines the comparison policy, logging level and the named shapes loaded
from a YAML file.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from quadra_shapes.geometry import ComparisonPolicy, Rectangle
from quadra_shapes.schemas import shape_from_dict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class QuadraConfig:
    """
    Main configuration.

    Loaded from YAML and validated at construction.
    Immutable after construction (frozen dataclass).
    """

    comparison_policy: ComparisonPolicy = ComparisonPolicy.EXACT
    log_level: str = "INFO"
    shapes: Dict[str, Rectangle] = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration."""
        object.__setattr__(
            self, "comparison_policy", ComparisonPolicy.parse(self.comparison_policy)
        )

        level = str(self.log_level).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {VALID_LOG_LEVELS}"
            )
        object.__setattr__(self, "log_level", level)

        for name, shape in self.shapes.items():
            if not isinstance(shape, Rectangle):
                raise ValueError(
                    f"Shape '{name}' must be a Rectangle or Square, "
                    f"got {type(shape).__name__}"
                )

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuadraConfig":
        """
        Build configuration from a parsed mapping.

        Raises:
            ValueError: If any entry is invalid
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Config root must be a mapping, got {type(data).__name__}"
            )

        shapes_data = data.get("shapes") or []
        if not isinstance(shapes_data, list):
            raise ValueError("'shapes' must be a list of shape entries")

        shapes: Dict[str, Rectangle] = {}
        for index, entry in enumerate(shapes_data):
            if not isinstance(entry, dict):
                raise ValueError(f"Shape entry #{index} must be a mapping")

            name = entry.get("name")
            if not name:
                raise ValueError(f"Shape entry #{index} is missing 'name'")
            if not isinstance(name, str):
                raise ValueError(f"Shape entry #{index} 'name' must be a string")
            if name in shapes:
                raise ValueError(f"Duplicate shape name: '{name}'")

            shape_data = {k: v for k, v in entry.items() if k != "name"}
            try:
                shapes[name] = shape_from_dict(shape_data)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Invalid shape '{name}': {e}") from e

        return cls(
            comparison_policy=data.get("comparison_policy", ComparisonPolicy.EXACT),
            log_level=data.get("log_level", "INFO"),
            shapes=shapes,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "QuadraConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            comparison_policy: exact
            log_level: INFO

            shapes:
              - name: lot_a
                type: rectangle
                width: 3.0
                length: 4.0
              - name: tile
                type: square
                side: 5.0

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML or any entry is invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        return cls.from_dict(data)
