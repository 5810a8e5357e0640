"""
Quadra Shapes v1.0
==================

Bounded Context: Rectangle and square value objects with area comparison.

Design Philosophy:
- Separation of Concerns: Geometry, Analytics, Registry separated
- Immutable value objects, fail-fast validation
- Explicit comparison policy instead of an implicit one

Architecture:

    quadra_shapes/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── shapes.py      # Rectangle, Square
    │   └── comparison.py  # HasArea, ComparisonPolicy, AreaComparator
    │
    ├── analytics/         # Aggregates over many shapes
    │   └── summary.py     # AreaSummary, summarize
    │
    ├── logging/           # Structured JSON logging
    ├── schemas.py         # Dict (de)serialization
    ├── config.py          # YAML configuration
    └── registry.py        # Thread-safe named shapes

Usage:

    from quadra_shapes import Rectangle, Square, ComparisonPolicy

    Rectangle(3.0, 4.0).area()          # 12.0
    Square(5.0).area()                  # 25.0
    Square(3.0).compare_to(Square(2.0)) # 1
    Square(2.0).compare_to(Rectangle(1.0, 4.0))  # 0

    # Legacy policies
    Square(2.0).compare_to(Square(2.0000001), ComparisonPolicy.TRUNCATE)     # 0
    Square(2.0).compare_to(Square(2.0), ComparisonPolicy.STRICT_SIGN)        # -1
"""

# Geometry Layer (immutable, stateless)
from quadra_shapes.geometry import (
    AreaComparator,
    ComparisonPolicy,
    HasArea,
    InvalidDimensionError,
    Rectangle,
    ShapeType,
    Square,
)

# Analytics Layer
from quadra_shapes.analytics import AreaSummary, summarize

# Serialization, configuration, registry
from quadra_shapes.schemas import shape_from_dict, shape_to_dict
from quadra_shapes.config import QuadraConfig
from quadra_shapes.registry import ShapeRegistry

__all__ = [
    # Geometry
    "HasArea",
    "Rectangle",
    "Square",
    "ShapeType",
    "InvalidDimensionError",
    "ComparisonPolicy",
    "AreaComparator",
    # Analytics
    "AreaSummary",
    "summarize",
    # Schemas
    "shape_from_dict",
    "shape_to_dict",
    # Config / registry
    "QuadraConfig",
    "ShapeRegistry",
]

__version__ = "1.0.0"
