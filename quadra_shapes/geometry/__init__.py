"""
Geometry Layer
==============

Bounded Context: Pure shape value objects and area comparison.

Responsibilities:
- Shape representation (immutable)
- Area computation
- Area comparison under an explicit policy
- NO state, NO logging, NO I/O

Design Philosophy:
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from quadra_shapes.geometry.comparison import AreaComparator, ComparisonPolicy, HasArea
from quadra_shapes.geometry.shapes import InvalidDimensionError, Rectangle, ShapeType, Square

__all__ = [
    "HasArea",
    "Rectangle",
    "Square",
    "ShapeType",
    "InvalidDimensionError",
    "ComparisonPolicy",
    "AreaComparator",
]
