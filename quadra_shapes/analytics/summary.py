"""
Area Summary Module
===================

Aggregate statistics over a collection of shapes.

Design:
- Immutable snapshots (AreaSummary)
- Vectorized aggregation with numpy
- Empty input yields an all-zero summary
"""

import numpy as np
from dataclasses import asdict, dataclass
from typing import Dict, Iterable

from quadra_shapes.geometry.comparison import HasArea


@dataclass(frozen=True)
class AreaSummary:
    """
    Immutable statistics snapshot for a group of shapes.

    Design:
    - Frozen dataclass (thread-safe read)
    - Value object (no identity)
    - Can be serialized to JSON
    """

    count: int = 0
    total_area: float = 0.0
    min_area: float = 0.0
    max_area: float = 0.0
    mean_area: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON-compatible dict."""
        return asdict(self)

    def __str__(self) -> str:
        """Human-readable representation."""
        if self.count == 0:
            return "no shapes"
        return (
            f"count={self.count}, total={self.total_area:g}, "
            f"min={self.min_area:g}, max={self.max_area:g}, mean={self.mean_area:g}"
        )


def area_array(shapes: Iterable[HasArea]) -> np.ndarray:
    """Return the areas of shapes as a float64 array."""
    return np.array([shape.area() for shape in shapes], dtype=np.float64)


def summarize(shapes: Iterable[HasArea]) -> AreaSummary:
    """
    Compute an AreaSummary for shapes.

    Args:
        shapes: Any iterable of objects exposing area()

    Returns:
        Frozen AreaSummary

    Raises:
        ValueError: If the total area overflows float64
    """
    areas = area_array(shapes)
    if areas.size == 0:
        return AreaSummary()

    with np.errstate(over="ignore"):
        total = areas.sum()
    if not np.isfinite(total):
        raise ValueError(f"Total area of {areas.size} shapes overflows float64")

    return AreaSummary(
        count=int(areas.size),
        total_area=float(total),
        min_area=float(areas.min()),
        max_area=float(areas.max()),
        mean_area=float(total / areas.size),
    )
