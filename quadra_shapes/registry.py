"""
Shape Registry - Thread-safe collection of named shapes.

Thread Safety:
- Uses threading.Lock for protecting the shape dict
- Snapshot pattern: reads copy under the lock, then compute outside it
- Shapes are immutable (frozen dataclass)
"""

import threading
from functools import cmp_to_key
from typing import Dict, List, Optional, Tuple, Union

from quadra_shapes.analytics import AreaSummary, summarize
from quadra_shapes.config import QuadraConfig
from quadra_shapes.geometry import AreaComparator, ComparisonPolicy, HasArea
from quadra_shapes.logging import LogEvent, StructuredLogger


class ShapeRegistry:
    """
    Thread-safe registry of named shapes.

    Usage:
        registry = ShapeRegistry()
        registry.add("tile", Square(5.0))
        registry.add("lot_a", Rectangle(3.0, 4.0))

        registry.ranked()   # [("tile", Square(side=5.0)), ("lot_a", ...)]
        registry.summary()  # AreaSummary(count=2, total_area=37.0, ...)
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        """
        Args:
            logger: Optional structured logger for mutation events
        """
        self._shapes: Dict[str, HasArea] = {}
        self._lock = threading.Lock()
        self._logger = logger

    @classmethod
    def from_config(
        cls,
        config: QuadraConfig,
        logger: Optional[StructuredLogger] = None
    ) -> "ShapeRegistry":
        """Build a registry holding every shape declared in config."""
        registry = cls(logger=logger)
        for name, shape in config.shapes.items():
            registry.add(name, shape)
        return registry

    def add(self, name: str, shape: HasArea) -> None:
        """
        Add a named shape.

        Raises:
            ValueError: If name is empty or already registered
            TypeError: If shape does not expose area()
        """
        if not name:
            raise ValueError("Shape name cannot be empty")
        if not isinstance(shape, HasArea):
            raise TypeError(
                f"Shape '{name}' must expose area(), got {type(shape).__name__}"
            )

        with self._lock:
            if name in self._shapes:
                raise ValueError(f"Shape '{name}' already exists")
            self._shapes[name] = shape

        if self._logger:
            self._logger.info(
                event=LogEvent.REGISTRY_SHAPE_ADDED,
                message=f"Added shape '{name}'",
                metadata={'name': name, 'area': shape.area()}
            )

    def remove(self, name: str) -> None:
        """
        Remove a named shape.

        Raises:
            KeyError: If name is not registered
        """
        with self._lock:
            if name not in self._shapes:
                raise KeyError(f"Shape '{name}' not found")
            del self._shapes[name]

        if self._logger:
            self._logger.info(
                event=LogEvent.REGISTRY_SHAPE_REMOVED,
                message=f"Removed shape '{name}'",
                metadata={'name': name}
            )

    def get(self, name: str) -> HasArea:
        """
        Get a shape by name.

        Raises:
            KeyError: If name is not registered
        """
        with self._lock:
            if name not in self._shapes:
                raise KeyError(f"Shape '{name}' not found")
            return self._shapes[name]

    def list_shapes(self) -> Dict[str, float]:
        """Snapshot of {name: area} in insertion order."""
        with self._lock:
            snapshot = dict(self._shapes)
        return {name: shape.area() for name, shape in snapshot.items()}

    def ranked(
        self,
        policy: Union[ComparisonPolicy, str] = ComparisonPolicy.EXACT,
        descending: bool = True
    ) -> List[Tuple[str, HasArea]]:
        """
        Return (name, shape) pairs ordered by area.

        Args:
            policy: Comparison policy used for ordering
            descending: Largest first when True (default)
        """
        with self._lock:
            items = list(self._shapes.items())

        policy = ComparisonPolicy.parse(policy)
        key = cmp_to_key(lambda a, b: AreaComparator.compare(a[1], b[1], policy))
        return sorted(items, key=key, reverse=descending)

    def summary(self) -> AreaSummary:
        """Area summary over all registered shapes."""
        with self._lock:
            shapes = list(self._shapes.values())
        return summarize(shapes)

    def clear(self) -> None:
        """Remove all shapes."""
        with self._lock:
            self._shapes.clear()

        if self._logger:
            self._logger.info(
                event=LogEvent.REGISTRY_CLEARED,
                message="Cleared registry"
            )

    def count(self) -> int:
        """Number of registered shapes."""
        with self._lock:
            return len(self._shapes)
