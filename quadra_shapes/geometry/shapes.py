"""
Geometric Shapes Module
========================

Pure geometric value objects - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Fail-fast validation at construction
- Square is-a Rectangle with width == length == side
- Comparison generic over HasArea (see comparison.py)
"""

import math
import numbers
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from quadra_shapes.geometry.comparison import AreaComparator, ComparisonPolicy, HasArea


class ShapeType(str, Enum):
    """Serialized shape type tag."""
    RECTANGLE = "rectangle"
    SQUARE = "square"


class InvalidDimensionError(ValueError):
    """Raised when a dimension is zero, negative or not finite."""

    def __init__(self, name: str, value: Any, reason: str = "must be a positive finite number"):
        self.name = name
        self.value = value
        super().__init__(f"{name} {reason}, got {value!r}")


def _validate_dimension(name: str, value: Any) -> float:
    """Check a single dimension and return it as float."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")

    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidDimensionError(name, value)
    return value


@dataclass(frozen=True)
class Rectangle:
    """
    Immutable rectangle defined by two dimensions.

    Attributes:
        width: Positive finite width
        length: Positive finite length

    Invariants:
        - width > 0 and length > 0, both finite
        - width * length is finite

    Example:
        >>> Rectangle(3.0, 4.0).area()
        12.0
    """

    width: float
    length: float

    def __post_init__(self):
        """Validate dimensions and normalize them to float."""
        width = _validate_dimension("width", self.width)
        length = _validate_dimension("length", self.length)

        # Using object.__setattr__ for frozen dataclass
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "length", length)

        area = width * length
        if not math.isfinite(area):
            raise InvalidDimensionError(
                "area", area, reason="overflows for the given dimensions"
            )
        if area <= 0.0:
            raise InvalidDimensionError(
                "area", area, reason="underflows for the given dimensions"
            )

    def area(self) -> float:
        """Return width * length."""
        return self.width * self.length

    def compare_to(
        self,
        other: HasArea,
        policy: Union[ComparisonPolicy, str] = ComparisonPolicy.EXACT
    ) -> int:
        """
        Compare this shape's area against another shape.

        Args:
            other: Any object exposing area()
            policy: Comparison policy (default: EXACT)

        Returns:
            Ordering indicator as defined by the policy:
            EXACT returns -1, 0 or 1; TRUNCATE returns int(area difference);
            STRICT_SIGN returns 1 when strictly larger, otherwise -1.

        Raises:
            TypeError: If other does not expose area()
        """
        return AreaComparator.compare(self, other, policy)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "type": ShapeType.RECTANGLE.value,
            "width": self.width,
            "length": self.length,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rectangle":
        """Deserialize from dict.

        Args:
            data: Dictionary with keys: width, length (type optional)

        Returns:
            Rectangle instance

        Raises:
            ValueError: If required keys are missing, values are invalid or
                the type tag does not match
        """
        _check_type_tag(data, ShapeType.RECTANGLE)
        try:
            width = _float_field(data, "width")
            length = _float_field(data, "length")
        except KeyError as e:
            raise ValueError(f"Missing required Rectangle field: {e}") from None
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Rectangle data: {e}") from e
        return cls(width=width, length=length)


@dataclass(frozen=True, init=False)
class Square(Rectangle):
    """
    Immutable square: a Rectangle whose width and length both equal side.

    The side is forwarded twice to Rectangle construction, so validation and
    area() are shared with Rectangle.

    Example:
        >>> Square(5.0).area()
        25.0
        >>> Square(3.0).compare_to(Square(2.0))
        1
    """

    def __init__(self, side: float):
        side = _validate_dimension("side", side)
        super().__init__(side, side)

    def __repr__(self) -> str:
        return f"Square(side={self.side!r})"

    @property
    def side(self) -> float:
        """Side length."""
        return self.width

    def is_square(self) -> bool:
        """
        Always True.

        Deprecated: the type already encodes squareness. Use
        isinstance(shape, Square) instead.
        """
        warnings.warn(
            "Square.is_square() is deprecated; use isinstance(shape, Square)",
            DeprecationWarning,
            stacklevel=2,
        )
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {"type": ShapeType.SQUARE.value, "side": self.side}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Square":
        """Deserialize from dict with key: side (type optional)."""
        _check_type_tag(data, ShapeType.SQUARE)
        try:
            side = _float_field(data, "side")
        except KeyError as e:
            raise ValueError(f"Missing required Square field: {e}") from None
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Square data: {e}") from e
        return cls(side)


def _check_type_tag(data: Dict[str, Any], expected: ShapeType) -> None:
    if not isinstance(data, dict):
        raise ValueError(f"Shape data must be a mapping, got {type(data).__name__}")
    tag = data.get("type")
    if tag is not None and tag != expected.value:
        raise ValueError(f"Expected shape type '{expected.value}', got {tag!r}")


def _float_field(data: Dict[str, Any], key: str) -> float:
    value = data[key]
    if isinstance(value, bool):
        raise TypeError(f"{key} must be a number, got bool")
    return float(value)
