"""
Area Comparison Module
======================

Stateless comparison logic - orders shapes by area.

Design:
- Pure functions (no state)
- Generic over the HasArea capability (any object with area())
- Explicit, selectable comparison policy
- Thread-safe (no mutations)

Policies:
    EXACT        -1 / 0 / 1 on the sign of the area difference (default)
    TRUNCATE     int(area_a - area_b), truncated toward zero
    STRICT_SIGN  1 if area_a > area_b else -1 (equal areas yield -1)
"""

from enum import Enum
from functools import cmp_to_key
from typing import Iterable, List, Protocol, Union, runtime_checkable


@runtime_checkable
class HasArea(Protocol):
    """Protocol for anything that can report an area."""

    def area(self) -> float:
        ...


class ComparisonPolicy(str, Enum):
    """Rule mapping an area difference to an ordering indicator."""

    EXACT = "exact"
    TRUNCATE = "truncate"
    STRICT_SIGN = "strict_sign"

    @classmethod
    def parse(cls, value: Union["ComparisonPolicy", str]) -> "ComparisonPolicy":
        """
        Resolve a policy from an enum member or its string value.

        Args:
            value: ComparisonPolicy or string (case-insensitive)

        Returns:
            Matching ComparisonPolicy

        Raises:
            ValueError: If value names no known policy
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Invalid comparison policy: {value!r}. Must be one of: {valid}"
            ) from None


class AreaComparator:
    """
    Stateless comparator for shapes exposing area().

    All methods are static. Callers pass the policy explicitly; EXACT is the
    default everywhere.
    """

    @staticmethod
    def compare(
        a: HasArea,
        b: HasArea,
        policy: Union[ComparisonPolicy, str] = ComparisonPolicy.EXACT
    ) -> int:
        """
        Compare two shapes by area.

        Args:
            a: Left-hand shape
            b: Right-hand shape
            policy: Comparison policy (default: EXACT)

        Returns:
            Negative if a is smaller, positive if larger, 0 when the policy
            considers the areas equal

        Raises:
            TypeError: If either argument does not expose area()
            ValueError: If policy is unknown
        """
        for name, shape in (("left", a), ("right", b)):
            if not isinstance(shape, HasArea):
                raise TypeError(
                    f"{name} operand must expose area(), got {type(shape).__name__}"
                )

        policy = ComparisonPolicy.parse(policy)
        diff = a.area() - b.area()

        if policy is ComparisonPolicy.TRUNCATE:
            return int(diff)

        if policy is ComparisonPolicy.STRICT_SIGN:
            return 1 if diff > 0.0 else -1

        if diff > 0:
            return 1
        elif diff < 0:
            return -1
        else:
            return 0

    @staticmethod
    def sort_by_area(
        shapes: Iterable[HasArea],
        policy: Union[ComparisonPolicy, str] = ComparisonPolicy.EXACT,
        reverse: bool = False
    ) -> List[HasArea]:
        """
        Return shapes sorted by area (ascending unless reverse=True).

        The sort is stable under EXACT. TRUNCATE treats near-equal areas as
        ties, so their input order is kept.
        """
        policy = ComparisonPolicy.parse(policy)
        key = cmp_to_key(lambda a, b: AreaComparator.compare(a, b, policy))
        return sorted(shapes, key=key, reverse=reverse)

    @staticmethod
    def largest(
        shapes: Iterable[HasArea],
        policy: Union[ComparisonPolicy, str] = ComparisonPolicy.EXACT
    ) -> HasArea:
        """
        Return the shape with the largest area.

        Raises:
            ValueError: If shapes is empty
        """
        policy = ComparisonPolicy.parse(policy)
        best = None
        for shape in shapes:
            if best is None or AreaComparator.compare(shape, best, policy) > 0:
                best = shape
        if best is None:
            raise ValueError("largest() requires at least one shape")
        return best
