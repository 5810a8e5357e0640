"""
Shape Schemas
=============

Bounded Context: Shape serialization

Dict form of shapes, suitable for JSON or YAML:

    {"type": "rectangle", "width": 3.0, "length": 4.0}
    {"type": "square", "side": 5.0}
"""

from typing import Any, Dict

from quadra_shapes.geometry.shapes import Rectangle, ShapeType, Square


def shape_from_dict(data: Dict[str, Any]) -> Rectangle:
    """
    Deserialize a shape, dispatching on its "type" key.

    Args:
        data: Dictionary with a "type" key and the matching dimensions

    Returns:
        Rectangle or Square instance

    Raises:
        ValueError: If type is missing or unknown, or dimensions are invalid
    """
    if not isinstance(data, dict):
        raise ValueError(f"Shape data must be a mapping, got {type(data).__name__}")

    if "type" not in data:
        raise ValueError("Missing required shape field: 'type'")

    try:
        shape_type = ShapeType(data["type"])
    except ValueError:
        valid = ", ".join(t.value for t in ShapeType)
        raise ValueError(
            f"Invalid shape type: {data['type']!r}. Must be one of: {valid}"
        ) from None

    if shape_type is ShapeType.SQUARE:
        return Square.from_dict(data)
    return Rectangle.from_dict(data)


def shape_to_dict(shape: Rectangle) -> Dict[str, Any]:
    """Serialize a shape to its dict form."""
    return shape.to_dict()
