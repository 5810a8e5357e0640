"""
Structured Logging for Quadra
=============================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from quadra_shapes.logging import LogEvent, create_logger
    >>> logger = create_logger("registry")
    >>> logger.info(
    ...     event=LogEvent.REGISTRY_SHAPE_ADDED,
    ...     message="Added shape",
    ...     metadata={'name': 'tile', 'area': 25.0}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
