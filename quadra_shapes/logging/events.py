"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)

Event Naming Convention:
    <component>.<action>

    component: shape, registry, config, cli, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - shape.*: Shape computations
    - registry.*: Registry mutations
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Shape Events ==========
    SHAPE_AREA_COMPUTED = "shape.area_computed"
    """Area computed for a shape."""

    SHAPE_COMPARED = "shape.compared"
    """Two shapes compared by area."""

    SHAPE_SUMMARY_COMPUTED = "shape.summary_computed"
    """Area summary computed over a group of shapes."""

    # ========== Registry Events ==========
    REGISTRY_SHAPE_ADDED = "registry.shape_added"
    """Named shape added to registry."""

    REGISTRY_SHAPE_REMOVED = "registry.shape_removed"
    """Named shape removed from registry."""

    REGISTRY_CLEARED = "registry.cleared"
    """All shapes removed from registry."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file loaded and validated."""

    # ========== Error Events ==========
    INVALID_DIMENSION_ERROR = "error.invalid_dimension"
    """Shape rejected because of an invalid dimension."""

    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""


# Event categories for filtering
SHAPE_EVENTS = {
    LogEvent.SHAPE_AREA_COMPUTED,
    LogEvent.SHAPE_COMPARED,
    LogEvent.SHAPE_SUMMARY_COMPUTED,
}

REGISTRY_EVENTS = {
    LogEvent.REGISTRY_SHAPE_ADDED,
    LogEvent.REGISTRY_SHAPE_REMOVED,
    LogEvent.REGISTRY_CLEARED,
}

ERROR_EVENTS = {
    LogEvent.INVALID_DIMENSION_ERROR,
    LogEvent.CONFIG_ERROR,
}
