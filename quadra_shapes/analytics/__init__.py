"""
Analytics Layer
===============

Bounded Context: Aggregate statistics over shape collections.
"""

from quadra_shapes.analytics.summary import AreaSummary, area_array, summarize

__all__ = [
    "AreaSummary",
    "area_array",
    "summarize",
]
