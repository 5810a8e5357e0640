"""
Quadra CLI - Command-line interface for shape areas.

Usage:
    quadra area rectangle 3 4
    quadra area square 5
    quadra compare square:3 square:2 --policy exact
    quadra summary config/shapes.example.yaml
"""

__version__ = "1.0.0"
