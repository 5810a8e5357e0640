"""Shared fixtures for quadra tests."""

import logging

import pytest

from quadra_shapes import Rectangle, Square


@pytest.fixture(autouse=True)
def reset_quadra_loggers():
    """Drop handlers bound to captured streams between tests."""
    yield
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("quadra."):
            logging.getLogger(name).handlers.clear()


@pytest.fixture
def shapes():
    return {
        "lot_a": Rectangle(3.0, 4.0),
        "tile": Square(5.0),
        "strip": Rectangle(1.0, 4.0),
    }


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "shapes.yaml"
    path.write_text(
        "comparison_policy: exact\n"
        "log_level: INFO\n"
        "shapes:\n"
        "  - name: lot_a\n"
        "    type: rectangle\n"
        "    width: 3.0\n"
        "    length: 4.0\n"
        "  - name: tile\n"
        "    type: square\n"
        "    side: 5.0\n"
        "  - name: strip\n"
        "    type: rectangle\n"
        "    width: 1.0\n"
        "    length: 4.0\n"
    )
    return path
