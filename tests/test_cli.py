"""Tests for the quadra command-line interface."""

import json
import logging

import pytest

from quadra_cli.cli import build_parser, main, parse_shape
from quadra_shapes import InvalidDimensionError, Rectangle, Square


# ========== parse_shape ==========

@pytest.mark.parametrize("literal, expected", [
    ("square:2", Square(2.0)),
    ("Square:2.5", Square(2.5)),
    ("rectangle:3x4", Rectangle(3.0, 4.0)),
    ("rectangle:1.5X2", Rectangle(1.5, 2.0)),
])
def test_parse_shape(literal, expected):
    assert parse_shape(literal) == expected


@pytest.mark.parametrize("literal", ["square", "square:", "circle:1", "rectangle:3", "square:wide"])
def test_parse_shape_rejects_malformed(literal):
    with pytest.raises(ValueError):
        parse_shape(literal)


def test_parse_shape_keeps_dimension_error():
    with pytest.raises(InvalidDimensionError):
        parse_shape("square:-1")


# ========== area ==========

def test_area_rectangle(capsys):
    assert main(["area", "rectangle", "3", "4"]) == 0
    assert capsys.readouterr().out.strip() == "12"


def test_area_square(capsys):
    assert main(["area", "square", "2.5"]) == 0
    assert capsys.readouterr().out.strip() == "6.25"


def test_area_rejects_negative(capsys):
    assert main(["area", "square", "-2"]) == 1
    assert "Error: side must be a positive finite number" in capsys.readouterr().err


def test_area_logs_json(caplog, capsys):
    caplog.set_level(logging.INFO, logger="quadra.cli")
    assert main(["--log-level", "INFO", "area", "square", "5"]) == 0

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["event"] == "shape.area_computed"
    assert entry["metadata"] == {"shape": {"type": "square", "side": 5.0}, "area": 25.0}


# ========== compare ==========

@pytest.mark.parametrize("args, expected", [
    (["square:3", "square:2"], "1"),
    (["square:2", "square:3"], "-1"),
    (["square:2", "rectangle:1x4"], "0"),
    (["square:2", "square:2.0000001", "--policy", "truncate"], "0"),
    (["square:2", "square:2", "--policy", "strict_sign"], "-1"),
])
def test_compare(capsys, args, expected):
    assert main(["compare", *args]) == 0
    assert capsys.readouterr().out.strip() == expected


def test_compare_bad_literal(capsys):
    assert main(["compare", "circle:1", "square:1"]) == 1
    assert "Unknown shape kind" in capsys.readouterr().err


def test_compare_bad_policy():
    with pytest.raises(SystemExit) as exc_info:
        main(["compare", "square:1", "square:2", "--policy", "fuzzy"])
    assert exc_info.value.code == 2


# ========== summary ==========

def test_summary(capsys, config_file):
    assert main(["summary", str(config_file)]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert [line.split()[1] for line in lines[:3]] == ["tile", "lot_a", "strip"]
    assert lines[-1] == "count=3, total=41, min=4, max=25, mean=13.6667"


def test_summary_rejects_non_string_name(capsys, tmp_path):
    path = tmp_path / "bad_name.yaml"
    path.write_text("shapes:\n  - name: [a]\n    type: square\n    side: 1\n")

    assert main(["summary", str(path)]) == 1
    assert "'name' must be a string" in capsys.readouterr().err


def test_summary_missing_config(capsys, tmp_path):
    assert main(["summary", str(tmp_path / "missing.yaml")]) == 1
    assert "Config file not found" in capsys.readouterr().err


def test_summary_logs_config_error(caplog, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("comparison_policy: fuzzy\n")
    caplog.set_level(logging.INFO, logger="quadra.cli")

    assert main(["summary", str(path)]) == 1
    events = [json.loads(r.getMessage())["event"] for r in caplog.records]
    assert events == ["error.config"]


def test_summary_uses_config_log_level(caplog, config_file):
    caplog.set_level(logging.DEBUG, logger="quadra.cli")
    assert main(["summary", str(config_file)]) == 0

    events = [json.loads(r.getMessage())["event"] for r in caplog.records]
    assert events[0] == "config.loaded"
    assert events.count("registry.shape_added") == 3
    assert events[-1] == "shape.summary_computed"


# ========== parser ==========

def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: quadra" in capsys.readouterr().out


def test_area_requires_kind():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["area"])
