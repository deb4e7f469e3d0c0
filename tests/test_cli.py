"""Tests for chipplot/cli.py."""
import json
import math

import pytest

from chipplot.cli import main
from chipplot.interfaces import to_json


@pytest.fixture
def layout_file(layout, tmp_path):
    path = tmp_path / "chip.json"
    path.write_text(to_json(layout))
    return path


def test_lengths_command(layout_file, capsys):
    assert main(["lengths", str(layout_file)]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["lengths"]["11"] == 30.0
    assert abs(report["total"] - (70 + 5 * math.pi)) < 1e-12


def test_render_command_default_output(layout_file, tmp_path):
    assert main(["render", str(layout_file)]) == 0
    svg = (tmp_path / "chip.svg").read_text()
    assert "A 10 10 0 0 1 50 10" in svg


def test_render_command_explicit_output(layout_file, tmp_path):
    out = tmp_path / "out" / "drawing.svg"
    out.parent.mkdir()
    assert main(["render", str(layout_file), "-o", str(out), "--no-invert-y"]) == 0
    assert "A 10 10 0 0 0 50 10" in out.read_text()


def test_schema_command(capsys):
    assert main(["schema", "channel_path"]) == 0
    schema = json.loads(capsys.readouterr().out)
    assert "pieces" in schema["properties"]


def test_schema_command_unknown_name():
    assert main(["schema", "bezier"]) == 1


def test_missing_file_fails(tmp_path):
    assert main(["lengths", str(tmp_path / "missing.json")]) == 1


def test_invalid_layout_fails(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"network": {"nodes": []}}')
    assert main(["lengths", str(path)]) == 1


def test_degenerate_arc_fails(tmp_path):
    layout = {
        "network": {
            "nodes": [{"id": 1}, {"id": 2}],
            "channels": [{"id": 1, "node_a": 1, "node_b": 2,
                          "shape": {"cylindrical": {"radius": 1.0}}}],
            "modules": [],
        },
        "paths": {"1": {"pieces": [{"arc": {"right": True, "start": [0, 0],
                                             "end": [1, 1], "center": [0, 0]}}]}},
    }
    path = tmp_path / "degenerate.json"
    path.write_text(json.dumps(layout))
    assert main(["lengths", str(path)]) == 1
