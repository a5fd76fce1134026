"""Tests for the command-line entry point."""

import json
from pathlib import Path

from urdf_tree.__main__ import main

SAMPLE_PATH = Path(__file__).parent / "fixtures" / "sample_robot.urdf"


def test_summary_and_json(tmp_path, capsys):
    out = tmp_path / "robot.json"
    assert main([str(SAMPLE_PATH), "--json", str(out)]) == 0

    printed = capsys.readouterr().out
    assert "Robot name: simple_robot" in printed
    assert "Links (7):" in printed
    assert "Visual 1 has mesh: meshes/arm.stl" in printed
    assert "Mimics joint: base_to_right_wheel" in printed
    assert "Actuator: wheel_motor, Reduction: 10.0" in printed

    data = json.loads(out.read_text())
    assert data["name"] == "simple_robot"


def test_invalid_file(tmp_path):
    bad = tmp_path / "bad.urdf"
    bad.write_text("<not_a_robot/>")
    assert main([str(bad)]) == 1
    assert main([str(tmp_path / "missing.urdf")]) == 1
