"""Tests for JSON export of parsed robots."""

import json
from pathlib import Path

from urdf_tree.io import load_urdf, parse_urdf, to_dict, to_json

SAMPLE_PATH = Path(__file__).parent / "fixtures" / "sample_robot.urdf"


def test_to_dict_layout():
    data = to_dict(load_urdf(str(SAMPLE_PATH)))

    assert data["name"] == "simple_robot"
    assert len(data["links"]) == 7
    assert len(data["joints"]) == 6

    joint = next(j for j in data["joints"] if j["name"] == "base_to_right_wheel")
    assert joint["parent"] == {"link": "base_link"}
    assert joint["axis"] == {"xyz": {"x": 0.0, "y": 1.0, "z": 0.0}}

    blue = next(m for m in data["materials"] if m["name"] == "blue")
    assert blue == {"name": "blue", "color": {"rgba": [0.0, 0.0, 1.0, 1.0]}}

    wheel = data["transmissions"][0]
    assert wheel["actuator"] == {"name": "wheel_motor", "mechanicalReduction": 10.0}


def test_to_dict_omits_unset_fields():
    robot = parse_urdf('<robot name="r"><link name="a"><visual/></link></robot>')
    assert to_dict(robot) == {
        "name": "r",
        "links": [{"name": "a", "visuals": [{}], "collisions": []}],
        "joints": [],
        "transmissions": [],
        "materials": [],
    }


def test_to_json_round_trips_through_json():
    robot = load_urdf(str(SAMPLE_PATH))
    assert json.loads(to_json(robot)) == to_dict(robot)


def test_infinite_values_export_as_null():
    robot = parse_urdf("""
        <robot name="r">
          <link name="a">
            <inertial><mass value="1e400"/></inertial>
            <visual><geometry><sphere radius="-inf"/></geometry></visual>
          </link>
        </robot>
    """)
    data = to_dict(robot)
    assert data["links"][0]["inertial"]["mass"] == {"value": None}
    assert data["links"][0]["visuals"][0]["geometry"]["sphere"] == {"radius": None}

    text = to_json(robot)
    assert "Infinity" not in text
    assert json.loads(text)["links"][0]["inertial"]["mass"]["value"] is None
