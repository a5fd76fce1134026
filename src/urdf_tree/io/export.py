"""Plain-data export of parsed robots.

Records become nested dicts and lists that ``json`` can serialize directly.
Unset optional fields are left out rather than written as null. Infinite
numbers (e.g. ``value="1e400"``) have no JSON form and are written as null.
"""

import dataclasses
import json
import math
from typing import Any

from urdf_tree.core.robot_model import Robot

# Python field name -> URDF spelling
_KEY_NAMES = {"mechanical_reduction": "mechanicalReduction"}


def to_dict(value: Any) -> Any:
    """Convert a record (or a tuple of records) into plain Python data."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        result = {}
        for f in dataclasses.fields(value):
            item = getattr(value, f.name)
            if item is None:
                continue
            result[_KEY_NAMES.get(f.name, f.name)] = to_dict(item)
        return result
    if isinstance(value, (list, tuple)):
        return [to_dict(item) for item in value]
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def to_json(robot: Robot, indent: int = 2) -> str:
    """Serialize a Robot to a standard JSON document."""
    return json.dumps(to_dict(robot), indent=indent, allow_nan=False)
