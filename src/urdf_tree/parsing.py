"""Primitive coercion helpers for raw URDF attribute values.

Every function here is pure and total: malformed input degrades to a default
instead of raising, so the normalizer can treat each attribute independently.
"""

import math
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from urdf_tree.core.robot_model import Vector3

RGBA = Tuple[float, float, float, float]

ATTRIBUTE_PREFIX = "@_"
TEXT_KEY = "#text"

_ZERO = Vector3(x=0.0, y=0.0, z=0.0)
_BLACK: RGBA = (0.0, 0.0, 0.0, 1.0)


def parse_number(raw: Any, default: float = 0.0) -> float:
    """Convert a decimal string to a float.

    Args:
        raw: Attribute string, an already-numeric value, or None.
        default: Value returned when ``raw`` is missing or not a number.

    Returns:
        The parsed float, or ``default``.
    """
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    if math.isnan(value):
        return default
    return value


def _split(raw: Optional[str]) -> List[str]:
    return str(raw).split()


def parse_vector3(raw: Optional[str], default: Vector3 = _ZERO) -> Vector3:
    """Convert a whitespace-separated ``"x y z"`` string to a Vector3.

    A missing value or a token count other than three returns ``default``
    unchanged. With three tokens, each component falls back to the matching
    component of ``default`` on its own.
    """
    if raw is None:
        return default

    parts = _split(raw)
    if len(parts) != 3:
        return default

    return Vector3(
        x=parse_number(parts[0], default.x),
        y=parse_number(parts[1], default.y),
        z=parse_number(parts[2], default.z),
    )


def parse_rgba(raw: Optional[str], default: RGBA = _BLACK) -> RGBA:
    """Convert a ``"r g b a"`` string to a 4-tuple of floats.

    Same contract as :func:`parse_vector3`, with four tokens.
    """
    if raw is None:
        return default

    parts = _split(raw)
    if len(parts) != 4:
        return default

    return tuple(parse_number(part, fallback) for part, fallback in zip(parts, default))


def ensure_array(value: Any) -> list:
    """Normalize the XML layer's one-or-many shape into a sequence.

    None becomes an empty list, a list or tuple is returned as-is, and any
    other value is wrapped in a one-element list.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return value
    return [value]


def get_attribute(node: Any, attribute_name: str, prefix: str = ATTRIBUTE_PREFIX) -> Optional[str]:
    """Read an attribute from a raw node.

    Args:
        node: Raw node produced by the XML layer. Anything that is not a
            mapping has no attributes.
        attribute_name: Attribute name without the prefix.
        prefix: Key prefix the XML layer uses for attributes.

    Returns:
        The attribute value, or None when the node or attribute is missing or
        the value is empty.
    """
    if not isinstance(node, Mapping):
        return None
    value = node.get(prefix + attribute_name)
    if value is None or value == "":
        return None
    return str(value)


def get_child(node: Any, name: str) -> Any:
    """Return the raw child entry ``name`` of ``node``, or None."""
    if not isinstance(node, Mapping):
        return None
    return node.get(name)


def get_text(node: Any, text_key: str = TEXT_KEY) -> Optional[str]:
    """Return the text content of a text-bearing element.

    The XML layer hands text elements over as a mapping holding the text
    under ``text_key`` (when the element also has attributes), as a bare
    string, or as an already-converted number.
    """
    if node is None:
        return None
    if isinstance(node, Mapping):
        node = node.get(text_key)
        if node is None:
            return None
    text = str(node).strip()
    return text or None
