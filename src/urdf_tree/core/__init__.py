"""Core data structures for parsed URDF robots.

This module provides the immutable records that make up a normalized
robot description.
"""

from .robot_model import (
    JOINT_TYPES,
    Actuator,
    Axis,
    Box,
    Calibration,
    ChildLink,
    Collision,
    Color,
    Cylinder,
    Geometry,
    Inertia,
    Inertial,
    Joint,
    JointDynamics,
    JointLimit,
    Link,
    Mass,
    Material,
    Mesh,
    Mimic,
    Origin,
    ParentLink,
    Robot,
    Sphere,
    Texture,
    Transmission,
    TransmissionJoint,
    Vector3,
    Visual,
)

__all__ = [
    "JOINT_TYPES",
    "Actuator",
    "Axis",
    "Box",
    "Calibration",
    "ChildLink",
    "Collision",
    "Color",
    "Cylinder",
    "Geometry",
    "Inertia",
    "Inertial",
    "Joint",
    "JointDynamics",
    "JointLimit",
    "Link",
    "Mass",
    "Material",
    "Mesh",
    "Mimic",
    "Origin",
    "ParentLink",
    "Robot",
    "Sphere",
    "Texture",
    "Transmission",
    "TransmissionJoint",
    "Vector3",
    "Visual",
]
