"""Immutable PyTree records describing a parsed URDF robot.

Each record mirrors one URDF element. Fields that a document may leave out
are Optional and stay None when the element is absent; collections are
tuples in document order. Names and filenames are static fields, numbers are
PyTree leaves, so a Robot can be passed through ``jax.tree_util`` as-is.
"""

from typing import Optional, Tuple

import jax.numpy as jnp
from jax import Array
from flax import struct

JOINT_TYPES = ("revolute", "continuous", "prismatic", "fixed", "floating", "planar")


@struct.dataclass
class Vector3:
    """Floating-point triple used for positions, axes, box sizes and scales."""
    x: float
    y: float
    z: float

    def to_array(self) -> Array:
        """Return the vector as a JAX array of shape (3,)."""
        return jnp.array([self.x, self.y, self.z])


@struct.dataclass
class Origin:
    """Pose of an element relative to its parent frame.

    Attributes:
        xyz: Translation, set only when the ``xyz`` attribute is present.
        rpy: Roll-pitch-yaw angles in radians, set only when ``rpy`` is present.
    """
    xyz: Optional[Vector3] = None
    rpy: Optional[Vector3] = None


@struct.dataclass
class Mass:
    """Link mass in kilograms."""
    value: float = 0.0


@struct.dataclass
class Inertia:
    """Upper triangle of the rotational inertia tensor.

    The six entries are read independently; no physical consistency check is
    applied.
    """
    ixx: float = 0.0
    ixy: float = 0.0
    ixz: float = 0.0
    iyy: float = 0.0
    iyz: float = 0.0
    izz: float = 0.0

    def to_matrix(self) -> Array:
        """Return the symmetric 3x3 tensor."""
        return jnp.array([
            [self.ixx, self.ixy, self.ixz],
            [self.ixy, self.iyy, self.iyz],
            [self.ixz, self.iyz, self.izz],
        ])


@struct.dataclass
class Inertial:
    """Mass properties of a link; each part is kept only if written."""
    origin: Optional[Origin] = None
    mass: Optional[Mass] = None
    inertia: Optional[Inertia] = None


@struct.dataclass
class Box:
    """Box shape given by its side lengths."""
    size: Vector3


@struct.dataclass
class Cylinder:
    """Cylinder shape along the local z axis."""
    radius: float = 0.0
    length: float = 0.0


@struct.dataclass
class Sphere:
    """Sphere shape."""
    radius: float = 0.0


@struct.dataclass
class Mesh:
    """Mesh shape loaded from a file.

    Attributes:
        filename: Mesh path or URI exactly as written; never resolved.
        scale: Per-axis scale, None when the ``scale`` attribute is absent.
    """
    filename: Optional[str] = struct.field(pytree_node=False, default=None)
    scale: Optional[Vector3] = None


@struct.dataclass
class Geometry:
    """Shape of a visual or collision element.

    URDF allows exactly one shape, but every shape present in the source is
    kept so that malformed documents are reflected faithfully.
    """
    box: Optional[Box] = None
    cylinder: Optional[Cylinder] = None
    sphere: Optional[Sphere] = None
    mesh: Optional[Mesh] = None

    def shapes(self) -> Tuple[str, ...]:
        """Names of the populated shapes, in declaration order."""
        return tuple(
            name for name in ("box", "cylinder", "sphere", "mesh")
            if getattr(self, name) is not None
        )


@struct.dataclass
class Color:
    """RGBA color with components in [0, 1]."""
    rgba: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    def to_array(self) -> Array:
        """Return the color as a JAX array of shape (4,)."""
        return jnp.array(self.rgba)


@struct.dataclass
class Texture:
    """Texture image reference, filename kept as written."""
    filename: Optional[str] = struct.field(pytree_node=False, default=None)


@struct.dataclass
class Material:
    """A root-level material definition or an inline visual material.

    Inline materials only carry what is written on the visual itself; a
    reference by name is not resolved against the root-level definitions.
    """
    name: Optional[str] = struct.field(pytree_node=False, default=None)
    color: Optional[Color] = None
    texture: Optional[Texture] = None


@struct.dataclass
class Visual:
    """Visual element of a link.

    Attributes:
        name: Optional element name.
        origin: Pose relative to the link frame.
        geometry: Shape to draw.
        material: Material as written inline on this visual.
    """
    name: Optional[str] = struct.field(pytree_node=False, default=None)
    origin: Optional[Origin] = None
    geometry: Optional[Geometry] = None
    material: Optional[Material] = None


@struct.dataclass
class Collision:
    """Collision element of a link; same layout as Visual without material."""
    name: Optional[str] = struct.field(pytree_node=False, default=None)
    origin: Optional[Origin] = None
    geometry: Optional[Geometry] = None


@struct.dataclass
class Link:
    """Rigid body of the robot.

    Attributes:
        name: Non-empty link name.
        inertial: Mass properties, None when the link has no ``<inertial>``.
        visuals: Visual elements, empty when there are none.
        collisions: Collision elements, empty when there are none.
    """
    name: str = struct.field(pytree_node=False)
    inertial: Optional[Inertial] = None
    visuals: Tuple[Visual, ...] = ()
    collisions: Tuple[Collision, ...] = ()


@struct.dataclass
class ParentLink:
    """Name of a joint's parent link."""
    link: str = struct.field(pytree_node=False)


@struct.dataclass
class ChildLink:
    """Name of a joint's child link."""
    link: str = struct.field(pytree_node=False)


@struct.dataclass
class Axis:
    """Joint axis in the joint frame; (1, 0, 0) when ``xyz`` is omitted."""
    xyz: Vector3


@struct.dataclass
class JointLimit:
    """Position bounds, maximum effort and maximum velocity of a joint."""
    lower: float = 0.0
    upper: float = 0.0
    effort: float = 0.0
    velocity: float = 0.0


@struct.dataclass
class JointDynamics:
    damping: float = 0.0
    friction: float = 0.0


@struct.dataclass
class Calibration:
    """Reference positions of the joint's rising and falling edges."""
    rising: float = 0.0
    falling: float = 0.0


@struct.dataclass
class Mimic:
    """Makes a joint follow ``multiplier * position(joint) + offset``."""
    joint: str = struct.field(pytree_node=False)
    multiplier: float = 1.0
    offset: float = 0.0


@struct.dataclass
class Joint:
    """A joint connecting ``parent.link`` to ``child.link``.

    ``type`` is one of :data:`JOINT_TYPES` in a well-formed document; it is
    stored as written.
    """
    name: str = struct.field(pytree_node=False)
    type: str = struct.field(pytree_node=False)
    parent: ParentLink
    child: ChildLink
    origin: Optional[Origin] = None
    axis: Optional[Axis] = None
    limit: Optional[JointLimit] = None
    dynamics: Optional[JointDynamics] = None
    calibration: Optional[Calibration] = None
    mimic: Optional[Mimic] = None


@struct.dataclass
class TransmissionJoint:
    """Joint driven by a transmission, "" when unnamed."""
    name: str = struct.field(pytree_node=False, default="")


@struct.dataclass
class Actuator:
    """Actuator of a transmission.

    Attributes:
        name: Actuator name, "" when unnamed.
        mechanical_reduction: Gear ratio read from the
            ``<mechanicalReduction>`` element text, None when absent.
    """
    name: str = struct.field(pytree_node=False, default="")
    mechanical_reduction: Optional[float] = None


@struct.dataclass
class Transmission:
    """Link between a joint and the actuator driving it.

    ``type`` comes from the text of the ``<type>`` element.
    """
    name: Optional[str] = struct.field(pytree_node=False, default=None)
    type: Optional[str] = struct.field(pytree_node=False, default=None)
    joint: Optional[TransmissionJoint] = None
    actuator: Optional[Actuator] = None


@struct.dataclass
class Robot:
    """Root of a parsed URDF document.

    Attributes:
        name: Value of the robot's ``name`` attribute, "" when absent.
        links: Every named link, in document order.
        joints: Every joint with a name, type, parent and child.
        transmissions: Every transmission, in document order.
        materials: Root-level material definitions, in document order.
    """
    name: str = struct.field(pytree_node=False, default="")
    links: Tuple[Link, ...] = ()
    joints: Tuple[Joint, ...] = ()
    transmissions: Tuple[Transmission, ...] = ()
    materials: Tuple[Material, ...] = ()

    def link(self, name: str) -> Optional[Link]:
        """Return the link called ``name``, if any."""
        return next((link for link in self.links if link.name == name), None)

    def joint(self, name: str) -> Optional[Joint]:
        """Return the joint called ``name``, if any."""
        return next((joint for joint in self.joints if joint.name == name), None)

    def material(self, name: str) -> Optional[Material]:
        """Return the root-level material called ``name``, if any."""
        return next((m for m in self.materials if m.name == name), None)
