"""URDF parser producing normalized Robot records.

The XML text is first turned into an attributed node tree by
:mod:`urdf_tree.io.xml_tree`; this module then walks that tree once and
builds the typed records of :mod:`urdf_tree.core`. Only a missing ``<robot>``
root (or unreadable XML) is fatal. Links and joints lacking required data are
dropped with a warning and the rest of the document is still converted.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from lxml import etree

from urdf_tree.core.robot_model import (
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
from urdf_tree.io.xml_tree import XMLTreeOptions, parse_xml
from urdf_tree.parsing import (
    ensure_array,
    get_attribute,
    get_child,
    get_text,
    parse_number,
    parse_rgba,
    parse_vector3,
)

_logger = logging.getLogger(__name__)

_UNIT_X = Vector3(x=1.0, y=0.0, z=0.0)
_UNIT_SCALE = Vector3(x=1.0, y=1.0, z=1.0)


@dataclass(frozen=True)
class ParserOptions:
    """Options for :class:`URDFParser`.

    Attributes:
        base_path: Directory that relative mesh and texture filenames are
            relative to. Kept for consumers; the parser itself never reads it.
        xml: Options forwarded to the XML layer. The attribute prefix and text
            key chosen here are also the ones the parser reads nodes with.
    """
    base_path: Optional[str] = None
    xml: XMLTreeOptions = field(default_factory=XMLTreeOptions)


class URDFParser:
    """Converts URDF documents into :class:`~urdf_tree.core.Robot` records."""

    def __init__(self, options: Optional[ParserOptions] = None):
        self.options = options or ParserOptions()
        self._prefix = self.options.xml.attribute_prefix
        self._text_key = self.options.xml.text_key

    def parse(self, text) -> Robot:
        """Parse URDF text.

        Args:
            text: Complete URDF XML document as str or bytes.

        Returns:
            Robot: The normalized robot description.

        Raises:
            ValueError: If the text is not well-formed XML or has no
                ``<robot>`` root element.
        """
        try:
            tree = parse_xml(text, self.options.xml)
        except etree.XMLSyntaxError as e:
            raise ValueError(f"Invalid URDF: {e}") from e
        return self.parse_tree(tree)

    def load(self, urdf_path: str) -> Robot:
        """Read and parse a URDF file.

        When ``options.base_path`` is unset it is set to the file's directory
        and kept on this parser.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a valid URDF document.
        """
        if not os.path.isfile(urdf_path):
            raise FileNotFoundError(f"URDF file not found: {urdf_path}")

        if self.options.base_path is None:
            self.options = replace(
                self.options, base_path=os.path.dirname(os.path.abspath(urdf_path))
            )

        _logger.debug("Loading URDF from %s", urdf_path)
        with open(urdf_path, "rb") as f:
            return self.parse(f.read())

    def parse_tree(self, tree: Dict[str, Any]) -> Robot:
        """Normalize a node tree already produced by the XML layer."""
        if "robot" not in tree:
            raise ValueError("Invalid URDF: Missing robot element")

        robot = tree["robot"]
        result = Robot(
            name=self._attr(robot, "name") or "",
            links=tuple(self._links(get_child(robot, "link"))),
            joints=tuple(self._joints(get_child(robot, "joint"))),
            transmissions=tuple(self._transmissions(get_child(robot, "transmission"))),
            materials=tuple(self._material(m) for m in ensure_array(get_child(robot, "material"))),
        )
        _logger.debug(
            "Parsed robot '%s': %d links, %d joints, %d materials, %d transmissions",
            result.name, len(result.links), len(result.joints),
            len(result.materials), len(result.transmissions),
        )
        return result

    # Node access

    def _attr(self, node: Any, name: str) -> Optional[str]:
        return get_attribute(node, name, self._prefix)

    def _has(self, node: Any, name: str) -> bool:
        return get_child(node, name) is not None

    # Links

    def _links(self, link_data: Any) -> List[Link]:
        links = []
        for link in ensure_array(link_data):
            name = self._attr(link, "name")
            if not name:
                _logger.warning("Link without name found, skipping")
                continue

            links.append(Link(
                name=name,
                inertial=self._inertial(link["inertial"]) if self._has(link, "inertial") else None,
                visuals=tuple(self._visual(v) for v in ensure_array(get_child(link, "visual"))),
                collisions=tuple(self._collision(c) for c in ensure_array(get_child(link, "collision"))),
            ))
        return links

    def _origin(self, node: Any) -> Optional[Origin]:
        """Convert the ``<origin>`` child of ``node``, if there is one."""
        if not self._has(node, "origin"):
            return None
        origin = node["origin"]
        xyz = self._attr(origin, "xyz")
        rpy = self._attr(origin, "rpy")
        return Origin(
            xyz=parse_vector3(xyz) if xyz else None,
            rpy=parse_vector3(rpy) if rpy else None,
        )

    def _inertial(self, inertial: Any) -> Inertial:
        mass = None
        if self._has(inertial, "mass"):
            mass = Mass(value=parse_number(self._attr(inertial["mass"], "value"), 0.0))

        inertia = None
        if self._has(inertial, "inertia"):
            node = inertial["inertia"]
            inertia = Inertia(**{
                key: parse_number(self._attr(node, key), 0.0)
                for key in ("ixx", "ixy", "ixz", "iyy", "iyz", "izz")
            })

        return Inertial(origin=self._origin(inertial), mass=mass, inertia=inertia)

    def _visual(self, visual: Any) -> Visual:
        return Visual(
            name=self._attr(visual, "name"),
            origin=self._origin(visual),
            geometry=self._geometry(visual["geometry"]) if self._has(visual, "geometry") else None,
            material=self._material(visual["material"]) if self._has(visual, "material") else None,
        )

    def _collision(self, collision: Any) -> Collision:
        return Collision(
            name=self._attr(collision, "name"),
            origin=self._origin(collision),
            geometry=self._geometry(collision["geometry"]) if self._has(collision, "geometry") else None,
        )

    def _geometry(self, geometry: Any) -> Geometry:
        box = cylinder = sphere = mesh = None

        if self._has(geometry, "box"):
            box = Box(size=parse_vector3(self._attr(geometry["box"], "size")))

        if self._has(geometry, "cylinder"):
            node = geometry["cylinder"]
            cylinder = Cylinder(
                radius=parse_number(self._attr(node, "radius")),
                length=parse_number(self._attr(node, "length")),
            )

        if self._has(geometry, "sphere"):
            sphere = Sphere(radius=parse_number(self._attr(geometry["sphere"], "radius")))

        if self._has(geometry, "mesh"):
            node = geometry["mesh"]
            scale = self._attr(node, "scale")
            mesh = Mesh(
                filename=self._attr(node, "filename"),
                scale=parse_vector3(scale, _UNIT_SCALE) if scale else None,
            )

        return Geometry(box=box, cylinder=cylinder, sphere=sphere, mesh=mesh)

    def _material(self, material: Any) -> Material:
        color = texture = None
        if self._has(material, "color"):
            color = Color(rgba=parse_rgba(self._attr(material["color"], "rgba")))
        if self._has(material, "texture"):
            texture = Texture(filename=self._attr(material["texture"], "filename"))
        return Material(name=self._attr(material, "name"), color=color, texture=texture)

    # Joints

    def _joints(self, joint_data: Any) -> List[Joint]:
        joints = []
        for joint in ensure_array(joint_data):
            name = self._attr(joint, "name")
            joint_type = self._attr(joint, "type")
            if not name or not joint_type:
                _logger.warning("Joint without name or type found, skipping")
                continue

            parent = self._attr(get_child(joint, "parent"), "link")
            child = self._attr(get_child(joint, "child"), "link")
            if not parent or not child:
                _logger.warning("Joint %s missing parent or child link, skipping", name)
                continue

            joints.append(Joint(
                name=name,
                type=joint_type,
                parent=ParentLink(link=parent),
                child=ChildLink(link=child),
                origin=self._origin(joint),
                axis=self._axis(joint),
                limit=self._limit(joint),
                dynamics=self._dynamics(joint),
                calibration=self._calibration(joint),
                mimic=self._mimic(joint),
            ))
        return joints

    def _axis(self, joint: Any) -> Optional[Axis]:
        if not self._has(joint, "axis"):
            return None
        return Axis(xyz=parse_vector3(self._attr(joint["axis"], "xyz"), _UNIT_X))

    def _limit(self, joint: Any) -> Optional[JointLimit]:
        if not self._has(joint, "limit"):
            return None
        node = joint["limit"]
        return JointLimit(
            lower=parse_number(self._attr(node, "lower")),
            upper=parse_number(self._attr(node, "upper")),
            effort=parse_number(self._attr(node, "effort")),
            velocity=parse_number(self._attr(node, "velocity")),
        )

    def _dynamics(self, joint: Any) -> Optional[JointDynamics]:
        if not self._has(joint, "dynamics"):
            return None
        node = joint["dynamics"]
        return JointDynamics(
            damping=parse_number(self._attr(node, "damping")),
            friction=parse_number(self._attr(node, "friction")),
        )

    def _calibration(self, joint: Any) -> Optional[Calibration]:
        if not self._has(joint, "calibration"):
            return None
        node = joint["calibration"]
        return Calibration(
            rising=parse_number(self._attr(node, "rising")),
            falling=parse_number(self._attr(node, "falling")),
        )

    def _mimic(self, joint: Any) -> Optional[Mimic]:
        node = get_child(joint, "mimic")
        target = self._attr(node, "joint")
        if not target:
            return None
        return Mimic(
            joint=target,
            multiplier=parse_number(self._attr(node, "multiplier"), 1.0),
            offset=parse_number(self._attr(node, "offset"), 0.0),
        )

    # Transmissions

    def _transmissions(self, transmission_data: Any) -> List[Transmission]:
        transmissions = []
        for transmission in ensure_array(transmission_data):
            joint = actuator = None

            # Several joints/actuators are legal URDF; the record holds the first.
            joint_nodes = ensure_array(get_child(transmission, "joint"))
            if joint_nodes:
                joint = TransmissionJoint(name=self._attr(joint_nodes[0], "name") or "")

            actuator_nodes = ensure_array(get_child(transmission, "actuator"))
            if actuator_nodes:
                node = actuator_nodes[0]
                reduction = get_text(get_child(node, "mechanicalReduction"), self._text_key)
                actuator = Actuator(
                    name=self._attr(node, "name") or "",
                    mechanical_reduction=parse_number(reduction) if reduction is not None else None,
                )

            transmissions.append(Transmission(
                name=self._attr(transmission, "name"),
                type=get_text(get_child(transmission, "type"), self._text_key),
                joint=joint,
                actuator=actuator,
            ))
        return transmissions


def parse_urdf(text, options: Optional[ParserOptions] = None) -> Robot:
    """Parse URDF text into a Robot.

    Args:
        text: Complete URDF XML document.
        options: Parser options.

    Returns:
        Robot: The normalized robot description.
    """
    return URDFParser(options).parse(text)


def load_urdf(
    urdf_path: str,
    options: Optional[ParserOptions] = None,
    parser: Optional[URDFParser] = None,
) -> Robot:
    """Load a URDF file and convert it to a Robot.

    Args:
        urdf_path: Path to the URDF file to load.
        options: Parser options, used when no ``parser`` is given.
        parser: Parser to load with. Its ``options.base_path`` is filled with
            the file's directory when unset, so callers passing their own
            parser can read it back for resolving mesh and texture paths.

    Returns:
        Robot: The normalized robot description.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a valid URDF document.
    """
    parser = parser or URDFParser(options)
    return parser.load(urdf_path)
