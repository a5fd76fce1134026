"""Command-line entry point: print a summary of a URDF file.

    python -m urdf_tree robot.urdf --json robot.json
"""

import argparse
import logging
import sys

from urdf_tree.core import Robot
from urdf_tree.io import load_urdf, to_json

_logger = logging.getLogger("urdf_tree")


def parse_args(argv=None):
    """Parse command-line arguments.

    Args:
        argv: Argument list; None reads ``sys.argv``.

    Returns:
        argparse.Namespace with ``urdf_path``, ``json`` and ``verbose``.
    """
    parser = argparse.ArgumentParser(
        prog="urdf_tree",
        description="Parse a URDF file and summarize its links, joints, materials and transmissions",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('urdf_path', type=str, help='URDF file to parse')
    parser.add_argument(
        '--json',
        type=str,
        default=None,
        help='Write the parsed robot to this JSON file'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def print_summary(robot: Robot):
    """Print links, joints, materials and transmissions of ``robot``."""
    print(f"Robot name: {robot.name}")

    print(f"\nLinks ({len(robot.links)}):")
    for link in robot.links:
        print(f"- Link: {link.name}")
        if link.visuals:
            print(f"  Visual elements: {len(link.visuals)}")
            for i, visual in enumerate(link.visuals):
                if visual.geometry is not None and visual.geometry.mesh is not None:
                    print(f"  Visual {i + 1} has mesh: {visual.geometry.mesh.filename}")

    print(f"\nJoints ({len(robot.joints)}):")
    for joint in robot.joints:
        print(f"- Joint: {joint.name} (Type: {joint.type})")
        print(f"  Parent link: {joint.parent.link}, Child link: {joint.child.link}")
        if joint.limit is not None:
            limit = joint.limit
            print(f"  Limits: lower={limit.lower}, upper={limit.upper}, "
                  f"effort={limit.effort}, velocity={limit.velocity}")
        if joint.calibration is not None:
            print(f"  Calibration: rising={joint.calibration.rising}, "
                  f"falling={joint.calibration.falling}")
        if joint.mimic is not None:
            mimic = joint.mimic
            print(f"  Mimics joint: {mimic.joint} "
                  f"(multiplier={mimic.multiplier}, offset={mimic.offset})")

    print(f"\nMaterials ({len(robot.materials)}):")
    for material in robot.materials:
        print(f"- Material: {material.name}")
        if material.color is not None:
            print(f"  Color: rgba({', '.join(str(c) for c in material.color.rgba)})")
        if material.texture is not None:
            print(f"  Texture: {material.texture.filename}")

    print(f"\nTransmissions ({len(robot.transmissions)}):")
    for transmission in robot.transmissions:
        print(f"- Transmission: {transmission.name}")
        print(f"  Type: {transmission.type}")
        if transmission.joint is not None:
            print(f"  Joint: {transmission.joint.name}")
        if transmission.actuator is not None:
            actuator = transmission.actuator
            print(f"  Actuator: {actuator.name}, Reduction: {actuator.mechanical_reduction}")


def main(argv=None) -> int:
    """Run the command line.

    Returns:
        Exit status: 0 on success, 1 when the file cannot be loaded.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        robot = load_urdf(args.urdf_path)
    except (FileNotFoundError, ValueError) as e:
        _logger.error(e)
        return 1

    print_summary(robot)

    if args.json:
        with open(args.json, "w", encoding="utf-8") as f:
            f.write(to_json(robot))
        print(f"\nDetailed results have been saved to {args.json}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
