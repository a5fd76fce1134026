"""I/O utilities for reading URDF documents and exporting parsed robots.

This module provides the XML layer, the URDF parser and a JSON-ready export
of the resulting records.
"""

from .export import to_dict, to_json
from .urdf_parser import ParserOptions, URDFParser, load_urdf, parse_urdf
from .xml_tree import XMLTreeOptions, parse_xml

__all__ = [
    "ParserOptions",
    "URDFParser",
    "XMLTreeOptions",
    "load_urdf",
    "parse_urdf",
    "parse_xml",
    "to_dict",
    "to_json",
]
