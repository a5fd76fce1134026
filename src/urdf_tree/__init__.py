"""
URDF Tree: a normalizing URDF parser.

This library converts URDF robot descriptions into immutable, strongly
typed records (links, joints, materials, transmissions) that can be used
directly or passed through JAX tree utilities.
"""

import jax
jax.config.update("jax_enable_x64", True)

# Import core modules
from . import core
from . import parsing
from . import io

from .core import Robot
from .io import ParserOptions, URDFParser, load_urdf, parse_urdf

__version__ = "0.1.0"
__all__ = [
    "core",
    "parsing",
    "io",
    "Robot",
    "ParserOptions",
    "URDFParser",
    "load_urdf",
    "parse_urdf",
]
