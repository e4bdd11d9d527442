"""
PyOBB - Oriented bounding boxes for Python
"""

__version__ = "0.1.0"

import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("PyOBB")

# Import core modules
from pyobb.src.obbmath import Vector3r, Matrix3r, Identity3r, AlignedBox3r
from pyobb.src.Errors import (
    OBBError,
    InvalidInputError,
    SerializationError,
    NumericError,
)
from pyobb.src.ConvexHull import ConvexHull
from pyobb.src.BoundingSphere import BoundingSphere
from pyobb.src.OBB import OBB


# Export common symbols
__all__ = [
    "Vector3r",
    "Matrix3r",
    "Identity3r",
    "AlignedBox3r",
    "OBBError",
    "InvalidInputError",
    "SerializationError",
    "NumericError",
    "ConvexHull",
    "BoundingSphere",
    "OBB",
]


def version():
    """Return PyOBB version."""
    return __version__
