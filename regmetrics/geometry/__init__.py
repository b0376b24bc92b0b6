"""
Geometry helpers: transform application and target point conversion.
"""

from .transformations import transform_positions, validate_transform
from .pointset import EmptyPointSetError, as_positions, require_points

__all__ = [
    "transform_positions",
    "validate_transform",
    "EmptyPointSetError",
    "as_positions",
    "require_points",
]
