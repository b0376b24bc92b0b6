"""
Spatial indices answering restricted closest-point queries over a reference set.
"""

from .base import INVALID_INDEX, SpatialIndex
from .brute_force import BruteForceIndex
from .kdtree import KdTreeIndex

__all__ = [
    "INVALID_INDEX",
    "SpatialIndex",
    "BruteForceIndex",
    "KdTreeIndex",
]
