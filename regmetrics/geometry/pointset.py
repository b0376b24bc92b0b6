"""
Conversion of the accepted target point containers to plain position arrays.

A target may be an (N, 3+) numpy array, an Open3D point cloud, or any sized
sequence whose elements expose a position through a ``pos()`` method, a
``pos``/``position`` attribute, or are plain 3-vectors themselves.
"""
from typing import Any

import numpy as np
import open3d as o3d


class EmptyPointSetError(ValueError):
    """Raised when a metric is asked to score an empty target."""


def _element_position(element: Any) -> Any:
    pos = getattr(element, "pos", None)
    if pos is not None:
        return pos() if callable(pos) else pos
    position = getattr(element, "position", None)
    if position is not None:
        return position() if callable(position) else position
    return element


def as_positions(target: Any) -> np.ndarray:
    """
    Convert a target container to a contiguous (N, 3) float64 array.

    Args:
        target: numpy array, Open3D PointCloud (legacy or tensor) or sequence of points

    Returns:
        (N, 3) float64 array of XYZ positions
    """
    if isinstance(target, o3d.t.geometry.PointCloud):
        if "positions" not in target.point:
            return np.empty((0, 3), dtype=np.float64)
        return np.ascontiguousarray(target.point.positions.numpy()[:, :3], dtype=np.float64)

    if isinstance(target, o3d.geometry.PointCloud):
        return np.ascontiguousarray(np.asarray(target.points), dtype=np.float64).reshape(-1, 3)

    if isinstance(target, np.ndarray):
        if target.size == 0:
            return np.empty((0, 3), dtype=np.float64)
        if target.ndim != 2 or target.shape[1] < 3:
            raise ValueError(f"Expected (N, 3+) point array, got shape {target.shape}")
        return np.ascontiguousarray(target[:, :3], dtype=np.float64)

    if len(target) == 0:
        return np.empty((0, 3), dtype=np.float64)

    positions = np.asarray([_element_position(p) for p in target], dtype=np.float64)
    if positions.ndim != 2 or positions.shape[1] < 3:
        raise ValueError(f"Point positions must be 3D, got shape {positions.shape}")
    return np.ascontiguousarray(positions[:, :3])


def require_points(positions: np.ndarray) -> int:
    """Return the number of points, raising EmptyPointSetError when there are none."""
    number_of_points = len(positions)
    if number_of_points == 0:
        raise EmptyPointSetError("Cannot score an empty target point set")
    return number_of_points
