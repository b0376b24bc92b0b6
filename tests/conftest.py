from typing import Tuple

import numpy as np
import open3d as o3d
import pytest

from regmetrics.index.base import SpatialIndex
from regmetrics.index.brute_force import BruteForceIndex


class CountingIndex(SpatialIndex):
    """Wraps an index and records how many queries a metric issued."""

    def __init__(self, inner: SpatialIndex):
        self.inner = inner
        self.queries = 0

    def __len__(self) -> int:
        return len(self.inner)

    def restricted_closest_point(self, query: np.ndarray, max_sq_distance: float) -> Tuple[int, float]:
        self.queries += 1
        return self.inner.restricted_closest_point(query, max_sq_distance)


@pytest.fixture
def tetra_points():
    return np.array([
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0]
    ])


@pytest.fixture
def tetra_index(tetra_points):
    return BruteForceIndex(tetra_points)


@pytest.fixture
def random_cloud():
    rng = np.random.default_rng(42)
    return rng.uniform(-1.0, 1.0, size=(500, 3))


@pytest.fixture
def counting_index():
    def _wrap(reference):
        return CountingIndex(BruteForceIndex(reference))
    return _wrap


@pytest.fixture
def make_transform():
    """Builds a rigid 4x4 transform from a translation and XYZ angles in degrees."""
    def _make(x, y, z, roll=0.0, pitch=0.0, yaw=0.0):
        T = np.eye(4)
        T[:3, :3] = o3d.geometry.get_rotation_matrix_from_xyz(np.radians([roll, pitch, yaw]))
        T[:3, 3] = [x, y, z]
        return T
    return _make
