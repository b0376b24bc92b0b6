"""
Open3D KD-tree adapter for restricted closest-point queries.
"""
import math
import sys
from typing import Any, Tuple

import numpy as np
import open3d as o3d

from regmetrics.core.logging import get_logger
from regmetrics.geometry.pointset import as_positions
from .base import INVALID_INDEX, SpatialIndex

logger = get_logger(__name__)


class KdTreeIndex(SpatialIndex):
    """
    Reference index backed by Open3D's KDTreeFlann.

    The restricted query is a hybrid search with max_nn=1, which returns the
    nearest neighbour inside the radius. Open3D reports squared distances.
    """

    def __init__(self, reference: Any):
        """
        Build the KD-tree.

        Args:
            reference: Reference points (numpy array, Open3D PointCloud or point sequence)
        """
        positions = as_positions(reference)
        self._size = len(positions)

        self._tree = None
        if self._size > 0:
            pcd = o3d.geometry.PointCloud()
            pcd.points = o3d.utility.Vector3dVector(positions)
            self._tree = o3d.geometry.KDTreeFlann(pcd)
        logger.debug(f"Built KD-tree over {self._size} reference points")

    def __len__(self) -> int:
        return self._size

    def restricted_closest_point(self, query: np.ndarray, max_sq_distance: float) -> Tuple[int, float]:
        if self._tree is None:
            return INVALID_INDEX, max_sq_distance

        query = np.asarray(query, dtype=np.float64)[:3]
        if math.isinf(max_sq_distance) or max_sq_distance <= 0.0:
            k, idx, dist2 = self._tree.search_knn_vector_3d(query, 1)
        else:
            # Open3D radius search is strict; widen by a few ulps so the radius itself is included
            radius = math.sqrt(max_sq_distance) * (1.0 + 4 * sys.float_info.epsilon)
            k, idx, dist2 = self._tree.search_hybrid_vector_3d(query, radius, 1)

        # Matches are inclusive of max_sq_distance, as in BruteForceIndex
        if k == 0 or dist2[0] > max_sq_distance:
            return INVALID_INDEX, max_sq_distance
        return int(idx[0]), float(dist2[0])
