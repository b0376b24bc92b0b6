from typing import Any, Tuple

import numpy as np

from regmetrics.geometry.pointset import as_positions
from .base import INVALID_INDEX, SpatialIndex


class BruteForceIndex(SpatialIndex):
    """Exhaustive search over all reference points. Exact, O(N) per query."""

    def __init__(self, reference: Any):
        self._positions = as_positions(reference)

    def __len__(self) -> int:
        return len(self._positions)

    def restricted_closest_point(self, query: np.ndarray, max_sq_distance: float) -> Tuple[int, float]:
        if len(self._positions) == 0:
            return INVALID_INDEX, max_sq_distance

        diff = self._positions - np.asarray(query, dtype=np.float64)[:3]
        sq_distances = np.einsum("ij,ij->i", diff, diff)
        best = int(np.argmin(sq_distances))
        best_sq = float(sq_distances[best])
        if best_sq > max_sq_distance:
            return INVALID_INDEX, max_sq_distance
        return best, best_sq
