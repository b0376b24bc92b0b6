"""
Weighted Largest Common Pointset metric.

Each match contributes ``kernel(d / epsilon)`` instead of 1, so close
matches count more than matches near the threshold.
"""
import math
from typing import Any

import numpy as np

from regmetrics.core.logging import get_logger
from regmetrics.index.base import INVALID_INDEX, SpatialIndex
from .base import RegistrationMetric, cannot_reach

logger = get_logger(__name__)


def kernel(x: float) -> float:
    """(x^4 - 1)^2: 1 at x = 0, 0 at x = 1."""
    return (x ** 4 - 1.0) ** 2


def compute_weight(sq_distance: float, threshold: float) -> float:
    """Kernel weight of a match at squared distance sq_distance."""
    return kernel(math.sqrt(sq_distance) / threshold)


class WeightedLCPMetric(RegistrationMetric):
    """Sequential LCP scan accumulating proximity weights."""

    def __call__(
        self,
        ref_index: SpatialIndex,
        target: Any,
        transform: np.ndarray,
        terminate_value: float = 0.0
    ) -> float:
        moved = self._moved_positions(target, transform)
        number_of_points = len(moved)
        terminate_bound = float(terminate_value) * number_of_points
        sq_eps = self.sq_epsilon

        good_points = 0.0
        for i, point in enumerate(moved):
            index, sq_distance = ref_index.restricted_closest_point(point, sq_eps)
            if index != INVALID_INDEX:
                assert sq_distance <= sq_eps, "index returned a match outside the query radius"
                good_points += compute_weight(sq_distance, self.epsilon)

            if cannot_reach(good_points, i + 1, number_of_points, terminate_bound):
                logger.debug(
                    f"Weighted LCP scan stopped after {i + 1}/{number_of_points} points "
                    f"(weight {good_points:.4f}, bound {terminate_value:.4f})"
                )
                break

        return good_points / number_of_points
