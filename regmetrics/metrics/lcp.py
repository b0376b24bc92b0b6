"""
Largest Common Pointset metric, sequential scan with early termination.
"""
from typing import Any

import numpy as np

from regmetrics.core.logging import get_logger
from regmetrics.index.base import INVALID_INDEX, SpatialIndex
from .base import RegistrationMetric, cannot_reach

logger = get_logger(__name__)


class LCPMetric(RegistrationMetric):
    """
    Fraction of transformed target points with a reference point closer than epsilon.

    Points are scanned in order. The scan stops as soon as the count can no
    longer reach ``terminate_value``; the returned value is then lower than
    the full-scan score and only means "worse than terminate_value".
    """

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

        good_points = 0
        for i, point in enumerate(moved):
            index, _ = ref_index.restricted_closest_point(point, sq_eps)
            if index != INVALID_INDEX:
                good_points += 1

            if cannot_reach(good_points, i + 1, number_of_points, terminate_bound):
                logger.debug(
                    f"LCP scan stopped after {i + 1}/{number_of_points} points "
                    f"({good_points} matches, bound {terminate_value:.4f})"
                )
                break

        return good_points / number_of_points
