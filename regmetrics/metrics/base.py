import math
import sys
from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from regmetrics.geometry.pointset import as_positions, require_points
from regmetrics.geometry.transformations import transform_positions, validate_transform
from regmetrics.index.base import SpatialIndex


class RegistrationMetric(ABC):
    """Scores how well a transformed target overlaps an indexed reference set.

    The only state is the support size ``epsilon``; every call is independent.
    """

    def __init__(self, epsilon: float = sys.float_info.max):
        epsilon = float(epsilon)
        if math.isnan(epsilon) or epsilon <= 0:
            raise ValueError(f"epsilon must be a positive number, got {epsilon}")
        self.epsilon = epsilon

    @property
    def sq_epsilon(self) -> float:
        # Overflows to inf for the unbounded default, which every distance satisfies
        return self.epsilon * self.epsilon

    @abstractmethod
    def __call__(
        self,
        ref_index: SpatialIndex,
        target: Any,
        transform: np.ndarray,
        terminate_value: float = 0.0
    ) -> float:
        """
        Score the target against the reference under a transform.

        Args:
            ref_index: Index over the reference points
            target: Target points (must not be empty)
            transform: 4x4 homogeneous transform applied to the target
            terminate_value: Score the caller needs to beat; only used for pruning

        Returns:
            Score in [0, 1]
        """
        pass

    def _moved_positions(self, target: Any, transform: np.ndarray) -> np.ndarray:
        """Validated, transformed (N, 3) target positions. Raises on empty input."""
        positions = as_positions(target)
        require_points(positions)
        return transform_positions(positions, validate_transform(transform))

    def close(self) -> None:
        """Release resources held across calls. Sequential metrics hold none."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(epsilon={self.epsilon})"


def cannot_reach(accumulated: float, scanned: int, number_of_points: int, terminate_bound: float) -> bool:
    """
    True when even a perfect remainder cannot lift the result to terminate_bound.

    Args:
        accumulated: Match count or weight collected so far
        scanned: Number of target points processed so far
        number_of_points: Size of the target
        terminate_bound: terminate_value * number_of_points
    """
    best_possible = accumulated + (number_of_points - scanned)
    return best_possible < terminate_bound
