from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np

# Index value reported by a restricted query that found nothing
INVALID_INDEX = -1


class SpatialIndex(ABC):
    """Nearest-neighbour structure over the reference point set.

    Implementations must be safe to query concurrently from several threads
    as long as nobody modifies the index.
    """

    @abstractmethod
    def restricted_closest_point(self, query: np.ndarray, max_sq_distance: float) -> Tuple[int, float]:
        """
        Find the closest reference point within a squared radius.

        Args:
            query: 3D query position
            max_sq_distance: Squared search radius

        Returns:
            (index, squared distance) of the true nearest reference point, or
            (INVALID_INDEX, max_sq_distance) when no point lies within the radius
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
