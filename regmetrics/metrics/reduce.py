"""
Largest Common Pointset metric computed as a parallel map/reduce.

Whether the parallel implementation is available is decided once, at import,
from the configuration. ``LCPMetricReduce`` names whichever implementation
was selected; when parallel reduction is off it is the sequential scan,
including early termination.
"""
import operator
import sys
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from functools import partial, reduce
from typing import Any, Optional

import numpy as np

from regmetrics.core.config import settings
from regmetrics.core.logging import get_logger
from regmetrics.index.base import INVALID_INDEX, SpatialIndex
from .base import RegistrationMetric
from .lcp import LCPMetric

logger = get_logger(__name__)

PARALLEL_REDUCE_AVAILABLE = settings.parallel_reduce_available


def _count_matches(ref_index: SpatialIndex, sq_eps: float, points: np.ndarray) -> int:
    """Map step: number of points in the chunk with a reference match."""
    return sum(
        1 if ref_index.restricted_closest_point(point, sq_eps)[0] != INVALID_INDEX else 0
        for point in points
    )


class ParallelLCPMetric(RegistrationMetric):
    """
    LCP over the whole target, split into chunks scored on a thread pool.

    ``terminate_value`` is accepted for interface compatibility and ignored:
    every point is always scanned. Partial counts are integers, so the
    result does not depend on how the target was chunked.

    The pool is created on first use and reused by later calls; it holds no
    scoring state. Pass ``executor`` to share a pool owned elsewhere, which
    ``close()`` then leaves running.
    """

    def __init__(
        self,
        epsilon: float = sys.float_info.max,
        max_workers: Optional[int] = None,
        chunk_size: Optional[int] = None,
        executor: Optional[Executor] = None
    ):
        super().__init__(epsilon)
        self.max_workers = settings.LCP_MAX_WORKERS if max_workers is None else max_workers
        self.chunk_size = settings.LCP_CHUNK_SIZE if chunk_size is None else chunk_size
        if self.max_workers < 1 or self.chunk_size < 1:
            raise ValueError(
                f"max_workers and chunk_size must be positive, got {self.max_workers} and {self.chunk_size}"
            )

        self._executor = executor
        self._owns_executor = executor is None
        self._executor_lock = threading.Lock()

    def _get_executor(self) -> Executor:
        with self._executor_lock:
            if self._executor is None:
                logger.debug(f"Starting LCP reduction pool with {self.max_workers} workers")
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix="lcp-reduce"
                )
            return self._executor

    def close(self) -> None:
        """Shut down the pool if this metric created it."""
        with self._executor_lock:
            if self._owns_executor and self._executor is not None:
                self._executor.shutdown(wait=True)
                self._executor = None

    def __call__(
        self,
        ref_index: SpatialIndex,
        target: Any,
        transform: np.ndarray,
        terminate_value: float = 0.0
    ) -> float:
        moved = self._moved_positions(target, transform)
        number_of_points = len(moved)

        chunks = [
            moved[start:start + self.chunk_size]
            for start in range(0, number_of_points, self.chunk_size)
        ]
        count_matches = partial(_count_matches, ref_index, self.sq_epsilon)

        if len(chunks) == 1:
            good_points = count_matches(chunks[0])
        else:
            executor = self._get_executor()
            good_points = reduce(operator.add, executor.map(count_matches, chunks), 0)

        return good_points / number_of_points


class SequentialFallbackLCPMetric(LCPMetric):
    """Stand-in for ParallelLCPMetric when parallel reduction is disabled.

    Takes the same constructor arguments and ignores the parallel ones.
    """

    def __init__(
        self,
        epsilon: float = sys.float_info.max,
        max_workers: Optional[int] = None,
        chunk_size: Optional[int] = None,
        executor: Optional[Executor] = None
    ):
        super().__init__(epsilon)


if PARALLEL_REDUCE_AVAILABLE:
    LCPMetricReduce = ParallelLCPMetric
else:
    logger.warning("Parallel reduction unavailable, LCPMetricReduce falls back to the sequential LCPMetric")
    LCPMetricReduce = SequentialFallbackLCPMetric
