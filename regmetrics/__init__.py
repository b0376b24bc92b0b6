"""
Largest Common Pointset metrics for evaluating point cloud registration candidates.
"""

from .evaluation import CandidateEvaluation, evaluate_candidates
from .geometry import EmptyPointSetError, transform_positions
from .index import INVALID_INDEX, BruteForceIndex, KdTreeIndex, SpatialIndex
from .metrics import (
    LCPMetric,
    LCPMetricReduce,
    MetricConfig,
    MetricFactory,
    ParallelLCPMetric,
    RegistrationMetric,
    WeightedLCPMetric,
)

__version__ = "0.1.0"

__all__ = [
    "CandidateEvaluation",
    "evaluate_candidates",
    "EmptyPointSetError",
    "transform_positions",
    "INVALID_INDEX",
    "BruteForceIndex",
    "KdTreeIndex",
    "SpatialIndex",
    "LCPMetric",
    "LCPMetricReduce",
    "MetricConfig",
    "MetricFactory",
    "ParallelLCPMetric",
    "RegistrationMetric",
    "WeightedLCPMetric",
]
