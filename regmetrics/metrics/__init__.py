"""
Largest Common Pointset (LCP) metrics for scoring candidate rigid alignments.
"""

from .base import RegistrationMetric
from .lcp import LCPMetric
from .reduce import LCPMetricReduce, ParallelLCPMetric, PARALLEL_REDUCE_AVAILABLE
from .weighted import WeightedLCPMetric
from .models import MetricConfig
from .factory import MetricFactory

__all__ = [
    "RegistrationMetric",
    "LCPMetric",
    "LCPMetricReduce",
    "ParallelLCPMetric",
    "PARALLEL_REDUCE_AVAILABLE",
    "WeightedLCPMetric",
    "MetricConfig",
    "MetricFactory",
]
