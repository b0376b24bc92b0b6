from typing import Dict, Optional, Type

from regmetrics.core.config import settings
from regmetrics.core.logging import get_logger
from .base import RegistrationMetric
from .lcp import LCPMetric
from .models import MetricConfig
from .reduce import LCPMetricReduce
from .weighted import WeightedLCPMetric

logger = get_logger(__name__)

_METRIC_MAP: Dict[str, Type[RegistrationMetric]] = {
    "lcp": LCPMetric,
    "lcp_reduce": LCPMetricReduce,
    "weighted_lcp": WeightedLCPMetric,
}


class MetricFactory:
    @staticmethod
    def create(metric_type: str, epsilon: Optional[float] = None) -> RegistrationMetric:
        """Resolves a metric name to a configured metric object"""
        if metric_type not in _METRIC_MAP:
            raise ValueError(f"Unknown metric type: '{metric_type}'. Available: {list(_METRIC_MAP.keys())}")

        if epsilon is None:
            epsilon = settings.LCP_EPSILON
        metric = _METRIC_MAP[metric_type](epsilon)
        logger.debug(f"Created {metric!r} for '{metric_type}'")
        return metric

    @staticmethod
    def from_config(config: MetricConfig) -> RegistrationMetric:
        return MetricFactory.create(config.type, config.epsilon)

    @staticmethod
    def available() -> list:
        return list(_METRIC_MAP.keys())
