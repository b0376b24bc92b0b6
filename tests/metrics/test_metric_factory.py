import pytest
from pydantic import ValidationError

from regmetrics.core.config import settings
from regmetrics.metrics import (
    LCPMetric,
    LCPMetricReduce,
    MetricConfig,
    MetricFactory,
    RegistrationMetric,
    WeightedLCPMetric,
)


class TestMetricFactory:
    @pytest.mark.parametrize("name, cls", [
        ("lcp", LCPMetric),
        ("lcp_reduce", LCPMetricReduce),
        ("weighted_lcp", WeightedLCPMetric),
    ])
    def test_create_known_types(self, name, cls):
        metric = MetricFactory.create(name, epsilon=0.05)
        assert isinstance(metric, cls)
        assert isinstance(metric, RegistrationMetric)
        assert metric.epsilon == 0.05

    def test_default_epsilon_from_settings(self):
        assert MetricFactory.create("lcp").epsilon == settings.LCP_EPSILON

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown metric type"):
            MetricFactory.create("chamfer")

    def test_from_config(self):
        metric = MetricFactory.from_config(MetricConfig(type="weighted_lcp", epsilon=0.2))
        assert isinstance(metric, WeightedLCPMetric)
        assert metric.epsilon == 0.2

    def test_available(self):
        assert set(MetricFactory.available()) == {"lcp", "lcp_reduce", "weighted_lcp"}


class TestMetricConfig:
    def test_defaults(self):
        config = MetricConfig()
        assert config.type == "lcp"
        assert config.epsilon is None

    def test_rejects_non_positive_epsilon(self):
        with pytest.raises(ValidationError):
            MetricConfig(epsilon=0.0)

    def test_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            MetricConfig(type="icp")
