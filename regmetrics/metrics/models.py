from typing import Literal, Optional

from pydantic import BaseModel, Field

MetricType = Literal["lcp", "lcp_reduce", "weighted_lcp"]


class MetricConfig(BaseModel):
    """Which LCP strategy to build and with what support size."""
    type: MetricType = "lcp"
    epsilon: Optional[float] = Field(default=None, gt=0)
