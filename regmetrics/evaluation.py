"""
Scoring a fixed list of candidate transforms with one metric.

This is the verification step of a congruent-set matcher: the best score so
far is passed as the termination bound, so hopeless candidates are pruned
early by metrics that support it.
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

import numpy as np

from regmetrics.core.logging import get_logger
from regmetrics.geometry.pointset import as_positions, require_points
from regmetrics.index.base import SpatialIndex
from regmetrics.metrics.base import RegistrationMetric

logger = get_logger(__name__)


@dataclass
class CandidateEvaluation:
    """Result of scoring a list of candidate transforms"""
    best_index: int
    best_transform: Optional[np.ndarray]
    best_score: float
    scores: List[float] = field(default_factory=list)  # Pruned candidates hold their lower bound


def evaluate_candidates(
    metric: RegistrationMetric,
    ref_index: SpatialIndex,
    target: Any,
    transforms: Sequence[np.ndarray]
) -> CandidateEvaluation:
    """
    Score every candidate transform and keep the best one.

    Args:
        metric: Metric used for every candidate
        ref_index: Index over the reference points
        target: Target points (must not be empty)
        transforms: Candidate 4x4 transforms, scored in order

    Returns:
        CandidateEvaluation; best_index is -1 when transforms is empty or
        every candidate scored 0
    """
    positions = as_positions(target)
    require_points(positions)

    result = CandidateEvaluation(best_index=-1, best_transform=None, best_score=0.0)
    for i, transform in enumerate(transforms):
        score = metric(ref_index, positions, transform, result.best_score)
        result.scores.append(score)
        if score > result.best_score:
            result.best_index = i
            result.best_transform = np.asarray(transform, dtype=np.float64)
            result.best_score = score

    logger.info(
        f"Evaluated {len(result.scores)} candidates with {metric!r}: "
        f"best #{result.best_index} scored {result.best_score:.4f}"
    )
    return result
