"""Semantic similarity based on the information content of common ancestors."""

from infojenn.semsim.factory import (
    DEFAULT_MICA_THRESHOLD,
    IcSimilarityMeasureFactory,
    find_mica_ic,
)
from infojenn.semsim.measure import (
    ExcludedComparisonPolicy,
    PrecomputedSimilarityMeasure,
    SimilarityMeasure,
    SimilarityMeasureFactory,
    TermPair,
)

__all__ = [
    "DEFAULT_MICA_THRESHOLD",
    "IcSimilarityMeasureFactory",
    "find_mica_ic",
    "ExcludedComparisonPolicy",
    "PrecomputedSimilarityMeasure",
    "SimilarityMeasure",
    "SimilarityMeasureFactory",
    "TermPair",
]
