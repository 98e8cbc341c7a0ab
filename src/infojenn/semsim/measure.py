"""Similarity measures between observed features."""

import abc
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

import polars as pl

from infojenn.errors import UnsupportedComparisonError
from infojenn.ic.container import IcContainer
from infojenn.model.feature import ObservationState
from infojenn.model.term import TermId
from infojenn.ontology.hierarchy import Hierarchy


@dataclass(frozen=True, order=True)
class TermPair:
    """Unordered pair of term ids, stored with the smaller id first."""
    left: TermId
    right: TermId

    @classmethod
    def of(cls, a: TermId, b: TermId) -> "TermPair":
        if b < a:
            a, b = b, a
        return cls(left=a, right=b)


class ExcludedComparisonPolicy(str, Enum):
    """How two excluded features are compared.

    - SHARED_EXCLUSION: if one term is an ancestor (or the same term) of the
      other, both features exclude the more specific term; score its
      excluded IC. Unrelated terms score 0.
    - ZERO: always 0.
    - UNSUPPORTED: raise `UnsupportedComparisonError`.
    """

    SHARED_EXCLUSION = "shared_exclusion"
    ZERO = "zero"
    UNSUPPORTED = "unsupported"


class SimilarityMeasure(abc.ABC):
    """Similarity between two features (term id + observation state)."""

    @abc.abstractmethod
    def compute(self, left: Any, right: Any) -> float:
        pass


class PrecomputedSimilarityMeasure(SimilarityMeasure):
    """Similarity backed by a precomputed table of MICA ICs.

    Args:
        tp2ic_mica: IC of the most informative common ancestor per term pair.
            Pairs absent from the table score 0.
        ic_container: Term ICs used for same-term and excluded comparisons
        hierarchy: Hierarchy used to relate excluded terms
        excluded_policy: Behavior for excluded vs. excluded comparisons
    """

    def __init__(
        self,
        tp2ic_mica: Mapping[TermPair, float],
        ic_container: IcContainer,
        hierarchy: Hierarchy,
        excluded_policy: ExcludedComparisonPolicy = ExcludedComparisonPolicy.SHARED_EXCLUSION,
    ):
        self._tp2ic_mica = MappingProxyType(dict(tp2ic_mica))
        self.ic_container = ic_container
        self.hierarchy = hierarchy
        self.excluded_policy = ExcludedComparisonPolicy(excluded_policy)

    def compute(self, left: Any, right: Any) -> float:
        """
        Compute similarity of two features.

        Raises:
            UnsupportedComparisonError: For present vs. excluded features, and
                for excluded vs. excluded under `ExcludedComparisonPolicy.UNSUPPORTED`
        """
        left_state = left.observation_state
        right_state = right.observation_state

        if left_state is ObservationState.PRESENT and right_state is ObservationState.PRESENT:
            return self.similarity(left.identifier, right.identifier)

        if left_state is not right_state:
            raise UnsupportedComparisonError(
                f"Present vs. Excluded is not supported ({left.identifier} vs. {right.identifier})"
            )

        return self._compare_excluded(left.identifier, right.identifier)

    def similarity(self, left: TermId, right: TermId) -> float:
        """Similarity of two terms observed present."""
        if left == right:
            ic = self.ic_container.get_present_ic(left)
            return 0.0 if ic is None else ic
        return self._tp2ic_mica.get(TermPair.of(left, right), 0.0)

    def _compare_excluded(self, left: TermId, right: TermId) -> float:
        if self.excluded_policy is ExcludedComparisonPolicy.UNSUPPORTED:
            raise UnsupportedComparisonError(
                f"Excluded vs. Excluded is not supported ({left} vs. {right})"
            )
        if self.excluded_policy is ExcludedComparisonPolicy.ZERO:
            return 0.0

        if left == right:
            specific = left
        elif not (self.hierarchy.resolve(left) and self.hierarchy.resolve(right)):
            return 0.0
        elif left in self.hierarchy.ancestors_inclusive(right):
            specific = right
        elif right in self.hierarchy.ancestors_inclusive(left):
            specific = left
        else:
            return 0.0

        ic = self.ic_container.get_excluded_ic(specific)
        return 0.0 if ic is None else ic

    def __len__(self) -> int:
        return len(self._tp2ic_mica)

    def __contains__(self, pair: object) -> bool:
        return pair in self._tp2ic_mica

    def to_frame(self) -> pl.DataFrame:
        """
        Tabulate the precomputed pairs.

        Returns:
            DataFrame with columns left, right (str) and ic_mica (f64),
            sorted by ic_mica descending, then left and right
        """
        pairs = sorted(self._tp2ic_mica)
        df = pl.DataFrame(
            {
                "left": [p.left.value for p in pairs],
                "right": [p.right.value for p in pairs],
                "ic_mica": [self._tp2ic_mica[p] for p in pairs],
            },
            schema={"left": pl.Utf8, "right": pl.Utf8, "ic_mica": pl.Float64},
        )
        return df.sort(["ic_mica", "left", "right"], descending=[True, False, False])


class SimilarityMeasureFactory(abc.ABC):
    """Builds a `SimilarityMeasure` from a cohort."""

    @abc.abstractmethod
    def create_measure(self, cohort: Any) -> SimilarityMeasure:
        pass
