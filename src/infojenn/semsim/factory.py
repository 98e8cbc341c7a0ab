"""Precomputation of pairwise MICA similarity from cohort ICs."""

import itertools
from collections.abc import Iterable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import structlog

from infojenn.ic.calculator import CohortIcCalculator
from infojenn.ic.container import IcContainer
from infojenn.model.term import TermId
from infojenn.ontology.hierarchy import Hierarchy
from infojenn.semsim.measure import (
    ExcludedComparisonPolicy,
    PrecomputedSimilarityMeasure,
    SimilarityMeasureFactory,
    TermPair,
)

logger = structlog.get_logger(__name__)

DEFAULT_MICA_THRESHOLD = 1e-8
DEFAULT_CHUNK_SIZE = 2048


def find_mica_ic(
    left: TermId,
    right: TermId,
    ic_container: IcContainer,
    relevant_ancestors: Mapping[TermId, frozenset[TermId]],
) -> float:
    """
    Get the present IC of the most informative common ancestor of two terms.

    Args:
        left: First term (must be in `ic_container`)
        right: Second term (must be in `ic_container`)
        ic_container: Term ICs
        relevant_ancestors: Inclusive ancestors of each container term,
            restricted to terms of the container

    Returns:
        Present IC of the MICA, the term's own present IC if `left == right`,
        or 0.0 if the terms share no ancestor with a computed IC
    """
    if left == right:
        return ic_container.get_present_ic(left)

    common = relevant_ancestors[left] & relevant_ancestors[right]
    return max((ic_container.get_present_ic(t) for t in common), default=0.0)


class IcSimilarityMeasureFactory(SimilarityMeasureFactory):
    """Build a `PrecomputedSimilarityMeasure` from the cohort ICs.

    Args:
        hierarchy: Ontology hierarchy
        ic_calculator: Calculator producing the ICs of the cohort
        mica_threshold: Pairs with MICA IC below this value are not stored
            and score 0
        max_workers: Worker threads for the pairwise phase (None lets the
            executor decide)
        chunk_size: Number of term pairs processed per task
        excluded_policy: Excluded vs. excluded behavior of the created measure

    Pairs are scored on a thread pool. MICA lookup is pure Python and holds
    the GIL, so the threads partition the pairs into independent chunks
    rather than run them on several cores at once.
    """

    def __init__(
        self,
        hierarchy: Hierarchy,
        ic_calculator: CohortIcCalculator,
        mica_threshold: float = DEFAULT_MICA_THRESHOLD,
        max_workers: int | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        excluded_policy: ExcludedComparisonPolicy = ExcludedComparisonPolicy.SHARED_EXCLUSION,
    ):
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.hierarchy = hierarchy
        self.ic_calculator = ic_calculator
        self.mica_threshold = mica_threshold
        self.max_workers = max_workers
        self.chunk_size = chunk_size
        self.excluded_policy = excluded_policy

    @classmethod
    def from_config(
        cls,
        hierarchy: Hierarchy,
        ic_calculator: CohortIcCalculator,
        config,
    ) -> "IcSimilarityMeasureFactory":
        """Create a factory from a `SimilarityConfig`."""
        return cls(
            hierarchy,
            ic_calculator,
            mica_threshold=config.mica_threshold,
            max_workers=config.max_workers,
            chunk_size=config.chunk_size,
            excluded_policy=config.excluded_policy,
        )

    def create_measure(self, cohort: Any) -> PrecomputedSimilarityMeasure:
        """
        Compute cohort ICs and precompute MICA IC for all pairs of their terms.

        Raises:
            OntologyError: Propagated from the IC calculation
        """
        container = self.ic_calculator.compute_ic(cohort)
        relevant = frozenset(container.iter_term_ids())

        relevant_ancestors = {
            term_id: frozenset(
                a for a in self.hierarchy.ancestors_inclusive(term_id) if a in relevant
            )
            for term_id in container.iter_term_ids()
        }

        n_terms = len(container)
        n_pairs = n_terms * (n_terms - 1) // 2
        logger.info(
            "create_measure_start",
            terms=n_terms,
            pairs=n_pairs,
            chunk_size=self.chunk_size,
            max_workers=self.max_workers,
        )

        pairs = itertools.combinations(container.iter_term_ids(), 2)
        tp2ic_mica: dict[TermPair, float] = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(self._score_chunk, chunk, container, relevant_ancestors)
                for chunk in _chunked(pairs, self.chunk_size)
            ]
            for future in futures:
                tp2ic_mica.update(future.result())

        logger.info(
            "create_measure_complete",
            pairs=n_pairs,
            stored_pairs=len(tp2ic_mica),
            omitted_pairs=n_pairs - len(tp2ic_mica),
        )

        return PrecomputedSimilarityMeasure(
            tp2ic_mica,
            ic_container=container,
            hierarchy=self.hierarchy,
            excluded_policy=self.excluded_policy,
        )

    def _score_chunk(
        self,
        chunk: list[tuple[TermId, TermId]],
        container: IcContainer,
        relevant_ancestors: Mapping[TermId, frozenset[TermId]],
    ) -> dict[TermPair, float]:
        scored = {}
        for left, right in chunk:
            ic_mica = find_mica_ic(left, right, container, relevant_ancestors)
            if ic_mica >= self.mica_threshold:
                scored[TermPair.of(left, right)] = ic_mica
        return scored


def _chunked(items: Iterable, size: int) -> Iterator[list]:
    iterator = iter(items)
    while chunk := list(itertools.islice(iterator, size)):
        yield chunk
