"""Cohort-based information content calculation.

Present observations are propagated to all ancestors of the annotated term
(a subject with *Myopia* also has an *Abnormality of refraction*), while
excluded observations are propagated to all descendants (a subject without
an *Abnormality of refraction* cannot have *Myopia*). Only terms within the
module root's descendant closure are counted.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog

from infojenn.errors import UnknownAnnotationTermError, UnknownModuleRootError
from infojenn.ic.container import IcContainer, OrderedIcContainer, TermIC
from infojenn.model.cohort import iter_member_annotations
from infojenn.model.feature import ObservationState, observation_weight
from infojenn.model.term import TermId
from infojenn.ontology.hierarchy import Hierarchy

logger = structlog.get_logger(__name__)


class UnknownTermPolicy(str, Enum):
    """What to do with an annotation whose term is not in the hierarchy.

    A term is known only by its primary id. HPO alternate ids and obsolete
    ids are not mapped to the current term, so under `ERROR` a cohort using
    them fails until it is updated.
    """

    ERROR = "error"
    SKIP = "skip"


@dataclass
class _TermCount:
    present: int = 0
    excluded: int = 0


def information_content(population: int, count: int) -> float:
    """
    Compute log2(population / count).

    A zero count yields +inf: a term never observed is maximally informative.
    This includes 0/0, which would otherwise produce NaN when the cohort has
    no observations of that polarity at all.
    """
    if count == 0:
        return math.inf
    return math.log2(population / count)


class CohortIcCalculator:
    """Compute term ICs from the observations of a cohort.

    Args:
        hierarchy: Ontology hierarchy used to propagate observations
        module_root: Root of the sub-ontology to count (e.g. HP:0000118)
        unknown_term_policy: Raise on annotations with unknown terms (default)
            or skip them
        ordered: Return an `OrderedIcContainer` instead of the default container
    """

    def __init__(
        self,
        hierarchy: Hierarchy,
        module_root: TermId,
        unknown_term_policy: UnknownTermPolicy = UnknownTermPolicy.ERROR,
        ordered: bool = False,
    ):
        self.hierarchy = hierarchy
        self.module_root = module_root
        self.unknown_term_policy = UnknownTermPolicy(unknown_term_policy)
        self.ordered = ordered

    @classmethod
    def from_config(cls, hierarchy: Hierarchy, config) -> "CohortIcCalculator":
        """Create a calculator from an `IcConfig`."""
        return cls(
            hierarchy,
            module_root=TermId.from_curie(config.module_root),
            unknown_term_policy=config.unknown_term_policy,
            ordered=config.ordered_container,
        )

    def compute_ic(self, cohort: Any) -> IcContainer:
        """
        Compute present and excluded IC for every term observed in the cohort.

        Args:
            cohort: A `Cohort`, or a sequence of members where each member is an
                `AnnotatedCollection` or a sequence of annotations. Annotations
                must expose `identifier` and `observation_state`; weighted
                annotations contribute their `numerator`.

        Returns:
            IcContainer with a `TermIC` for each term that accumulated a count.
            Empty if no annotation fell within the module.

        Raises:
            UnknownModuleRootError: If the module root is not in the hierarchy
            UnknownAnnotationTermError: If an annotation term is not in the
                hierarchy and the policy is `UnknownTermPolicy.ERROR`

        Notes:
            - Present IC is normalized by the present count of the module root
            - Excluded IC is normalized by the maximum excluded count over all
              terms, not only over the descendants of the term in question
        """
        if not self.hierarchy.resolve(self.module_root):
            raise UnknownModuleRootError(self.module_root)

        module_term_ids = set(self.hierarchy.descendants_inclusive(self.module_root))

        logger.info(
            "compute_ic_start",
            module_root=self.module_root.value,
            module_terms=len(module_term_ids),
            unknown_term_policy=self.unknown_term_policy.value,
        )

        counts, n_members, n_skipped = self._aggregate(cohort, module_term_ids)

        if n_skipped:
            logger.warning(
                "compute_ic_unknown_terms_skipped",
                skipped_annotations=n_skipped,
            )

        if not counts:
            logger.warning(
                "compute_ic_empty_aggregate",
                members=n_members,
                module_root=self.module_root.value,
            )
            return self._container({})

        # The root is missing from `counts` if only exclusions were observed
        root_count = counts.get(self.module_root)
        pop_present_count = root_count.present if root_count is not None else 0
        pop_excluded_count = max(count.excluded for count in counts.values())

        term_ics = {
            term_id: TermIC(
                present=information_content(pop_present_count, count.present),
                excluded=information_content(pop_excluded_count, count.excluded),
            )
            for term_id, count in counts.items()
        }

        logger.info(
            "compute_ic_complete",
            members=n_members,
            terms=len(term_ics),
            pop_present_count=pop_present_count,
            pop_excluded_count=pop_excluded_count,
        )
        return self._container(term_ics)

    def _aggregate(
        self,
        cohort: Any,
        module_term_ids: set[TermId],
    ) -> tuple[dict[TermId, _TermCount], int, int]:
        counts: dict[TermId, _TermCount] = {}
        n_members = 0
        n_skipped = 0

        for annotations in iter_member_annotations(cohort):
            n_members += 1
            for annotation in annotations:
                term_id = annotation.identifier
                if not self.hierarchy.resolve(term_id):
                    if self.unknown_term_policy is UnknownTermPolicy.ERROR:
                        raise UnknownAnnotationTermError(term_id)
                    n_skipped += 1
                    continue

                if term_id not in module_term_ids:
                    continue

                weight = observation_weight(annotation)
                if annotation.observation_state is ObservationState.PRESENT:
                    for anc in self._module_ancestors(term_id, module_term_ids):
                        counts.setdefault(anc, _TermCount()).present += weight
                else:
                    # Descendants of a module term are module terms too
                    for desc in self.hierarchy.descendants_inclusive(term_id):
                        counts.setdefault(desc, _TermCount()).excluded += weight

        return counts, n_members, n_skipped

    def _module_ancestors(
        self,
        term_id: TermId,
        module_term_ids: set[TermId],
    ) -> Iterable[TermId]:
        return (
            anc for anc in self.hierarchy.ancestors_inclusive(term_id)
            if anc in module_term_ids
        )

    def _container(self, term_ics: dict[TermId, TermIC]) -> IcContainer:
        if self.ordered:
            return OrderedIcContainer(term_ics)
        return IcContainer(term_ics)
