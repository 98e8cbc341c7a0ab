"""Term ids, observation states, features and cohorts."""

from infojenn.model.cohort import (
    AnnotatedCollection,
    Cohort,
    Subject,
    SubjectCohort,
    iter_member_annotations,
)
from infojenn.model.feature import (
    AggregatedFeature,
    Identifiable,
    IndividualFeature,
    Observable,
    ObservationState,
    WeightedObservation,
    observation_weight,
)
from infojenn.model.term import PHENOTYPIC_ABNORMALITY, TermId

__all__ = [
    "AnnotatedCollection",
    "Cohort",
    "Subject",
    "SubjectCohort",
    "iter_member_annotations",
    "AggregatedFeature",
    "Identifiable",
    "IndividualFeature",
    "Observable",
    "ObservationState",
    "WeightedObservation",
    "observation_weight",
    "PHENOTYPIC_ABNORMALITY",
    "TermId",
]
