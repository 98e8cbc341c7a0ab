"""Observation model: features observed as present or excluded in study subjects.

A feature pairs an ontology term with an observation state. Capabilities are
expressed as narrow protocols so that any annotation type exposing the right
attributes can be consumed by the calculators:

- `Identifiable`: has a term identifier
- `Observable`: has an observation state
- `WeightedObservation`: carries numerator/denominator counts
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from infojenn.model.term import TermId


class ObservationState(str, Enum):
    """Whether a feature was present or explicitly excluded in the study subject(s)."""

    PRESENT = "present"
    EXCLUDED = "excluded"


@runtime_checkable
class Identifiable(Protocol):
    """Entity identified by an ontology term id."""

    @property
    def identifier(self) -> TermId: ...


@runtime_checkable
class Observable(Protocol):
    """Entity that is either present or excluded in the investigated item."""

    @property
    def observation_state(self) -> ObservationState: ...

    @property
    def is_present(self) -> bool: ...

    @property
    def is_excluded(self) -> bool: ...


@runtime_checkable
class WeightedObservation(Protocol):
    """Entity aggregated over one or more annotated items.

    `numerator` is the number of items in which the observation was made
    and `denominator` the number of items investigated for the feature.
    """

    @property
    def numerator(self) -> int: ...

    @property
    def denominator(self) -> int: ...

    @property
    def frequency(self) -> float: ...


class _ObservableMixin:
    observation_state: ObservationState

    @property
    def is_present(self) -> bool:
        return self.observation_state is ObservationState.PRESENT

    @property
    def is_excluded(self) -> bool:
        return self.observation_state is ObservationState.EXCLUDED


@dataclass(frozen=True, order=True)
class IndividualFeature(_ObservableMixin):
    """A feature of a single study subject.

    Attributes:
        identifier: Term id of the feature
        observation_state: Present or excluded in the subject
    """
    identifier: TermId
    observation_state: ObservationState

    @classmethod
    def of(cls, term_id: TermId | str, is_present: bool) -> "IndividualFeature":
        """Create a feature from a term id (or CURIE) and a presence flag."""
        if isinstance(term_id, str):
            term_id = TermId.from_curie(term_id)
        state = ObservationState.PRESENT if is_present else ObservationState.EXCLUDED
        return cls(identifier=term_id, observation_state=state)

    @property
    def numerator(self) -> int:
        return 1

    @property
    def denominator(self) -> int:
        return 1

    @property
    def frequency(self) -> float:
        return 1.0


@dataclass(frozen=True, order=True)
class AggregatedFeature(_ObservableMixin):
    """A feature ascertained over a group of subjects (e.g. a published cohort).

    Attributes:
        identifier: Term id of the feature
        observation_state: State reported for the group
        numerator: Number of subjects with the reported state
        denominator: Number of subjects investigated for the feature

    Raises:
        ValueError: If denominator is not positive or numerator is outside [0, denominator]
    """
    identifier: TermId
    observation_state: ObservationState
    numerator: int
    denominator: int

    def __post_init__(self):
        if self.denominator <= 0:
            raise ValueError(
                f"Denominator must be positive, got {self.denominator} for {self.identifier}"
            )
        if not 0 <= self.numerator <= self.denominator:
            raise ValueError(
                f"Numerator must be in [0, {self.denominator}], got {self.numerator} "
                f"for {self.identifier}"
            )

    @property
    def frequency(self) -> float:
        return self.numerator / self.denominator


def observation_weight(annotation: Observable) -> int:
    """Number of observations an annotation contributes to cohort counts.

    Weighted observations contribute their numerator, anything else counts once.
    """
    if isinstance(annotation, WeightedObservation):
        return annotation.numerator
    return 1
