"""Annotated items (study subjects) and cohorts of them."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AnnotatedCollection(Protocol):
    """Item annotated with a collection of features."""

    def annotations(self) -> Sequence[Any]: ...


@runtime_checkable
class Cohort(Protocol):
    """Collection of annotated members."""

    def members(self) -> Sequence[Any]: ...


@dataclass(frozen=True)
class Subject:
    """Study subject annotated with features.

    Attributes:
        subject_id: Subject label (e.g. proband id from a publication)
        features: Features observed in the subject. A subject must not carry
            conflicting states for the same term; this is not checked.
    """
    subject_id: str
    features: tuple = field(default_factory=tuple)

    def annotations(self) -> Sequence[Any]:
        return self.features

    def present_annotations(self) -> Iterator[Any]:
        return (a for a in self.features if a.is_present)

    def excluded_annotations(self) -> Iterator[Any]:
        return (a for a in self.features if a.is_excluded)

    def __len__(self) -> int:
        return len(self.features)


@dataclass(frozen=True)
class SubjectCohort:
    """Cohort of study subjects."""
    subjects: tuple = field(default_factory=tuple)

    def members(self) -> Sequence[Subject]:
        return self.subjects

    def __len__(self) -> int:
        return len(self.subjects)


def iter_member_annotations(cohort: Any) -> Iterator[Sequence[Any]]:
    """Yield the annotations of each cohort member.

    Accepts a `Cohort`, or a plain sequence whose members are either
    `AnnotatedCollection`s or sequences of annotations.
    """
    members = cohort.members() if isinstance(cohort, Cohort) else cohort
    for member in members:
        if isinstance(member, AnnotatedCollection):
            yield member.annotations()
        else:
            yield member
