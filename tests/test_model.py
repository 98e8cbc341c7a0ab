"""Tests for term ids, features and cohorts."""

import pytest

from infojenn.model import (
    AggregatedFeature,
    AnnotatedCollection,
    Cohort,
    Identifiable,
    IndividualFeature,
    Observable,
    ObservationState,
    Subject,
    SubjectCohort,
    TermId,
    WeightedObservation,
    iter_member_annotations,
    observation_weight,
)


def test_term_id_from_curie():
    term_id = TermId.from_curie("HP:0000118")

    assert term_id.prefix == "HP"
    assert term_id.id == "0000118"
    assert term_id.value == "HP:0000118"
    assert str(term_id) == "HP:0000118"


def test_term_id_from_obo_purl():
    """obographs spell ids as PURLs."""
    term_id = TermId.from_curie("http://purl.obolibrary.org/obo/HP_0001083")

    assert term_id == TermId("HP", "0001083")


@pytest.mark.parametrize("curie", ["HP0000118", ":0000118", "HP:", ""])
def test_term_id_invalid_curie(curie):
    with pytest.raises(ValueError):
        TermId.from_curie(curie)


def test_term_id_ordering_and_hashing():
    """Term ids are usable as sorted dict keys."""
    a = TermId.from_curie("HP:0000118")
    b = TermId.from_curie("HP:0000545")
    c = TermId.from_curie("MONDO:0007947")

    assert sorted([c, b, a]) == [a, b, c]
    assert {a: 1}[TermId("HP", "0000118")] == 1
    assert len({a, TermId.from_curie("HP:0000118")}) == 1


def test_individual_feature_states():
    present = IndividualFeature.of("HP:0000545", is_present=True)
    excluded = IndividualFeature.of(TermId.from_curie("HP:0000545"), is_present=False)

    assert present.observation_state is ObservationState.PRESENT
    assert present.is_present and not present.is_excluded
    assert excluded.observation_state is ObservationState.EXCLUDED
    assert excluded.is_excluded and not excluded.is_present
    assert present.identifier == excluded.identifier


def test_individual_feature_counts_once():
    feature = IndividualFeature.of("HP:0000545", is_present=True)

    assert feature.numerator == 1
    assert feature.denominator == 1
    assert feature.frequency == 1.0
    assert observation_weight(feature) == 1


def test_aggregated_feature_frequency():
    feature = AggregatedFeature(TermId("HP", "0001083"), ObservationState.PRESENT, 3, 4)

    assert feature.frequency == 0.75
    assert observation_weight(feature) == 3
    assert feature.is_present


@pytest.mark.parametrize("numerator,denominator", [(1, 0), (-1, 4), (5, 4)])
def test_aggregated_feature_invalid_counts(numerator, denominator):
    with pytest.raises(ValueError):
        AggregatedFeature(TermId("HP", "0001083"), ObservationState.PRESENT, numerator, denominator)


def test_features_satisfy_capability_protocols():
    individual = IndividualFeature.of("HP:0000545", is_present=True)
    aggregated = AggregatedFeature(TermId("HP", "0001083"), ObservationState.EXCLUDED, 2, 4)

    for feature in (individual, aggregated):
        assert isinstance(feature, Identifiable)
        assert isinstance(feature, Observable)
        assert isinstance(feature, WeightedObservation)


def test_plain_observation_weighs_one():
    """Annotations without counts contribute a single observation."""

    class Observation:
        identifier = TermId("HP", "0000545")
        observation_state = ObservationState.PRESENT

    assert observation_weight(Observation()) == 1


def test_subject_present_and_excluded_annotations():
    subject = Subject("JL", (
        IndividualFeature.of("HP:0001083", True),
        IndividualFeature.of("HP:0000545", True),
        IndividualFeature.of("HP:0000501", False),
    ))

    assert isinstance(subject, AnnotatedCollection)
    assert len(subject) == 3
    assert [f.identifier.value for f in subject.present_annotations()] == ["HP:0001083", "HP:0000545"]
    assert [f.identifier.value for f in subject.excluded_annotations()] == ["HP:0000501"]


def test_iter_member_annotations_accepts_cohorts_and_sequences():
    features = (IndividualFeature.of("HP:0001083", True),)
    cohort = SubjectCohort((Subject("a", features), Subject("b", features)))

    assert isinstance(cohort, Cohort)
    assert list(iter_member_annotations(cohort)) == [features, features]
    assert list(iter_member_annotations([list(features)])) == [list(features)]
    assert list(iter_member_annotations([Subject("a", features)])) == [features]
