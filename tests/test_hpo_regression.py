"""Regression tests against the released HPO.

Requires an HPO obographs JSON file (e.g. `hp.v2024-08-13.json`) whose path
is given in the INFOJENN_HPO_JSON environment variable; skipped otherwise.
The same ICs are checked against a bundled excerpt in test_hpotk_adapter.py.
"""

import itertools
import math
import os

import pytest

from infojenn.ic import CohortIcCalculator
from infojenn.model import IndividualFeature, PHENOTYPIC_ABNORMALITY, TermId
from infojenn.semsim import IcSimilarityMeasureFactory

HPO_JSON = os.environ.get("INFOJENN_HPO_JSON")

pytestmark = pytest.mark.skipif(
    not HPO_JSON or not os.path.exists(HPO_JSON),
    reason="INFOJENN_HPO_JSON does not point to an HPO obographs file",
)

MYOPIA = TermId.from_curie("HP:0000545")
ECTOPIA_LENTIS = TermId.from_curie("HP:0001083")


@pytest.fixture(scope="module")
def hpo():
    from infojenn.ontology.hpotk_adapter import load_hpotk_hierarchy

    return load_hpotk_hierarchy(HPO_JSON)


@pytest.fixture
def container(hpo, fbn1_ectopia_lentis_subjects):
    calculator = CohortIcCalculator(hpo, PHENOTYPIC_ABNORMALITY)
    return calculator.compute_ic(fbn1_ectopia_lentis_subjects)


def test_cohort_ic_term_count(container):
    assert len(container) == 178


def test_cohort_ic_has_no_nan(container):
    for _, term_ic in container.items():
        assert not math.isnan(term_ic.present)
        assert not math.isnan(term_ic.excluded)


def test_cohort_ic_module_root(container):
    pa_ic = container.get(PHENOTYPIC_ABNORMALITY)

    assert pa_ic is not None
    assert pa_ic.present == 0.0
    assert pa_ic.excluded == math.inf


def test_cohort_ic_myopia(container):
    myopia_ic = container.get(MYOPIA)

    assert myopia_ic is not None
    assert myopia_ic.present == pytest.approx(3.0588936890535687, rel=1e-12)
    assert myopia_ic.excluded == pytest.approx(1.3219280948873624, rel=1e-12)


def test_cohort_ic_ectopia_lentis(container):
    el_ic = container.get(ECTOPIA_LENTIS)

    assert el_ic is not None
    assert el_ic.present == pytest.approx(2.3219280948873622, rel=1e-12)
    assert el_ic.excluded == math.inf


def test_similarity_properties(hpo, container, fbn1_ectopia_lentis_subjects):
    calculator = CohortIcCalculator(hpo, PHENOTYPIC_ABNORMALITY)
    measure = IcSimilarityMeasureFactory(hpo, calculator).create_measure(
        fbn1_ectopia_lentis_subjects
    )
    term_ids = sorted(container.iter_term_ids())
    max_ic = max(container.get_present_ic(t) for t in term_ids)

    for term_id in term_ids:
        feature = IndividualFeature.of(term_id, is_present=True)
        assert measure.compute(feature, feature) == container.get_present_ic(term_id)

    for a, b in itertools.combinations(term_ids, 2):
        left = IndividualFeature.of(a, is_present=True)
        right = IndividualFeature.of(b, is_present=True)
        score = measure.compute(left, right)
        assert score == measure.compute(right, left)
        assert 0.0 <= score <= max_ic
