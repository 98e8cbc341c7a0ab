"""Shared fixtures: a toy phenotype hierarchy and small cohorts.

Toy hierarchy (child -> parent):

    HP:0000001 All
    ├── HP:0000118 Phenotypic abnormality (module root)
    │   ├── HP:0000478 Abnormality of the eye
    │   │   ├── HP:0012373 Abnormal eye physiology
    │   │   │   └── HP:0000539 Abnormality of refraction (also child of HP:0000478)
    │   │   │       ├── HP:0000545 Myopia
    │   │   │       └── HP:0000540 Hypermetropia
    │   │   └── HP:0000517 Abnormality of the lens
    │   │       └── HP:0001083 Ectopia lentis
    │   └── HP:0000924 Abnormality of the skeletal system
    │       └── HP:0001166 Arachnodactyly
    └── HP:0000005 Mode of inheritance
        └── HP:0000006 Autosomal dominant inheritance
"""

import pytest

from infojenn.model import IndividualFeature, PHENOTYPIC_ABNORMALITY, TermId
from infojenn.ontology import GraphHierarchy

TOY_EDGES = [
    ("HP:0000118", "HP:0000001"),
    ("HP:0000478", "HP:0000118"),
    ("HP:0012373", "HP:0000478"),
    ("HP:0000539", "HP:0000478"),
    ("HP:0000539", "HP:0012373"),
    ("HP:0000545", "HP:0000539"),
    ("HP:0000540", "HP:0000539"),
    ("HP:0000517", "HP:0000478"),
    ("HP:0001083", "HP:0000517"),
    ("HP:0000924", "HP:0000118"),
    ("HP:0001166", "HP:0000924"),
    ("HP:0000005", "HP:0000001"),
    ("HP:0000006", "HP:0000005"),
]

ALL = TermId.from_curie("HP:0000001")
EYE = TermId.from_curie("HP:0000478")
EYE_PHYSIOLOGY = TermId.from_curie("HP:0012373")
REFRACTION = TermId.from_curie("HP:0000539")
MYOPIA = TermId.from_curie("HP:0000545")
HYPERMETROPIA = TermId.from_curie("HP:0000540")
LENS = TermId.from_curie("HP:0000517")
ECTOPIA_LENTIS = TermId.from_curie("HP:0001083")
SKELETAL = TermId.from_curie("HP:0000924")
ARACHNODACTYLY = TermId.from_curie("HP:0001166")
AUTOSOMAL_DOMINANT = TermId.from_curie("HP:0000006")
PA = PHENOTYPIC_ABNORMALITY


def make_study_subject(phenotypes):
    """Create a subject's features from (curie, is_present) pairs."""
    return [IndividualFeature.of(curie, is_present) for curie, is_present in phenotypes]


@pytest.fixture
def toy_hierarchy():
    """Toy phenotype hierarchy with a multi-parent term."""
    return GraphHierarchy.from_edges(TOY_EDGES)


@pytest.fixture
def toy_cohort():
    """Three subjects; see test_ic.py for the expected counts."""
    return [
        make_study_subject([
            ("HP:0000545", True),
            ("HP:0001083", True),
            ("HP:0001166", False),
        ]),
        make_study_subject([
            ("HP:0001083", True),
            ("HP:0000545", False),
        ]),
        make_study_subject([
            ("HP:0001166", True),
            ("HP:0000517", False),
        ]),
    ]


@pytest.fixture
def toy_cohort_with_eye_exclusion(toy_cohort):
    """`toy_cohort` plus a subject in whom any eye abnormality was ruled out."""
    return toy_cohort + [make_study_subject([("HP:0000478", False)])]


@pytest.fixture
def fbn1_ectopia_lentis_subjects():
    """Five individuals with FBN1 variants and ectopia lentis."""
    return [
        # FBN1 -> BM
        make_study_subject([
            ("HP:0001083", True),
            ("HP:0001065", True),
            ("HP:0012773", True),
            ("HP:0000501", False),
            ("HP:0000545", False),
            ("HP:0000486", False),
            ("HP:0002650", False),
            ("HP:0001382", False),
            ("HP:0000767", False),
            ("HP:0001166", False),
            ("HP:0000541", False),
            ("HP:0000768", False),
            ("HP:0000218", False),
            ("HP:0002616", False),
            ("HP:0001634", False),
        ]),
        # FBN1 -> JL
        make_study_subject([
            ("HP:0001083", True),
            ("HP:0000545", True),
            ("HP:0001382", True),
            ("HP:0000768", True),
            ("HP:0000218", True),
            ("HP:0001065", True),
            ("HP:0000501", False),
            ("HP:0000486", False),
            ("HP:0002650", False),
            ("HP:0000767", False),
            ("HP:0001166", False),
            ("HP:0000541", False),
            ("HP:0002616", False),
            ("HP:0001634", False),
            ("HP:0012773", False),
        ]),
        # FBN1 -> OP
        make_study_subject([
            ("HP:0001083", True),
            ("HP:0000545", True),
            ("HP:0001166", True),
            ("HP:0000218", True),
            ("HP:0001634", True),
            ("HP:0012773", True),
            ("HP:0000501", False),
            ("HP:0000486", False),
            ("HP:0002650", False),
            ("HP:0001382", False),
            ("HP:0000767", False),
            ("HP:0000541", False),
            ("HP:0000768", False),
            ("HP:0001065", False),
            ("HP:0002616", False),
        ]),
        # FBN1 -> RWT
        make_study_subject([
            ("HP:0001083", True),
            ("HP:0000545", True),
            ("HP:0000486", True),
            ("HP:0001382", True),
            ("HP:0001065", True),
            ("HP:0000501", False),
            ("HP:0002650", False),
            ("HP:0000767", False),
            ("HP:0001166", False),
            ("HP:0000541", False),
            ("HP:0000768", False),
            ("HP:0000218", False),
            ("HP:0002616", False),
            ("HP:0001634", False),
            ("HP:0012773", False),
        ]),
        # FBN1 -> VW
        make_study_subject([
            ("HP:0001083", True),
            ("HP:0000501", True),
            ("HP:0002650", True),
            ("HP:0000218", True),
            ("HP:0001065", True),
            ("HP:0000545", False),
            ("HP:0000486", False),
            ("HP:0001382", False),
            ("HP:0000767", False),
            ("HP:0001166", False),
            ("HP:0000541", False),
            ("HP:0000768", False),
            ("HP:0002616", False),
            ("HP:0001634", False),
            ("HP:0012773", False),
        ]),
    ]
