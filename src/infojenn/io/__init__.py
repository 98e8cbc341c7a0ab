"""Cohort file loading."""

from infojenn.io.cohort import CohortFile, FeatureRecord, SubjectRecord, load_cohort

__all__ = [
    "CohortFile",
    "FeatureRecord",
    "SubjectRecord",
    "load_cohort",
]
