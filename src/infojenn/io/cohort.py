"""Loading cohorts of phenotyped subjects from YAML or JSON files.

Expected document layout:

    subjects:
      - id: proband-1
        features:
          - term_id: HP:0001083
          - term_id: HP:0000545
            excluded: true
      - id: published-cohort
        features:
          - term_id: HP:0001166
            numerator: 3
            denominator: 7
"""

from pathlib import Path

import pydantic_yaml
import structlog
from pydantic import BaseModel, Field, model_validator

from infojenn.model.cohort import Subject, SubjectCohort
from infojenn.model.feature import AggregatedFeature, IndividualFeature, ObservationState
from infojenn.model.term import TermId

logger = structlog.get_logger(__name__)


class FeatureRecord(BaseModel):
    """Feature entry of a cohort file."""

    term_id: str = Field(..., description="CURIE of the observed term")
    excluded: bool = Field(default=False, description="Feature was explicitly ruled out")
    numerator: int | None = Field(default=None, ge=0)
    denominator: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_counts(self) -> "FeatureRecord":
        if (self.numerator is None) != (self.denominator is None):
            raise ValueError("numerator and denominator must be given together")
        if self.numerator is not None and self.numerator > self.denominator:
            raise ValueError(
                f"numerator {self.numerator} exceeds denominator {self.denominator}"
            )
        TermId.from_curie(self.term_id)
        return self

    def to_feature(self) -> IndividualFeature | AggregatedFeature:
        term_id = TermId.from_curie(self.term_id)
        if self.numerator is None:
            return IndividualFeature.of(term_id, is_present=not self.excluded)
        state = ObservationState.EXCLUDED if self.excluded else ObservationState.PRESENT
        return AggregatedFeature(term_id, state, self.numerator, self.denominator)


class SubjectRecord(BaseModel):
    """Subject entry of a cohort file."""

    id: str
    features: list[FeatureRecord] = Field(default_factory=list)


class CohortFile(BaseModel):
    """Cohort file document."""

    subjects: list[SubjectRecord] = Field(default_factory=list)

    def to_cohort(self) -> SubjectCohort:
        return SubjectCohort(tuple(
            Subject(record.id, tuple(f.to_feature() for f in record.features))
            for record in self.subjects
        ))


def load_cohort(cohort_path: Path | str) -> SubjectCohort:
    """
    Load and validate a cohort file.

    Args:
        cohort_path: Path to a `.json`, `.yaml` or `.yml` file

    Returns:
        SubjectCohort with one Subject per entry

    Raises:
        FileNotFoundError: If the file doesn't exist
        pydantic.ValidationError: If the document is invalid
    """
    cohort_path = Path(cohort_path)
    if not cohort_path.exists():
        raise FileNotFoundError(f"Cohort file not found: {cohort_path}")

    content = cohort_path.read_text()
    if cohort_path.suffix == ".json":
        document = CohortFile.model_validate_json(content)
    else:
        document = pydantic_yaml.parse_yaml_raw_as(CohortFile, content)

    cohort = document.to_cohort()
    logger.info(
        "cohort_loaded",
        path=str(cohort_path),
        subjects=len(cohort),
        annotations=sum(len(s) for s in cohort.members()),
    )
    return cohort
