"""Pydantic models for IC and similarity configuration."""

import hashlib
import json

from pydantic import BaseModel, Field, field_validator

from infojenn.ic.calculator import UnknownTermPolicy
from infojenn.model.term import TermId
from infojenn.semsim.factory import DEFAULT_CHUNK_SIZE, DEFAULT_MICA_THRESHOLD
from infojenn.semsim.measure import ExcludedComparisonPolicy


class IcConfig(BaseModel):
    """Configuration of the cohort IC calculation."""

    module_root: str = Field(
        default="HP:0000118",
        description="CURIE of the module root bounding the counted sub-ontology",
    )
    unknown_term_policy: UnknownTermPolicy = Field(
        default=UnknownTermPolicy.ERROR,
        description="Fail on annotations with terms absent from the ontology, or skip them",
    )
    ordered_container: bool = Field(
        default=False,
        description="Iterate computed ICs in term id order",
    )

    @field_validator("module_root")
    @classmethod
    def validate_curie(cls, v: str) -> str:
        """Reject values that are not CURIEs."""
        return TermId.from_curie(v).value


class SimilarityConfig(BaseModel):
    """Configuration of the precomputed similarity measure."""

    mica_threshold: float = Field(
        default=DEFAULT_MICA_THRESHOLD,
        gt=0.0,
        description="Term pairs with MICA IC below this value are omitted (score 0)",
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Worker threads for pairwise MICA computation (None = executor default)",
    )
    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        ge=1,
        description="Term pairs per worker task",
    )
    excluded_policy: ExcludedComparisonPolicy = Field(
        default=ExcludedComparisonPolicy.SHARED_EXCLUSION,
        description="How two excluded features are compared",
    )


class InfojennConfig(BaseModel):
    """Main configuration."""

    ic: IcConfig = Field(
        default_factory=IcConfig,
        description="IC calculation settings",
    )
    similarity: SimilarityConfig = Field(
        default_factory=SimilarityConfig,
        description="Similarity precomputation settings",
    )

    def config_hash(self) -> str:
        """
        Compute SHA-256 hash of the configuration.

        Returns a deterministic hash based on all config values,
        useful for tracking which settings produced a result.
        """
        config_dict = self.model_dump(mode="json")
        config_json = json.dumps(
            config_dict,
            sort_keys=True,
            default=str,
        )
        return hashlib.sha256(config_json.encode()).hexdigest()
