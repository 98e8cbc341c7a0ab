"""Information content of ontology terms computed from cohort observations."""

from infojenn.ic.calculator import (
    CohortIcCalculator,
    UnknownTermPolicy,
    information_content,
)
from infojenn.ic.container import IcContainer, OrderedIcContainer, TermIC

__all__ = [
    "CohortIcCalculator",
    "UnknownTermPolicy",
    "information_content",
    "IcContainer",
    "OrderedIcContainer",
    "TermIC",
]
