"""Hierarchy adapter for ontologies loaded with hpo-toolkit (hpotk)."""

from pathlib import Path

import hpotk
import structlog

from infojenn.model.term import TermId

logger = structlog.get_logger(__name__)


class HpoTkHierarchy:
    """Hierarchy backed by an hpotk `MinimalOntology`."""

    def __init__(self, ontology: hpotk.MinimalOntology):
        self.ontology = ontology

    def resolve(self, term_id: TermId) -> bool:
        """True if `term_id` is the primary id of a term; alternate ids do not resolve."""
        term = self.ontology.get_term(term_id.value)
        # Obsolete ids resolve to their replacement, which is not the same node
        return term is not None and term.identifier.value == term_id.value

    def ancestors_inclusive(self, term_id: TermId) -> frozenset[TermId]:
        return frozenset(
            TermId.from_curie(t.value)
            for t in self.ontology.graph.get_ancestors(term_id.value, include_source=True)
        )

    def descendants_inclusive(self, term_id: TermId) -> frozenset[TermId]:
        return frozenset(
            TermId.from_curie(t.value)
            for t in self.ontology.graph.get_descendants(term_id.value, include_source=True)
        )


def load_hpotk_hierarchy(path: Path | str) -> HpoTkHierarchy:
    """Load an obographs JSON ontology (e.g. `hp.json`) with hpotk."""
    ontology = hpotk.load_minimal_ontology(str(path))
    logger.info(
        "hpotk_ontology_loaded",
        path=str(path),
        version=ontology.version,
    )
    return HpoTkHierarchy(ontology)
