"""Exceptions raised by the IC calculation and similarity measures."""

from infojenn.model.term import TermId


class InfojennError(Exception):
    """Base class for all infojenn errors."""


class OntologyError(InfojennError, ValueError):
    """A term required by the calculation is not known to the hierarchy."""

    def __init__(self, term_id: TermId, message: str):
        super().__init__(message)
        self.term_id = term_id


class UnknownModuleRootError(OntologyError):
    """The configured module root is not a term of the hierarchy."""

    def __init__(self, term_id: TermId):
        super().__init__(term_id, f"Module root {term_id} not in ontology")


class UnknownAnnotationTermError(OntologyError):
    """An annotation references a term absent from the hierarchy."""

    def __init__(self, term_id: TermId):
        super().__init__(term_id, f"Annotation ID {term_id} not in ontology")


class UnsupportedComparisonError(InfojennError, ValueError):
    """Similarity was requested for a combination of observation states without defined semantics."""
