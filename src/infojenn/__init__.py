"""infojenn: cohort information content and semantic similarity over ontology hierarchies."""

__version__ = "0.1.0"
