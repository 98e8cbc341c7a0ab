"""Ontology hierarchy protocol and adapters."""

from pathlib import Path

from infojenn.ontology.hierarchy import GraphHierarchy, Hierarchy


def load_hierarchy(path: Path | str) -> Hierarchy:
    """Load a hierarchy from an OBO file (obonet) or an obographs JSON file (hpotk)."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Ontology file not found: {path}")

    if path.suffix == ".obo":
        return GraphHierarchy.from_obo(path)

    from infojenn.ontology.hpotk_adapter import load_hpotk_hierarchy

    return load_hpotk_hierarchy(path)


__all__ = [
    "GraphHierarchy",
    "Hierarchy",
    "load_hierarchy",
]
