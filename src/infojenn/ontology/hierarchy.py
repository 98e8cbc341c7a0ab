"""Hierarchy queries consumed by the IC calculator and similarity factory.

The calculators only need three read-only queries over an immutable DAG,
captured by the `Hierarchy` protocol. `GraphHierarchy` adapts a networkx
graph whose edges point from a child term to its parent (`is_a`), which is
the orientation obonet produces for OBO files.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

import networkx as nx
import structlog

from infojenn.model.term import TermId

logger = structlog.get_logger(__name__)


@runtime_checkable
class Hierarchy(Protocol):
    """Read-only ancestor/descendant queries over an ontology DAG."""

    def resolve(self, term_id: TermId) -> bool:
        """Test if `term_id` is a term of the hierarchy."""
        ...

    def ancestors_inclusive(self, term_id: TermId) -> Iterable[TermId]:
        """Get `term_id` and all its ancestors."""
        ...

    def descendants_inclusive(self, term_id: TermId) -> Iterable[TermId]:
        """Get `term_id` and all its descendants."""
        ...


class GraphHierarchy:
    """Hierarchy backed by a networkx DiGraph with child -> parent edges.

    Traversals are memoised per term since the graph must not change
    while the adapter is in use.
    """

    def __init__(self, graph: nx.DiGraph):
        if not nx.is_directed_acyclic_graph(graph):
            raise ValueError("Ontology hierarchy must be a directed acyclic graph")
        self.graph = graph
        self._ancestors: dict[TermId, frozenset[TermId]] = {}
        self._descendants: dict[TermId, frozenset[TermId]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[TermId | str, TermId | str]]) -> "GraphHierarchy":
        """Build a hierarchy from (child, parent) pairs of term ids or CURIEs."""
        graph = nx.DiGraph()
        for child, parent in edges:
            graph.add_edge(_as_term_id(child), _as_term_id(parent))
        return cls(graph)

    @classmethod
    def from_obo(cls, path: Path | str) -> "GraphHierarchy":
        """Load the `is_a` hierarchy of an OBO file with obonet."""
        import obonet

        multigraph = obonet.read_obo(str(path))
        graph = nx.DiGraph()
        graph.add_nodes_from(TermId.from_curie(node) for node in multigraph.nodes)
        for child, parent, relation in multigraph.edges(keys=True):
            if relation == "is_a":
                graph.add_edge(TermId.from_curie(child), TermId.from_curie(parent))

        logger.info(
            "obo_hierarchy_loaded",
            path=str(path),
            terms=graph.number_of_nodes(),
            is_a_edges=graph.number_of_edges(),
        )
        return cls(graph)

    def resolve(self, term_id: TermId) -> bool:
        return term_id in self.graph

    def ancestors_inclusive(self, term_id: TermId) -> frozenset[TermId]:
        found = self._ancestors.get(term_id)
        if found is None:
            # Parents are successors under child -> parent edges
            found = frozenset(nx.descendants(self.graph, term_id)) | {term_id}
            self._ancestors[term_id] = found
        return found

    def descendants_inclusive(self, term_id: TermId) -> frozenset[TermId]:
        found = self._descendants.get(term_id)
        if found is None:
            found = frozenset(nx.ancestors(self.graph, term_id)) | {term_id}
            self._descendants[term_id] = found
        return found

    def __len__(self) -> int:
        return self.graph.number_of_nodes()


def _as_term_id(value: TermId | str) -> TermId:
    return value if isinstance(value, TermId) else TermId.from_curie(value)
