import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from edgecon.core.errors import ValidationError

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]

def canonical_edge(u: int, v: int) -> Edge:
    """Orders an undirected edge with the smaller vertex first."""
    return (u, v) if u < v else (v, u)

@dataclass
class ComponentHierarchy:
    """
    Tree over homogeneous components induced by the translator edges,
    rooted at component 0. Components the translators do not reach from
    the root are listed in `unreachable` and carry no level.
    """
    parent: Dict[int, Optional[int]] = field(default_factory=dict)
    level: Dict[int, int] = field(default_factory=dict)
    unreachable: List[int] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return max(self.level.values(), default=0)

    @property
    def is_spanning(self) -> bool:
        return not self.unreachable

def homogeneous_membership(graph: nx.Graph, types: Sequence[int]) -> List[int]:
    """
    Splits vertices into homogeneous components: connected components of
    the subgraph keeping only edges whose endpoints share a type.
    Components are numbered by their smallest vertex, so the component
    holding vertex 0 is the root.
    """
    same_type = nx.Graph()
    same_type.add_nodes_from(graph.nodes)
    same_type.add_edges_from((u, v) for u, v in graph.edges if types[u] == types[v])

    components = sorted(nx.connected_components(same_type), key=min)
    membership = [0] * graph.number_of_nodes()
    for cid, comp in enumerate(components):
        for v in comp:
            membership[v] = cid
    return membership

def _build_graph(num_vertices: int, edges: Iterable[Sequence[int]]) -> nx.Graph:
    if num_vertices < 0:
        raise ValidationError(f"Vertex count must be non-negative, got {num_vertices}")
    g = nx.Graph()
    g.add_nodes_from(range(num_vertices))
    for edge in edges:
        if len(edge) != 2:
            raise ValidationError(f"Edge {edge} must have exactly two endpoints")
        u, v = edge
        if not (0 <= u < num_vertices and 0 <= v < num_vertices):
            raise ValidationError(f"Edge ({u}, {v}) references a vertex outside 0..{num_vertices - 1}")
        if u == v:
            raise ValidationError(f"Self-loop on vertex {u} is not allowed")
        g.add_edge(u, v)
    return g

class EdgeConGraph:
    """
    Graph partitioned into homogeneous components, together with the
    translator edges placed on it.
    """

    def __init__(self, graph: nx.Graph, membership: Sequence[int], types: Optional[Sequence[int]] = None):
        self._graph = graph
        self._membership = list(membership)
        self._types = list(types) if types is not None else None
        self._translators: Dict[Edge, Optional[int]] = {}
        self._hierarchy: Optional[ComponentHierarchy] = None

    @classmethod
    def from_types(cls, num_vertices: int, edges: Iterable[Sequence[int]], types: Sequence[int]) -> 'EdgeConGraph':
        """Builds the graph and derives its homogeneous components from vertex types."""
        g = _build_graph(num_vertices, edges)
        if len(types) != num_vertices:
            raise ValidationError(f"Expected {num_vertices} vertex types, got {len(types)}")
        nx.set_node_attributes(g, {v: t for v, t in enumerate(types)}, "type")
        return cls(g, homogeneous_membership(g, types), types)

    @classmethod
    def from_components(cls, num_vertices: int, edges: Iterable[Sequence[int]], membership: Sequence[int]) -> 'EdgeConGraph':
        """Builds the graph from an explicit vertex -> component assignment."""
        g = _build_graph(num_vertices, edges)
        if len(membership) != num_vertices:
            raise ValidationError(f"Expected {num_vertices} component ids, got {len(membership)}")
        used = set(membership)
        if used != set(range(len(used))):
            raise ValidationError(f"Component ids must be contiguous from 0, got {sorted(used)}")
        return cls(g, membership)

    # --- Graph queries ---

    @property
    def graph(self) -> nx.Graph:
        return self._graph

    def num_vertices(self) -> int:
        return self._graph.number_of_nodes()

    def num_edges(self) -> int:
        return self._graph.number_of_edges()

    def is_edge(self, u: int, v: int) -> bool:
        return self._graph.has_edge(u, v)

    def edges(self) -> List[Edge]:
        """All edges in canonical form, sorted."""
        return sorted(canonical_edge(u, v) for u, v in self._graph.edges)

    # --- Partition queries ---

    @property
    def membership(self) -> List[int]:
        return list(self._membership)

    def num_components(self) -> int:
        return len(set(self._membership))

    def component_of(self, v: int) -> int:
        return self._membership[v]

    def is_vertex_in_component(self, v: int, c: int) -> bool:
        return self._membership[v] == c

    def component_vertices(self, c: int) -> List[int]:
        return [v for v, cid in enumerate(self._membership) if cid == c]

    # --- Translators ---

    @property
    def translators(self) -> List[Edge]:
        return list(self._translators)

    @property
    def translator_indices(self) -> Dict[Edge, Optional[int]]:
        return dict(self._translators)

    def add_translator(self, u: int, v: int, index: Optional[int] = None):
        """Places a translator on edge (u, v), optionally tagged with its index."""
        if not self.is_edge(u, v):
            raise ValidationError(f"Cannot place a translator on non-edge ({u}, {v})")
        self._translators[canonical_edge(u, v)] = index

    def clear_translators(self):
        self._translators.clear()
        self._hierarchy = None

    # --- Hierarchy ---

    @property
    def hierarchy(self) -> Optional[ComponentHierarchy]:
        return self._hierarchy

    def recompute_components(self) -> ComponentHierarchy:
        """
        Recomputes the homogeneous components (from the vertex types when
        known) and the component hierarchy induced by the translators.
        """
        if self._types is not None:
            self._membership = homogeneous_membership(self._graph, self._types)

        num_components = self.num_components()
        comp_graph = nx.Graph()
        comp_graph.add_nodes_from(range(num_components))
        for u, v in self._translators:
            cu, cv = self._membership[u], self._membership[v]
            if cu != cv:
                comp_graph.add_edge(cu, cv)

        hierarchy = ComponentHierarchy()
        if num_components > 0:
            hierarchy.level = dict(nx.single_source_shortest_path_length(comp_graph, 0))
            hierarchy.parent = {0: None}
            hierarchy.parent.update(dict(nx.bfs_predecessors(comp_graph, 0)))
            hierarchy.unreachable = [c for c in range(num_components) if c not in hierarchy.level]

        logger.debug(
            f"Recomputed {num_components} components, depth {hierarchy.depth}, "
            f"{len(hierarchy.unreachable)} unreachable"
        )
        self._hierarchy = hierarchy
        return hierarchy

    def __repr__(self) -> str:
        return (
            f"EdgeConGraph(n={self.num_vertices()}, m={self.num_edges()}, "
            f"components={self.num_components()}, translators={len(self._translators)})"
        )
