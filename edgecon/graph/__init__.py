from edgecon.graph.edgecon_graph import (
    EdgeConGraph, ComponentHierarchy, Edge, canonical_edge, homogeneous_membership
)
from edgecon.graph.generators import path_graph, star_graph

__all__ = [
    "EdgeConGraph", "ComponentHierarchy", "Edge", "canonical_edge",
    "homogeneous_membership", "path_graph", "star_graph"
]
