"""
Small EdgeCon instances.

    path_graph  -- vertices 0..n-1 on a line
    star_graph  -- one center joined to every leaf
"""
from typing import Sequence

from edgecon.graph.edgecon_graph import EdgeConGraph

def path_graph(types: Sequence[int]) -> EdgeConGraph:
    """Path 0 - 1 - ... - n-1 with the given vertex types."""
    n = len(types)
    edges = [(i, i + 1) for i in range(n - 1)]
    return EdgeConGraph.from_types(n, edges, types)

def star_graph(center_type: int, leaf_types: Sequence[int]) -> EdgeConGraph:
    """Star with center vertex 0 and leaves 1..len(leaf_types)."""
    n = len(leaf_types) + 1
    edges = [(0, i) for i in range(1, n)]
    return EdgeConGraph.from_types(n, edges, [center_type] + list(leaf_types))
