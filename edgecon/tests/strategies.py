from itertools import combinations
from hypothesis import strategies as st
from edgecon.graph import EdgeConGraph

@st.composite
def edgecon_graphs(draw, max_vertices=5, max_types=2):
    """Small typed graphs; homogeneous components follow from the types."""
    n = draw(st.integers(min_value=2, max_value=max_vertices))
    pairs = list(combinations(range(n), 2))
    edges = draw(st.lists(st.sampled_from(pairs), unique=True, max_size=len(pairs)))
    types = draw(st.lists(st.integers(min_value=0, max_value=max_types - 1), min_size=n, max_size=n))
    return EdgeConGraph.from_types(n, edges, types)
