import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Tuple

from edgecon.backends.base import FormulaBackend
from edgecon.core.errors import NameEncodingError, PreconditionError
from edgecon.graph.edgecon_graph import Edge, EdgeConGraph
from edgecon.reduction.variables import longest_name_length

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ReductionContext:
    """Problem parameters shared read-only by every constraint builder."""
    num_vertices: int      # n
    num_edges: int         # m
    num_components: int    # C_H
    num_translators: int   # N = C_H - 1
    k: int                 # cost bound
    edges: Tuple[Edge, ...]
    graph: EdgeConGraph
    backend: FormulaBackend

def validate_preconditions(graph: EdgeConGraph, k: int, backend: FormulaBackend):
    """
    Rejects inputs the reduction is not defined for. Raises
    PreconditionError (NameEncodingError for oversized identifiers).
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise PreconditionError(f"Cost bound k must be an integer, got {k!r}")
    if k < 0:
        raise PreconditionError(f"Cost bound k must be non-negative, got {k}")

    n = graph.num_vertices()
    if set(graph.graph.nodes) != set(range(n)):
        raise PreconditionError("Vertex ids must be contiguous integers 0..n-1")

    membership = graph.membership
    if len(membership) != n:
        raise PreconditionError(f"Partition covers {len(membership)} vertices, graph has {n}")

    c_h = graph.num_components()
    if c_h <= 0:
        raise PreconditionError(f"Number of components must be positive, got {c_h}")
    if set(membership) != set(range(c_h)):
        raise PreconditionError(
            f"Component ids must be contiguous integers 0..{c_h - 1}, got {sorted(set(membership))}"
        )

    longest = longest_name_length(n, c_h)
    if longest > backend.config.max_name_length:
        raise NameEncodingError(
            f"Variable names need {longest} characters, limit is {backend.config.max_name_length}"
        )

@contextmanager
def reduction_context(graph: EdgeConGraph, k: int, backend: FormulaBackend) -> Iterator[ReductionContext]:
    """
    Validates the input and yields the context of one reduction. The
    context does not outlive the `with` block, error paths included.
    """
    validate_preconditions(graph, k, backend)
    c_h = graph.num_components()
    ctx = ReductionContext(
        num_vertices=graph.num_vertices(),
        num_edges=graph.num_edges(),
        num_components=c_h,
        num_translators=c_h - 1,
        k=k,
        edges=tuple(graph.edges()),
        graph=graph,
        backend=backend,
    )
    logger.info(
        f"Reduction context: n={ctx.num_vertices} m={ctx.num_edges} "
        f"C_H={ctx.num_components} N={ctx.num_translators} k={ctx.k}"
    )
    try:
        yield ctx
    finally:
        logger.debug("Reduction context released")
