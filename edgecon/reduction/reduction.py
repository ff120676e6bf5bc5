import logging
from typing import Any

from edgecon.backends.base import FormulaBackend
from edgecon.core.errors import ResourceExhaustedError
from edgecon.graph.edgecon_graph import EdgeConGraph
from edgecon.reduction.context import reduction_context
from edgecon.reduction.phi import build_phi_2, build_phi_3, build_phi_4, build_phi_5, build_phi_8

logger = logging.getLogger(__name__)

def build_reduction(graph: EdgeConGraph, k: int, backend: FormulaBackend) -> Any:
    """
    Builds the formula phi_2 /\\ phi_3 /\\ phi_4 /\\ phi_5 /\\ phi_8 on
    `backend`. It is satisfiable iff translators can be placed so that the
    component tree of `graph` is deeper than `k`.

    Raises PreconditionError on malformed input, before any variable is
    declared, and ResourceExhaustedError when memory runs out.
    """
    with reduction_context(graph, k, backend) as ctx:
        try:
            formula = backend.conjoin([
                build_phi_2(ctx),
                build_phi_3(ctx),
                build_phi_4(ctx),
                build_phi_5(ctx),
                build_phi_8(ctx),
            ])
        except MemoryError as e:
            raise ResourceExhaustedError(
                f"Out of memory building the reduction (n={ctx.num_vertices}, C_H={ctx.num_components})"
            ) from e
    logger.info(f"Reduction built on {backend.name} backend with {backend.num_declared} variables")
    return formula
