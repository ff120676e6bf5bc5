import logging
from typing import Optional

from edgecon.backends.base import FormulaBackend
from edgecon.backends.registry import create_backend
from edgecon.core.config import EdgeConConfig
from edgecon.graph.edgecon_graph import EdgeConGraph
from edgecon.reduction.decoder import decode_model
from edgecon.reduction.reduction import build_reduction
from edgecon.solution.types import EdgeConSolution
from edgecon.verify.witness import check_witness, check_translator_assignment

logger = logging.getLogger(__name__)

def solve_edgecon(graph: EdgeConGraph,
                  k: int,
                  backend: Optional[FormulaBackend] = None,
                  config: Optional[EdgeConConfig] = None) -> EdgeConSolution:
    """
    Builds the reduction for (`graph`, `k`), solves it and, when it is
    satisfiable, decodes the translators onto `graph`.

    A fresh backend is created from `config` unless one is given; a given
    backend must not have been used for another reduction.
    """
    if backend is None:
        backend = create_backend(config)
    config = config or backend.config

    formula = build_reduction(graph, k, backend)
    result = backend.solve(formula)
    logger.info(f"Solver returned {result.status.value} in {result.time_taken:.3f}s")

    solution = EdgeConSolution(status=result.status, k=k, raw_result=result)
    if not result.is_sat:
        return solution

    if config.check_witness:
        report = check_witness(backend, formula, result)
        solution.witness_valid = report.passed
        if not report.passed:
            logger.warning(f"Witness check failed: {report.failures}")

    solution.translators = decode_model(backend, result, graph)
    solution.hierarchy = graph.hierarchy

    if config.check_witness:
        report = check_translator_assignment(solution.translators, graph)
        solution.witness_valid = bool(solution.witness_valid) and report.passed
        if not report.passed:
            logger.warning(f"Translator assignment check failed: {report.failures}")

    return solution
