import logging
from typing import Dict

from edgecon.backends.base import FormulaBackend
from edgecon.core.errors import DecodingError
from edgecon.graph.edgecon_graph import Edge, EdgeConGraph
from edgecon.reduction.variables import translator_var
from edgecon.solution.types import SatResult, TranslatorAssignment

logger = logging.getLogger(__name__)

def decode_model(backend: FormulaBackend, model: SatResult, graph: EdgeConGraph) -> TranslatorAssignment:
    """
    Reads the translator placement out of a satisfying model, places the
    translators on `graph`, replacing any it already carries, and
    recomputes its component hierarchy.

    Raises DecodingError if the model gives an edge two indices or an
    index two edges; the graph is left untouched in that case.
    """
    num_translators = graph.num_components() - 1
    by_index: Dict[int, Edge] = {}
    by_edge: Dict[Edge, int] = {}

    for u, v in graph.edges():
        for i in range(num_translators):
            if not backend.value_in_model(model, translator_var(backend, u, v, i)):
                continue
            if (u, v) in by_edge:
                raise DecodingError(
                    f"Edge ({u}, {v}) carries translators {by_edge[(u, v)]} and {i}"
                )
            if i in by_index:
                raise DecodingError(
                    f"Translator {i} is placed on both {by_index[i]} and ({u}, {v})"
                )
            by_edge[(u, v)] = i
            by_index[i] = (u, v)

    graph.clear_translators()
    for i in sorted(by_index):
        u, v = by_index[i]
        logger.debug(f"Translator {i} on edge ({u}, {v})")
        graph.add_translator(u, v, i)

    hierarchy = graph.recompute_components()
    logger.info(f"Decoded {len(by_index)} translators, hierarchy depth {hierarchy.depth}")
    return TranslatorAssignment(by_index=by_index)
