"""
edgecon: reduces the EdgeCon translator-placement problem to SAT.

A graph is partitioned into homogeneous components; translators placed
on edges join components into a tree rooted at component 0. The
reduction builds a Boolean formula that is satisfiable iff at most
C_H - 1 translators can be placed so that this tree is deeper than a
bound k, and decodes satisfying models back into translator placements.
"""
__version__ = "0.1.0"

from edgecon.core import EdgeConConfig, EdgeConError, PreconditionError, DecodingError
from edgecon.graph import EdgeConGraph, ComponentHierarchy
from edgecon.backends import FormulaBackend, PySatBackend, Z3Backend, create_backend
from edgecon.reduction import build_reduction, decode_model, solve_edgecon
from edgecon.solution import SatStatus, SatResult, TranslatorAssignment, EdgeConSolution

__all__ = [
    "EdgeConConfig", "EdgeConError", "PreconditionError", "DecodingError",
    "EdgeConGraph", "ComponentHierarchy",
    "FormulaBackend", "PySatBackend", "Z3Backend", "create_backend",
    "build_reduction", "decode_model", "solve_edgecon",
    "SatStatus", "SatResult", "TranslatorAssignment", "EdgeConSolution",
]
