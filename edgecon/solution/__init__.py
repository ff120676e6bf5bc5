from edgecon.solution.types import SatStatus, SatResult, TranslatorAssignment, EdgeConSolution

__all__ = ["SatStatus", "SatResult", "TranslatorAssignment", "EdgeConSolution"]
