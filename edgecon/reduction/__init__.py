from edgecon.reduction.variables import (
    translator_var_name, parent_var_name, level_var_name,
    translator_var, parent_var, level_var
)
from edgecon.reduction.context import ReductionContext, reduction_context, validate_preconditions
from edgecon.reduction.reduction import build_reduction
from edgecon.reduction.decoder import decode_model
from edgecon.reduction.solve import solve_edgecon

__all__ = [
    "translator_var_name", "parent_var_name", "level_var_name",
    "translator_var", "parent_var", "level_var",
    "ReductionContext", "reduction_context", "validate_preconditions",
    "build_reduction", "decode_model", "solve_edgecon"
]
