from edgecon.ir.ir_types import (
    VarRef, Const, Lit, Not, And, Or, Imp, BoolExpr, MAX_VAR_NAME_LENGTH, collect_vars
)
from edgecon.ir.ir_eval import evaluate
from edgecon.ir.ir_compile import compile_ir

__all__ = [
    "VarRef", "Const", "Lit", "Not", "And", "Or", "Imp", "BoolExpr",
    "MAX_VAR_NAME_LENGTH", "collect_vars", "evaluate", "compile_ir"
]
