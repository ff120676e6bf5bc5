from typing import Mapping
from edgecon.ir.ir_types import BoolExpr, Const, Lit, Not, And, Or, Imp

def evaluate(expr: BoolExpr, assignment: Mapping[str, bool]) -> bool:
    """Brute force evaluation of a BoolExpr. Unassigned variables are false."""
    if isinstance(expr, Const):
        return expr.value
    if isinstance(expr, Lit):
        val = bool(assignment.get(expr.var.name, False))
        return not val if expr.neg else val
    if isinstance(expr, Not):
        return not evaluate(expr.term, assignment)
    if isinstance(expr, And):
        return all(evaluate(t, assignment) for t in expr.terms)
    if isinstance(expr, Or):
        return any(evaluate(t, assignment) for t in expr.terms)
    if isinstance(expr, Imp):
        return (not evaluate(expr.a, assignment)) or evaluate(expr.b, assignment)
    raise ValueError(f"Unknown expr: {type(expr)}")
