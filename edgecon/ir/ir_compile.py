from typing import Dict, List, Optional, Tuple
from edgecon.core.vars import VarManager
from edgecon.cnf.cnf_types import CNFEncoding
from edgecon.ir.ir_types import BoolExpr, Const, Lit, Not, And, Or, Imp

class CompilationContext:
    def __init__(self, var_manager: VarManager):
        self.var_manager = var_manager
        self.clauses: CNFEncoding = []
        self._true_var: Optional[int] = None

    def var(self, name: str) -> int:
        return self.var_manager.declare(name)

    def allocate_aux(self) -> int:
        return self.var_manager.fresh("tseitin")

    def add_clause(self, clause: List[int]):
        self.clauses.append(clause)

    def constant(self, value: bool) -> int:
        """Literal fixed to `value`, backed by a single forced auxiliary."""
        if self._true_var is None:
            self._true_var = self.allocate_aux()
            self.add_clause([self._true_var])
        return self._true_var if value else -self._true_var

def tseitin(expr: BoolExpr, ctx: CompilationContext) -> int:
    """Tseitin transformation: returns the literal representing the expression."""
    if isinstance(expr, Const):
        return ctx.constant(expr.value)

    if isinstance(expr, Lit):
        var_id = ctx.var(expr.var.name)
        return -var_id if expr.neg else var_id

    if isinstance(expr, Not):
        return -tseitin(expr.term, ctx)

    if isinstance(expr, Imp):
        return tseitin(Or(terms=[Not(term=expr.a), expr.b]), ctx)

    if isinstance(expr, And):
        inputs = [tseitin(t, ctx) for t in expr.terms]
        out = ctx.allocate_aux()
        # out <-> (i1 /\ i2 /\ ...)
        for i in inputs:
            ctx.add_clause([-out, i])
        ctx.add_clause([-i for i in inputs] + [out])
        return out

    if isinstance(expr, Or):
        inputs = [tseitin(t, ctx) for t in expr.terms]
        out = ctx.allocate_aux()
        # out <-> (i1 \/ i2 \/ ...)
        for i in inputs:
            ctx.add_clause([-i, out])
        ctx.add_clause([-out] + inputs)
        return out

    raise ValueError(f"Unsupported expression for Tseitin: {type(expr)}")

def assert_root(expr: BoolExpr, ctx: CompilationContext):
    """
    Asserts `expr` at the top level. Conjunctions are split and
    disjunctions become a single clause over their Tseitin literals,
    so only nested connectives cost auxiliary variables.
    """
    if isinstance(expr, And):
        for t in expr.terms:
            assert_root(t, ctx)
        return

    if isinstance(expr, Const):
        if not expr.value:
            ctx.add_clause([ctx.constant(False)])
        return

    if isinstance(expr, Imp):
        assert_root(Or(terms=[Not(term=expr.a), expr.b]), ctx)
        return

    if isinstance(expr, Or):
        ctx.add_clause([tseitin(t, ctx) for t in expr.terms])
        return

    ctx.add_clause([tseitin(expr, ctx)])

def compile_ir(expr: BoolExpr, var_manager: Optional[VarManager] = None) -> Tuple[CNFEncoding, Dict[str, int]]:
    """Compiles an IR expression to CNF. Returns (clauses, varmap)."""
    ctx = CompilationContext(var_manager if var_manager is not None else VarManager())
    assert_root(expr, ctx)
    return ctx.clauses, ctx.var_manager.get_var_map()
