import logging
import time
from threading import Timer
from typing import List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError
from pysat.solvers import Solver

from edgecon.backends.base import FormulaBackend
from edgecon.cnf.cnf_types import CnfDocument
from edgecon.core.config import EdgeConConfig
from edgecon.core.errors import NameEncodingError, SolverError
from edgecon.core.vars import VarManager
from edgecon.ir.ir_compile import compile_ir
from edgecon.ir.ir_eval import evaluate
from edgecon.ir.ir_types import BoolExpr, Const, Lit, Not, And, Or, VarRef
from edgecon.solution.types import SatResult, SatStatus

logger = logging.getLogger(__name__)

class PySatBackend(FormulaBackend):
    """
    Builds formulas in the edgecon IR, compiles them to CNF with the
    Tseitin transformation and solves them with a PySAT solver.
    """

    def __init__(self, config: Optional[EdgeConConfig] = None):
        super().__init__(config)
        self.last_document: Optional[CnfDocument] = None

    @property
    def name(self) -> str:
        return "pysat"

    def _make_var(self, name: str) -> Lit:
        try:
            return Lit(var=VarRef(name=name))
        except PydanticValidationError as e:
            raise NameEncodingError(f"Invalid variable name '{name}': {e}")

    def var_name(self, var: Lit) -> str:
        return var.var.name

    def negate(self, formula: BoolExpr) -> BoolExpr:
        if isinstance(formula, Lit):
            return Lit(var=formula.var, neg=not formula.neg)
        if isinstance(formula, Const):
            return Const(value=not formula.value)
        return Not(term=formula)

    def literal_true(self) -> Const:
        return Const(value=True)

    def literal_false(self) -> Const:
        return Const(value=False)

    def _conjoin(self, terms: List[BoolExpr]) -> And:
        return And(terms=terms)

    def _disjoin(self, terms: List[BoolExpr]) -> Or:
        return Or(terms=terms)

    def compile(self, formula: BoolExpr) -> tuple:
        """Compiles `formula` to a CnfDocument. Returns (document, var_manager)."""
        vm = VarManager()
        # Declared variables first so their ids follow declaration order
        for name in self._vars:
            vm.declare(name)
        clauses, _ = compile_ir(formula, vm)
        return CnfDocument.from_clauses(clauses, vm.max_id), vm

    def solve(self, formula: BoolExpr) -> SatResult:
        start_time = time.time()
        doc, vm = self.compile(formula)
        self.last_document = doc
        logger.debug(f"Solving {len(doc.clauses)} clauses over {doc.num_vars} variables with {self.config.solver_name}")

        try:
            with Solver(name=self.config.solver_name, bootstrap_with=doc.clauses) as solver:
                timer = Timer(self.config.seconds_max, solver.interrupt)
                timer.start()
                try:
                    outcome = solver.solve_limited(expect_interrupt=True)
                except NotImplementedError:
                    # e.g. lingeling has no interruptible solve; run without the time limit
                    logger.warning(f"{self.config.solver_name} does not support limited solving, seconds_max is ignored")
                    outcome = solver.solve()
                finally:
                    timer.cancel()
                raw_model = solver.get_model() if outcome else None
        except Exception as e:
            raise SolverError(f"Solver {self.config.solver_name} failed: {e}")

        stats = {"clauses": len(doc.clauses), "vars": doc.num_vars, "named_vars": len(self._vars)}
        if outcome is None:
            return SatResult(status=SatStatus.UNKNOWN, stats=stats, time_taken=time.time() - start_time)
        if not outcome:
            return SatResult(status=SatStatus.UNSAT, stats=stats, time_taken=time.time() - start_time)

        positive = {abs(lit): lit > 0 for lit in raw_model or []}
        model = {name: positive.get(vm.declare(name), False) for name in self._vars}
        return SatResult(status=SatStatus.SAT, model=model, stats=stats, time_taken=time.time() - start_time)

    def evaluate(self, formula: BoolExpr, model: Mapping[str, bool]) -> bool:
        return evaluate(formula, model)
