import logging
import time
from typing import List, Mapping, Optional

import z3

from edgecon.backends.base import FormulaBackend
from edgecon.core.config import EdgeConConfig
from edgecon.solution.types import SatResult, SatStatus

logger = logging.getLogger(__name__)

class Z3Backend(FormulaBackend):
    """Builds formulas as Z3 Boolean terms and solves them with a Z3 solver."""

    def __init__(self, config: Optional[EdgeConConfig] = None):
        super().__init__(config)
        self.ctx = z3.Context()

    @property
    def name(self) -> str:
        return "z3"

    def _make_var(self, name: str) -> z3.BoolRef:
        return z3.Bool(name, ctx=self.ctx)

    def var_name(self, var: z3.BoolRef) -> str:
        return var.decl().name()

    def negate(self, formula: z3.BoolRef) -> z3.BoolRef:
        return z3.Not(formula, ctx=self.ctx)

    def literal_true(self) -> z3.BoolRef:
        return z3.BoolVal(True, ctx=self.ctx)

    def literal_false(self) -> z3.BoolRef:
        return z3.BoolVal(False, ctx=self.ctx)

    def _conjoin(self, terms: List[z3.BoolRef]) -> z3.BoolRef:
        return z3.And(terms)

    def _disjoin(self, terms: List[z3.BoolRef]) -> z3.BoolRef:
        return z3.Or(terms)

    def solve(self, formula: z3.BoolRef) -> SatResult:
        start_time = time.time()
        solver = z3.Solver(ctx=self.ctx)
        solver.set("timeout", int(self.config.seconds_max * 1000))
        solver.add(formula)

        res = solver.check()
        stats = {"assertions": len(solver.assertions()), "named_vars": len(self._vars)}
        if res == z3.sat:
            m = solver.model()
            # model_completion gives unconstrained variables a value
            model = {
                name: z3.is_true(m.eval(var, model_completion=True))
                for name, var in self._vars.items()
            }
            return SatResult(status=SatStatus.SAT, model=model, stats=stats, time_taken=time.time() - start_time)
        if res == z3.unsat:
            return SatResult(status=SatStatus.UNSAT, stats=stats, time_taken=time.time() - start_time)

        stats["reason"] = solver.reason_unknown()
        logger.warning(f"Z3 returned unknown: {stats['reason']}")
        return SatResult(status=SatStatus.UNKNOWN, stats=stats, time_taken=time.time() - start_time)

    def evaluate(self, formula: z3.BoolRef, model: Mapping[str, bool]) -> bool:
        subs = [
            (var, z3.BoolVal(bool(model.get(name, False)), ctx=self.ctx))
            for name, var in self._vars.items()
        ]
        if subs:
            formula = z3.substitute(formula, *subs)
        return z3.is_true(z3.simplify(formula))
