from typing import Any, List

from pydantic import BaseModel, Field

from edgecon.backends.base import FormulaBackend
from edgecon.graph.edgecon_graph import EdgeConGraph
from edgecon.solution.types import SatResult, TranslatorAssignment

class WitnessReport(BaseModel):
    """Result of checking a solver witness."""
    outcome: str = "UNKNOWN" # PASSED, FAILED, UNKNOWN
    checks_run: List[str] = Field(default_factory=list)
    failures: List[str] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.outcome == "PASSED"

    def finish(self) -> 'WitnessReport':
        self.outcome = "FAILED" if self.failures else "PASSED"
        return self

def check_witness(backend: FormulaBackend, formula: Any, result: SatResult) -> WitnessReport:
    """Re-evaluates `formula` under the model of `result`."""
    report = WitnessReport()
    report.checks_run.append("model_present")
    if result.model is None:
        report.failures.append(f"No model for status {result.status.value}")
        return report.finish()

    report.checks_run.append("formula_true")
    if not backend.evaluate(formula, result.model):
        report.failures.append("Formula evaluates to false under the returned model")
    return report.finish()

def check_translator_assignment(assignment: TranslatorAssignment, graph: EdgeConGraph) -> WitnessReport:
    """
    Checks a decoded placement: every translator sits on an existing edge,
    indices lie in 0..N-1 and no edge is used twice.
    """
    report = WitnessReport()
    num_translators = graph.num_components() - 1

    report.checks_run.append("edges_exist")
    for i, (u, v) in assignment.by_index.items():
        if not graph.is_edge(u, v):
            report.failures.append(f"Translator {i} placed on non-edge ({u}, {v})")

    report.checks_run.append("index_range")
    for i in assignment.by_index:
        if not 0 <= i < num_translators:
            report.failures.append(f"Translator index {i} outside 0..{num_translators - 1}")

    report.checks_run.append("distinct_edges")
    edges = list(assignment.by_index.values())
    if len(set(edges)) != len(edges):
        report.failures.append("An edge carries more than one translator")

    return report.finish()
