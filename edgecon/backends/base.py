import abc
from typing import Any, Iterable, List, Mapping, Optional

from edgecon.core.config import EdgeConConfig
from edgecon.core.errors import NameEncodingError, SolverError
from edgecon.solution.types import SatResult

class FormulaBackend(abc.ABC):
    """
    Boolean formula and solving capability consumed by the reduction.

    Variables are declared by name and cached: declaring the same name
    twice on one backend returns the same handle. Formulas built by one
    backend are only meaningful to that backend.
    """

    def __init__(self, config: Optional[EdgeConConfig] = None):
        self.config = config or EdgeConConfig()
        self._vars: dict = {}

    @property
    @abc.abstractmethod
    def name(self) -> str:
        pass

    # --- Variables ---

    def declare_bool_var(self, name: str) -> Any:
        """Returns the variable called `name`, creating it on first use."""
        var = self._vars.get(name)
        if var is None:
            if len(name) > self.config.max_name_length:
                raise NameEncodingError(
                    f"Variable name '{name}' exceeds {self.config.max_name_length} characters"
                )
            var = self._make_var(name)
            self._vars[name] = var
        return var

    @property
    def num_declared(self) -> int:
        return len(self._vars)

    def declared_names(self) -> List[str]:
        return list(self._vars)

    @abc.abstractmethod
    def _make_var(self, name: str) -> Any:
        pass

    @abc.abstractmethod
    def var_name(self, var: Any) -> str:
        pass

    # --- Combinators ---

    @abc.abstractmethod
    def negate(self, formula: Any) -> Any:
        pass

    @abc.abstractmethod
    def literal_true(self) -> Any:
        pass

    @abc.abstractmethod
    def literal_false(self) -> Any:
        pass

    def conjoin(self, formulas: Iterable[Any]) -> Any:
        """Conjunction of `formulas`; true when empty."""
        terms = list(formulas)
        if not terms:
            return self.literal_true()
        if len(terms) == 1:
            return terms[0]
        return self._conjoin(terms)

    def disjoin(self, formulas: Iterable[Any]) -> Any:
        """Disjunction of `formulas`; false when empty."""
        terms = list(formulas)
        if not terms:
            return self.literal_false()
        if len(terms) == 1:
            return terms[0]
        return self._disjoin(terms)

    @abc.abstractmethod
    def _conjoin(self, terms: List[Any]) -> Any:
        pass

    @abc.abstractmethod
    def _disjoin(self, terms: List[Any]) -> Any:
        pass

    # --- Solving ---

    @abc.abstractmethod
    def solve(self, formula: Any) -> SatResult:
        pass

    @abc.abstractmethod
    def evaluate(self, formula: Any, model: Mapping[str, bool]) -> bool:
        """Truth value of `formula` under a name -> bool model."""
        pass

    def value_in_model(self, result: SatResult, var: Any) -> bool:
        if result.model is None:
            raise SolverError(f"No model available (status {result.status.value})")
        return result.model.get(self.var_name(var), False)
