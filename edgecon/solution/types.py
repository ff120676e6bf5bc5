from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Tuple

from edgecon.graph.edgecon_graph import ComponentHierarchy, Edge

class SatStatus(str, Enum):
    SAT = "SAT"
    UNSAT = "UNSAT"
    UNKNOWN = "UNKNOWN"

@dataclass
class SatResult:
    """
    Raw result from a solving backend.
    """
    status: SatStatus
    # var_name -> bool over the variables declared on the backend
    model: Optional[Dict[str, bool]] = None
    stats: Dict[str, Any] = field(default_factory=dict)
    time_taken: float = 0.0

    @property
    def is_sat(self) -> bool:
        return self.status == SatStatus.SAT

@dataclass
class TranslatorAssignment:
    """Translator index -> edge, as decoded from a model."""
    by_index: Dict[int, Edge] = field(default_factory=dict)

    @property
    def by_edge(self) -> Dict[Edge, int]:
        return {edge: i for i, edge in self.by_index.items()}

    @property
    def edges(self) -> List[Edge]:
        return [self.by_index[i] for i in sorted(self.by_index)]

    def __len__(self) -> int:
        return len(self.by_index)

@dataclass
class EdgeConSolution:
    """
    Domain-level interpretation of a solved reduction.
    """
    status: SatStatus
    k: int
    translators: Optional[TranslatorAssignment] = None
    hierarchy: Optional[ComponentHierarchy] = None
    witness_valid: Optional[bool] = None
    raw_result: Optional[SatResult] = None

    @property
    def depth_exceeds_k(self) -> Optional[bool]:
        if self.status == SatStatus.UNKNOWN:
            return None
        return self.status == SatStatus.SAT

    def serialize(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "k": self.k,
            "translators": [list(e) for e in self.translators.edges] if self.translators else None,
            "levels": dict(self.hierarchy.level) if self.hierarchy else None,
            "witness_valid": self.witness_valid
        }
