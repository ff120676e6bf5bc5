import hashlib
from typing import List, Tuple
from pydantic import BaseModel, Field, field_validator
from pysat.formula import CNF

CNFEncoding = List[List[int]]

def canonicalize_clause(clause: List[int]) -> Tuple[int, ...]:
    """Sorts literals in a clause by absolute value, then sign."""
    return tuple(sorted(clause, key=lambda x: (abs(x), x)))

def canonicalize_cnf(clauses: List[List[int]]) -> List[Tuple[int, ...]]:
    """Sorts clauses lexicographically after canonicalizing each clause."""
    return sorted(canonicalize_clause(c) for c in clauses)

class CnfDocument(BaseModel):
    """CNF document model with validation."""
    num_vars: int = Field(ge=0)
    clauses: List[List[int]]

    @field_validator('clauses')
    @classmethod
    def validate_clauses(cls, v: List[List[int]], info) -> List[List[int]]:
        num_vars = info.data.get('num_vars')
        for i, clause in enumerate(v):
            if not clause:
                raise ValueError(f"Clause {i} is empty")
            for lit in clause:
                if lit == 0:
                    raise ValueError(f"Literal 0 is invalid in clause {i}")
                if num_vars is not None and abs(lit) > num_vars:
                    raise ValueError(f"Literal {lit} exceeds num_vars {num_vars} in clause {i}")
        return v

    @classmethod
    def from_clauses(cls, clauses: CNFEncoding, num_vars: int = 0) -> 'CnfDocument':
        """Builds a document, widening num_vars to cover every literal."""
        if clauses:
            num_vars = max(num_vars, max(abs(lit) for c in clauses for lit in c))
        return cls(num_vars=num_vars, clauses=clauses)

    def to_pysat(self) -> CNF:
        """Converts to a PySAT CNF formula."""
        formula = CNF()
        formula.nv = self.num_vars
        formula.clauses = [list(c) for c in self.clauses]
        return formula

    def content_hash(self) -> str:
        """Computes a stable SHA256 hash of the canonicalized CNF content."""
        canonical = canonicalize_cnf(self.clauses)
        content = f"p cnf {self.num_vars} {len(canonical)}\n"
        content += "\n".join(" ".join(map(str, c)) + " 0" for c in canonical)
        return hashlib.sha256(content.encode('utf-8')).hexdigest()
