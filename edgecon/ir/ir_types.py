import re
from typing import Annotated, Any, List, Literal, Union
from pydantic import BaseModel, Field, field_validator

# Longest variable name accepted by the IR
MAX_VAR_NAME_LENGTH = 64

_NAME_RE = re.compile(r"^[a-zA-Z0-9_\[\](),]+$")

# --- VarRef ---

class VarRef(BaseModel):
    """Reference to a named variable with strict validation."""
    name: str

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("Variable name cannot be empty")
        if len(v) > MAX_VAR_NAME_LENGTH:
            raise ValueError(f"Variable name too long (max {MAX_VAR_NAME_LENGTH})")
        if not _NAME_RE.match(v):
            raise ValueError("Variable name must use alphanumerics, underscore, brackets, parentheses or commas")
        return v

    def __hash__(self):
        return hash(self.name)

    def __eq__(self, other):
        if not isinstance(other, VarRef):
            return False
        return self.name == other.name

# --- BoolExpr ---

class BoolExprBase(BaseModel):
    pass

class Const(BoolExprBase):
    kind: Literal["const"] = "const"
    value: bool

class Lit(BoolExprBase):
    kind: Literal["lit"] = "lit"
    var: VarRef
    neg: bool = False

class Not(BoolExprBase):
    kind: Literal["not"] = "not"
    term: "BoolExpr"

class And(BoolExprBase):
    kind: Literal["and"] = "and"
    terms: List["BoolExpr"]

    @field_validator('terms')
    @classmethod
    def validate_len(cls, v: List[Any]) -> List[Any]:
        if len(v) < 2:
            raise ValueError("And requires at least 2 terms")
        return v

class Or(BoolExprBase):
    kind: Literal["or"] = "or"
    terms: List["BoolExpr"]

    @field_validator('terms')
    @classmethod
    def validate_len(cls, v: List[Any]) -> List[Any]:
        if len(v) < 2:
            raise ValueError("Or requires at least 2 terms")
        return v

class Imp(BoolExprBase):
    kind: Literal["imp"] = "imp"
    a: "BoolExpr"
    b: "BoolExpr"

BoolExpr = Annotated[
    Union[Const, Lit, Not, And, Or, Imp],
    Field(discriminator="kind")
]

# Required for recursive models in Pydantic v2
Not.model_rebuild()
And.model_rebuild()
Or.model_rebuild()
Imp.model_rebuild()

def collect_vars(expr: BoolExpr) -> List[str]:
    """Returns the variable names of an expression in first-occurrence order."""
    seen = {}
    stack = [expr]
    while stack:
        e = stack.pop()
        if isinstance(e, Lit):
            seen.setdefault(e.var.name, None)
        elif isinstance(e, Not):
            stack.append(e.term)
        elif isinstance(e, (And, Or)):
            stack.extend(reversed(e.terms))
        elif isinstance(e, Imp):
            stack.extend([e.b, e.a])
    return list(seen)
