"""
Variable naming scheme for the EdgeCon reduction.

Three families of Boolean variables, told apart by their prefix:

    x_[(a,b),i]   edge (a, b), a < b, carries translator i
    p_[c,p]       the parent of component c is component p
    l_[c,h]       component c sits at level h of the tree

Names are the identity of a variable: the backend hands back the same
variable for the same name, so building a name twice never duplicates it.
"""
from typing import Any

from edgecon.backends.base import FormulaBackend
from edgecon.core.errors import PreconditionError

def _check_index(value: int, what: str):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise PreconditionError(f"{what} must be a non-negative integer, got {value!r}")

def translator_var_name(u: int, v: int, i: int) -> str:
    _check_index(u, "Vertex id")
    _check_index(v, "Vertex id")
    _check_index(i, "Translator index")
    if u == v:
        raise PreconditionError(f"Translator variable on self-loop ({u}, {v})")
    a, b = (u, v) if u < v else (v, u)
    return f"x_[({a},{b}),{i}]"

def parent_var_name(child: int, parent: int) -> str:
    _check_index(child, "Component id")
    _check_index(parent, "Component id")
    return f"p_[{child},{parent}]"

def level_var_name(component: int, level: int) -> str:
    _check_index(component, "Component id")
    _check_index(level, "Level")
    return f"l_[{component},{level}]"

def translator_var(backend: FormulaBackend, u: int, v: int, i: int) -> Any:
    return backend.declare_bool_var(translator_var_name(u, v, i))

def parent_var(backend: FormulaBackend, child: int, parent: int) -> Any:
    return backend.declare_bool_var(parent_var_name(child, parent))

def level_var(backend: FormulaBackend, component: int, level: int) -> Any:
    return backend.declare_bool_var(level_var_name(component, level))

def longest_name_length(num_vertices: int, num_components: int) -> int:
    """Length of the longest variable name a reduction of this size declares."""
    top_vertex = max(num_vertices - 1, 1)
    top_component = max(num_components - 1, 0)
    top_index = max(num_components - 2, 0)
    return max(
        len(translator_var_name(top_vertex - 1, top_vertex, top_index)),
        len(parent_var_name(top_component, top_component)),
        len(level_var_name(top_component, top_index)),
    )
