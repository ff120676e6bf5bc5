from edgecon.backends.base import FormulaBackend
from edgecon.backends.pysat_backend import PySatBackend
from edgecon.backends.z3_backend import Z3Backend
from edgecon.backends.registry import BackendRegistry, registry, create_backend

__all__ = [
    "FormulaBackend", "PySatBackend", "Z3Backend",
    "BackendRegistry", "registry", "create_backend"
]
