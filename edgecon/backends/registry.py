from typing import Dict, List, Optional, Type

from edgecon.backends.base import FormulaBackend
from edgecon.backends.pysat_backend import PySatBackend
from edgecon.backends.z3_backend import Z3Backend
from edgecon.core.config import EdgeConConfig
from edgecon.core.errors import ValidationError

class BackendRegistry:
    """
    Registry of formula backends. Backends cache their declared variables,
    so `create` hands out a fresh instance on every call.
    """
    def __init__(self):
        self._backends: Dict[str, Type[FormulaBackend]] = {}
        self.register("pysat", PySatBackend)
        self.register("z3", Z3Backend)

    def register(self, name: str, backend_cls: Type[FormulaBackend]):
        self._backends[name] = backend_cls

    def create(self, name: str, config: Optional[EdgeConConfig] = None) -> FormulaBackend:
        if name not in self._backends:
            raise ValidationError(f"Backend '{name}' not found.")
        return self._backends[name](config)

    def list_backends(self) -> List[str]:
        return list(self._backends.keys())

registry = BackendRegistry()

def create_backend(config: Optional[EdgeConConfig] = None) -> FormulaBackend:
    """Backend named by `config.backend` (default configuration when omitted)."""
    config = config or EdgeConConfig()
    return registry.create(config.backend, config)
