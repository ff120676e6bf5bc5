from typing import Dict, Set

class VarManager:
    """
    Centralized manager for SAT variable allocation.
    Ensures deterministic ID assignment and keeps named variables apart
    from the auxiliary variables introduced by the Tseitin compiler.
    """
    def __init__(self):
        self._var_map: Dict[str, int] = {}
        self._id_to_name: Dict[int, str] = {}
        self._next_id: int = 1
        self._aux_vars: Set[int] = set()

    @property
    def max_id(self) -> int:
        return self._next_id - 1

    def declare(self, name: str) -> int:
        """
        Declare a named variable. Returns existing ID if already declared.
        """
        if name in self._var_map:
            return self._var_map[name]

        vid = self._next_id
        self._var_map[name] = vid
        self._id_to_name[vid] = name
        self._next_id += 1
        return vid

    def fresh(self, prefix: str = "aux") -> int:
        """
        Allocate a fresh auxiliary variable.
        """
        name = f"::{prefix}_{self._next_id}"
        vid = self._next_id
        self._var_map[name] = vid
        self._id_to_name[vid] = name
        self._aux_vars.add(vid)
        self._next_id += 1
        return vid

    def is_aux(self, vid: int) -> bool:
        return vid in self._aux_vars

    def get_var_map(self) -> Dict[str, int]:
        return self._var_map.copy()

