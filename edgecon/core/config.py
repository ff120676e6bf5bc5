import json
import os
from typing import Optional

from pydantic import BaseModel, Field

from edgecon.core.errors import ValidationError

class EdgeConConfig(BaseModel):
    """Configuration for building and solving EdgeCon reductions."""
    backend: str = "pysat"
    solver_name: str = "glucose4" # pysat solver name, ignored by the z3 backend
    max_name_length: int = Field(default=64, gt=0, le=64)
    check_witness: bool = True
    seconds_max: float = Field(default=30.0, gt=0)

    @staticmethod
    def from_env_or_file(path: Optional[str] = None) -> 'EdgeConConfig':
        # 1. Config file, explicit path first
        config_path = path or os.environ.get("EDGECON_CONFIG_PATH")
        data = {}
        if config_path and os.path.exists(config_path):
            try:
                with open(config_path, "r") as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValidationError(f"Invalid config file {config_path}: {e}")

        # 2. Env vars override the file
        env_backend = os.environ.get("EDGECON_BACKEND")
        if env_backend:
            data["backend"] = env_backend
        env_solver = os.environ.get("EDGECON_SOLVER")
        if env_solver:
            data["solver_name"] = env_solver

        try:
            return EdgeConConfig.model_validate(data)
        except Exception as e:
            raise ValidationError(f"Invalid configuration: {e}")
