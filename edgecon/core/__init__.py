"""
Core module for edgecon.
Provides error handling, logging, configuration and variable allocation.
"""
from edgecon.core.errors import (
    EdgeConError, ValidationError, PreconditionError, NameEncodingError,
    ResourceExhaustedError, DecodingError, SolverError
)
from edgecon.core.logging import get_logger
from edgecon.core.config import EdgeConConfig
from edgecon.core.vars import VarManager

__all__ = [
    "EdgeConError", "ValidationError", "PreconditionError", "NameEncodingError",
    "ResourceExhaustedError", "DecodingError", "SolverError",
    "get_logger", "EdgeConConfig", "VarManager"
]
