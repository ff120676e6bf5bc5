class EdgeConError(Exception):
    """Base exception for all edgecon related errors."""
    pass

class ValidationError(EdgeConError):
    """Raised when graph or partition input fails validation."""
    pass

class PreconditionError(EdgeConError):
    """Raised when a reduction is requested on malformed input."""
    pass

class NameEncodingError(PreconditionError):
    """Raised when a variable name would exceed the allowed encoding length."""
    pass

class ResourceExhaustedError(EdgeConError):
    """Raised when building the formula runs out of memory."""
    pass

class DecodingError(EdgeConError):
    """Raised when a solver model is internally inconsistent."""
    pass

class SolverError(EdgeConError):
    """Raised when the SAT backend fails to produce a result."""
    pass
