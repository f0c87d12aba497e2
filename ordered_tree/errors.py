class InvalidKeyError(TypeError):
    """Raised when a key is None or cannot be ordered against the stored keys."""


class InvariantViolation(AssertionError):
    """Raised when a tree's structural invariants do not hold."""
