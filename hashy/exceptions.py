"""
Hashy Exceptions
================
Exception classes for hashing, verification and hash decoding.
"""

from typing import Optional


class HashyError(Exception):
    """Base class for all hashy errors."""
    pass


class InvalidHashFormat(HashyError, ValueError):
    """Raised when a hash string does not match the self-describing grammar."""
    pass


class UnsupportedAlgorithm(HashyError, LookupError):
    """Raised when no registered algorithm can serve the request."""
    
    def __init__(self, algorithm: Optional[str]):
        self.algorithm = algorithm
        super().__init__(f"Unsupported algorithm: {algorithm!r}")


class PrimitiveFailure(HashyError):
    """Raised when the underlying hash/verify primitive rejects its input."""
    
    def __init__(self, algorithm: str, original: BaseException):
        self.algorithm = algorithm
        self.original = original
        super().__init__(
            f"{algorithm} primitive failed: {type(original).__name__}: {original}"
        )


class AlgorithmRegistrationError(HashyError):
    """Raised when a descriptor claims a tag owned by another algorithm."""
    pass
