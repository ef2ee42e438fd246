"""Custom exception hierarchy for metapath."""


class MetapathError(Exception):
    """Base exception for all reportable metapath errors."""
    pass


class MetaReadError(MetapathError):
    """Raised when a metadata file cannot be read from disk."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class MetaParseError(MetapathError):
    """Raised when metadata text cannot be interpreted."""
    pass


class InvariantViolation(AssertionError):
    """
    Raised when the component classifier breaks its contract with the normalizer.

    This signals a programming error, not bad input, so it is not a
    MetapathError and callers are not expected to handle it.
    """
    pass
