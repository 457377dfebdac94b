"""Errors raised by snapshot aggregation use cases."""


class SnapshotEngineError(Exception):
    """Base class for failures surfaced to dashboard callers."""


class ValidationError(SnapshotEngineError, ValueError):
    """Raised when request filters are missing or invalid."""


class UpstreamFetchError(SnapshotEngineError, RuntimeError):
    """Raised when the snapshot store fails or returns a malformed payload."""


__all__ = ["SnapshotEngineError", "ValidationError", "UpstreamFetchError"]
