"""Exceptions raised by the comparison harness.

None of these are recoverable. They propagate straight to the caller,
which either fixes its input or gives up on the run.
"""
from __future__ import annotations


class HllCheckError(Exception):
    """Base class for every error raised by hllcheck."""


class InvalidParameter(HllCheckError, ValueError):
    """Raised when a stream is configured with an out-of-range parameter."""

    def __init__(self, name: str, value: object, expected: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"invalid {name} {value!r}: expected {expected}")


class NotReady(HllCheckError, RuntimeError):
    """Raised when the true cardinality is read before the stream is drained."""

    def __init__(self, drawn: int, size: int) -> None:
        self.drawn = drawn
        self.size = size
        super().__init__(
            f"cardinality not available until all values have been "
            f"generated ({drawn}/{size} drawn)"
        )


class ConfigurationError(HllCheckError, ValueError):
    """Raised when a comparison run is started without a primary estimator."""
