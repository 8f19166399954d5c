"""Exact distinct counter.

Keeps every value it sees in a set, so memory grows with the stream.
Useful as the "right answer" in tests and as a sanity baseline next to
a real sketch on small catalogs.
"""
from __future__ import annotations

from hllcheck.domain.types import Cardinality, EncodedValue
from hllcheck.estimators.base import Estimator


class ExactCounter(Estimator):
    """Counts distinct values exactly with a set."""

    __slots__ = ("_seen",)

    def __init__(self) -> None:
        self._seen: set[bytes] = set()

    def observe(self, value: EncodedValue) -> None:
        self._seen.add(bytes(value))

    def estimate(self) -> Cardinality:
        return len(self._seen)
