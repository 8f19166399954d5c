"""Synthetic value streams with a controlled duplication rate.

A stream of size n is a sequence of n unsigned integers. Each draw
either moves on to a brand-new value (probability 1 - p) or repeats the
previous one (probability p). New values are just a counter, so the
stream is fully described by three scalars (draws so far, current value,
distinct values so far) and a random source. Memory stays constant no
matter how large n gets, which matters because the catalog goes up to
half a billion draws.

The random source is passed in rather than created here. A comparison
run seeds one ``random.Random`` and hands it to every stream it builds,
so the whole run, not a single stream, is reproducible from the seed.
"""
from __future__ import annotations

import random
import struct

from hllcheck.domain.errors import InvalidParameter, NotReady
from hllcheck.domain.types import Cardinality, EncodedValue, StreamValue

_U64 = struct.Struct(">Q")


def encode_value(value: StreamValue) -> EncodedValue:
    """Pack a stream value as 8 big-endian bytes."""
    return _U64.pack(value)


class StreamGenerator:
    """Deterministic stream of n values with duplication probability p."""

    __slots__ = ("_n", "_p", "_rng", "_i", "_x", "_cardinality")

    def __init__(self, n: int, p: float, rng: random.Random) -> None:
        if n < 0:
            raise InvalidParameter("size", n, "a non-negative integer")
        if not (0.0 <= p <= 1.0):
            raise InvalidParameter("duplication probability", p, "a value in [0, 1]")
        self._n = n
        self._p = p
        self._rng = rng
        self._i = 0  # draws so far
        self._x = 0  # last emitted value
        self._cardinality = 0

    @property
    def size(self) -> int:
        return self._n

    @property
    def duplication_probability(self) -> float:
        return self._p

    @property
    def drawn(self) -> int:
        """Number of values produced so far."""
        return self._i

    @property
    def exhausted(self) -> bool:
        return self._i == self._n

    @property
    def cardinality(self) -> Cardinality:
        """True number of distinct values in the stream.

        Only known once every value has been drawn; raises NotReady
        before that.
        """
        if self._i < self._n:
            raise NotReady(self._i, self._n)
        return self._cardinality

    def draw(self) -> tuple[StreamValue, bool]:
        """Return (value, True), or (0, False) once the stream is drained."""
        if self._i == self._n:
            return 0, False
        self._i += 1

        # the first draw has nothing to repeat
        if self._i == 1 or self._rng.random() >= self._p:
            self._x += 1
            self._cardinality += 1
        return self._x, True

    def __iter__(self) -> StreamGenerator:
        return self

    def __next__(self) -> StreamValue:
        value, ok = self.draw()
        if not ok:
            raise StopIteration
        return value

    def __repr__(self) -> str:
        return (
            f"StreamGenerator(n={self._n}, p={self._p}, "
            f"drawn={self._i}, distinct={self._cardinality})"
        )
