"""Sample HyperLogLog estimator for exercising the harness.

Each 8-byte stream value is hashed to 64 bits. The top ``precision`` bits
choose a register; the register keeps the highest rank (first set bit
position, counted from the top) seen in the remaining bits. The estimate
is the bias-corrected harmonic mean over registers, falling back to
linear counting while empty registers are still plentiful.
"""

from __future__ import annotations

import hashlib
import math

from hllcheck.domain.types import Cardinality, EncodedValue
from hllcheck.estimators.base import Estimator

_SMALL_ALPHA = {16: 0.673, 32: 0.697, 64: 0.709}
_TWO_POW_64 = float(1 << 64)


def _alpha(m: int) -> float:
    return _SMALL_ALPHA.get(m, 0.7213 / (1.0 + 1.079 / m))


class HyperLogLog(Estimator):
    """HyperLogLog over 2**precision one-byte registers (4 <= precision <= 18)."""

    __slots__ = ("_width", "_registers")

    def __init__(self, precision: int = 11) -> None:
        if not (4 <= precision <= 18):
            raise ValueError(f"Precision must be 4..18, got {precision}")
        self._width = 64 - precision  # bits left for the rank
        self._registers = bytearray(1 << precision)

    def observe(self, value: EncodedValue) -> None:
        h = int.from_bytes(hashlib.sha256(value).digest()[:8], "big")
        slot = h >> self._width
        rank = self._width - (h & ((1 << self._width) - 1)).bit_length() + 1
        if rank > self._registers[slot]:
            self._registers[slot] = rank

    def estimate(self) -> Cardinality:
        m = len(self._registers)
        raw = _alpha(m) * m * m / math.fsum(2.0 ** -r for r in self._registers)

        empty = self._registers.count(0)
        if raw <= 2.5 * m and empty:
            return round(m * math.log(m / empty))
        if raw > _TWO_POW_64 / 30.0:
            return int(-_TWO_POW_64 * math.log(1.0 - raw / _TWO_POW_64))
        return int(raw)
