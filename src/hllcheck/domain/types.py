"""Shared type aliases used across the harness."""
from __future__ import annotations

from typing import TypeAlias

Cardinality: TypeAlias = int  # unsigned 64-bit count
StreamValue: TypeAlias = int  # distinct-value counter emitted by a stream
EncodedValue: TypeAlias = bytes  # 8-byte big-endian form of a StreamValue
Percent: TypeAlias = float
