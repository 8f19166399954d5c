"""Tests for StreamGenerator."""
from __future__ import annotations

import random

import pytest

from hllcheck.domain.errors import InvalidParameter, NotReady
from hllcheck.generator.stream import StreamGenerator, encode_value


class TestConstruction:
    @pytest.mark.parametrize("p", [-0.1, 1.1, -1.0, 2.0])
    def test_rejects_probability_outside_unit_interval(self, rng, p):
        with pytest.raises(InvalidParameter):
            StreamGenerator(100, p, rng)

    @pytest.mark.parametrize("p", [0.0, 0.5, 1.0])
    def test_accepts_boundaries(self, rng, p):
        gen = StreamGenerator(100, p, rng)
        assert gen.size == 100
        assert gen.duplication_probability == p

    def test_rejects_negative_size(self, rng):
        with pytest.raises(InvalidParameter):
            StreamGenerator(-1, 0.5, rng)


class TestDraw:
    def test_produces_exactly_n_values(self, rng):
        gen = StreamGenerator(250, 0.3, rng)
        assert len(list(gen)) == 250
        assert gen.exhausted

    def test_draw_signals_exhaustion(self, rng):
        gen = StreamGenerator(2, 0.0, rng)
        assert gen.draw() == (1, True)
        assert gen.draw() == (2, True)
        assert gen.draw() == (0, False)
        assert gen.draw() == (0, False)

    def test_empty_stream(self, rng):
        gen = StreamGenerator(0, 0.5, rng)
        assert list(gen) == []
        assert gen.cardinality == 0

    def test_values_never_decrease_and_step_by_one(self, rng):
        gen = StreamGenerator(1_000, 0.5, rng)
        prev = 0
        for value in gen:
            assert value - prev in (0, 1)
            prev = value
        assert prev == gen.cardinality

    def test_invariant_holds_at_every_step(self, rng):
        gen = StreamGenerator(2_000, 0.25, rng)
        distinct = 0
        last = None
        while True:
            value, ok = gen.draw()
            if not ok:
                break
            if value != last:
                distinct += 1
                last = value
            assert 0 <= distinct <= gen.drawn <= gen.size
        assert gen.cardinality == distinct


class TestCardinality:
    def test_not_ready_before_exhaustion(self, rng):
        gen = StreamGenerator(10, 0.5, rng)
        with pytest.raises(NotReady):
            _ = gen.cardinality
        for _ in range(9):
            next(gen)
        with pytest.raises(NotReady):
            _ = gen.cardinality
        next(gen)
        assert 1 <= gen.cardinality <= 10

    def test_zero_duplication_is_all_distinct(self, rng):
        gen = StreamGenerator(5_000, 0.0, rng)
        for _ in gen:
            pass
        assert gen.cardinality == 5_000

    def test_full_duplication_keeps_one_value(self, rng):
        gen = StreamGenerator(1_000, 1.0, rng)
        assert set(gen) == {1}
        assert gen.cardinality == 1

    def test_duplication_rate_is_close_to_p(self, rng):
        gen = StreamGenerator(100_000, 0.8, rng)
        for _ in gen:
            pass
        rate = 1 - gen.cardinality / gen.size
        assert 0.78 < rate < 0.82


class TestDeterminism:
    def test_same_seed_same_stream(self):
        a = list(StreamGenerator(1_000, 0.5, random.Random(7)))
        b = list(StreamGenerator(1_000, 0.5, random.Random(7)))
        assert a == b

    def test_shared_source_continues_across_streams(self):
        """Two streams on one source differ from two streams on fresh sources."""
        shared = random.Random(7)
        first = list(StreamGenerator(1_000, 0.5, shared))
        second = list(StreamGenerator(1_000, 0.5, shared))
        fresh = list(StreamGenerator(1_000, 0.5, random.Random(7)))
        assert first == fresh
        assert second != fresh


class TestEncoding:
    def test_eight_bytes_big_endian(self):
        assert encode_value(1) == b"\x00\x00\x00\x00\x00\x00\x00\x01"
        assert encode_value(0x0102030405060708) == bytes(range(1, 9))

    def test_max_u64(self):
        assert encode_value(2**64 - 1) == b"\xff" * 8
