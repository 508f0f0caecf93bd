#!/usr/bin/env python3
"""
Rotating Sampler Tests

Checks the batch sampler that cycles through a candidate pool:
- batches never contain duplicates and hold min(batch_size, N) items
- no candidate repeats until fewer than batch_size unshown candidates remain
- then the whole history is cleared before the next draw (leftovers get no priority)
- scripted and seeded random sources make the draw sequence reproducible

Run:
----
    pytest tests/test_sampler.py -v
"""

import pytest

from rotation import (
    NumpyRandomSource,
    RotatingSampler,
    SamplerConfig,
    SamplerPhase,
    ScriptedRandomSource,
    draw_without_replacement,
)


def scripted(draws, batch_size=5):
    return RotatingSampler(SamplerConfig(batch_size=batch_size), ScriptedRandomSource(draws))


def indices_of(pool, batch):
    return [pool.index(item) for item in batch]


class TestEmptyPool:
    def test_initialize_empty_returns_empty_batch(self):
        sampler = RotatingSampler()
        assert sampler.initialize([]) == []
        assert sampler.shown == frozenset()
        assert sampler.phase == SamplerPhase.FRESH

    def test_select_batch_on_empty_pool_is_empty(self):
        sampler = RotatingSampler()
        sampler.initialize([])
        assert sampler.select_batch() == []
        assert sampler.select_batch() == []
        assert sampler.shown_count == 0
        assert sampler.cycle == 0

    def test_uninitialized_sampler_is_empty(self):
        assert RotatingSampler().select_batch() == []

    def test_initialize_none_is_empty_pool(self):
        sampler = RotatingSampler()
        assert sampler.initialize(None) == []
        assert sampler.pool_size == 0


class TestBatchSize:
    @pytest.mark.parametrize("n", list(range(1, 13)))
    def test_batch_is_min_of_five_and_pool(self, n):
        sampler = RotatingSampler(SamplerConfig(seed=n))
        pool = list(range(n))
        assert len(sampler.initialize(pool)) == min(5, n)
        for _ in range(6):
            assert len(sampler.select_batch()) == min(5, n)

    def test_configured_batch_size(self):
        sampler = RotatingSampler(SamplerConfig(batch_size=3, seed=1))
        batch = sampler.initialize(list("abcdefgh"))
        assert len(batch) == 3
        assert sampler.remaining_count == 5


class TestNoRepeats:
    def test_no_duplicates_within_batches(self):
        pool = list(range(9))
        sampler = RotatingSampler(SamplerConfig(seed=3))
        batches = [sampler.initialize(pool)] + [sampler.select_batch() for _ in range(50)]
        for batch in batches:
            assert len(set(batch)) == len(batch)

    def test_no_repeat_until_reset(self):
        pool = list(range(23))
        sampler = RotatingSampler(SamplerConfig(seed=11))
        seen = set(sampler.initialize(pool))
        for _ in range(40):
            cycle_before = sampler.cycle
            batch = sampler.select_batch()
            if sampler.cycle == cycle_before:
                assert not seen & set(batch)
                seen |= set(batch)
            else:
                seen = set(batch)
            assert sampler.shown == frozenset(seen)

    def test_shown_stays_within_pool_indices(self):
        pool = list("abcdefghijk")
        sampler = RotatingSampler(SamplerConfig(seed=5))
        sampler.initialize(pool)
        for _ in range(20):
            sampler.select_batch()
            assert sampler.shown <= set(range(len(pool)))

    def test_each_returned_index_was_unshown_before(self):
        pool = list(range(17))
        sampler = RotatingSampler(SamplerConfig(seed=8))
        sampler.initialize(pool)
        for _ in range(20):
            before = sampler.shown if sampler.remaining_count >= 5 else frozenset()
            sampler.select_batch()
            assert not before & set(sampler.last_batch_indices)


class TestReset:
    def test_pool_of_seven_resets_on_second_call(self):
        pool = list(range(7))
        sampler = RotatingSampler(SamplerConfig(seed=2))
        first = sampler.initialize(pool)
        assert len(first) == 5
        assert sampler.shown_count == 5
        assert sampler.remaining_count == 2

        second = sampler.select_batch()
        assert len(second) == 5
        assert sampler.cycle == 1
        assert sampler.shown == frozenset(second)

    def test_pool_of_ten_exhausts_then_resets(self):
        pool = list(range(10))
        sampler = RotatingSampler(SamplerConfig(seed=4))
        first = sampler.initialize(pool)
        second = sampler.select_batch()
        assert set(first) | set(second) == set(pool)
        assert sampler.remaining_count == 0
        assert sampler.cycle == 0

        third = sampler.select_batch()
        assert len(third) == 5
        assert sampler.cycle == 1
        assert sampler.shown_count == 5

    def test_small_pool_returns_everything_each_time(self):
        pool = ["a", "b", "c"]
        sampler = RotatingSampler(SamplerConfig(seed=9))
        assert sorted(sampler.initialize(pool)) == pool
        for _ in range(4):
            assert sorted(sampler.select_batch()) == pool
            assert sampler.shown_count == 3
        # Clearing an empty history is not a new cycle; clearing 3 shown ones is.
        assert sampler.cycle == 4

    def test_leftovers_are_not_prioritized_after_reset(self):
        pool = list(range(7))
        sampler = scripted([0, 0, 0, 0, 0, 0, 1, 2, 3, 4])
        assert sampler.initialize(pool) == [0, 1, 2, 3, 4]
        # 5 and 6 were never shown; after the reset 5 is skipped anyway.
        assert sampler.select_batch() == [0, 2, 4, 6, 3]
        assert 5 not in sampler.shown


class TestDeterminism:
    def test_scripted_draw_order(self):
        pool = list("abcdefg")
        sampler = scripted([4, 0, 0, 0, 0])
        assert sampler.initialize(pool) == ["e", "a", "b", "c", "d"]
        assert sampler.last_batch_indices == (4, 0, 1, 2, 3)

    def test_scripted_reset_sequence(self):
        pool = list(range(7))
        sampler = scripted([0, 0, 0, 0, 0, 6, 0, 0, 0, 0])
        assert sampler.initialize(pool) == [0, 1, 2, 3, 4]
        assert sampler.select_batch() == [6, 0, 1, 2, 3]

    def test_same_seed_same_sequence(self):
        pool = list(range(13))
        runs = []
        for _ in range(2):
            sampler = RotatingSampler(SamplerConfig(seed=42))
            sampler.initialize(pool)
            seq = [sampler.last_batch_indices]
            for _ in range(8):
                sampler.select_batch()
                seq.append(sampler.last_batch_indices)
            runs.append(seq)
        assert runs[0] == runs[1]


class TestInitialize:
    def test_initialize_supersedes_history(self):
        sampler = RotatingSampler(SamplerConfig(seed=6))
        sampler.initialize(list(range(12)))
        sampler.select_batch()
        sampler.select_batch()
        assert sampler.cycle == 1

        batch = sampler.initialize(list("vwxyz!?"))
        assert sampler.cycle == 0
        assert sampler.batches_served == 1
        assert sampler.shown == frozenset(sampler.last_batch_indices)
        assert set(batch) <= set("vwxyz!?")
        assert sampler.phase == SamplerPhase.PARTIAL

    def test_pool_is_copied(self):
        pool = list(range(8))
        sampler = RotatingSampler(SamplerConfig(seed=1))
        sampler.initialize(pool)
        pool.clear()
        assert sampler.pool_size == 8
        assert len(sampler.select_batch()) == 5

    def test_candidates_are_opaque(self):
        pool = [object() for _ in range(6)]
        sampler = RotatingSampler(SamplerConfig(seed=0))
        batch = sampler.initialize(pool)
        assert all(any(item is p for p in pool) for item in batch)


class TestRandomSources:
    def test_scripted_source_exhaustion(self):
        source = ScriptedRandomSource([1])
        assert source.draw_index(3) == 1
        assert source.remaining == 0
        with pytest.raises(RuntimeError):
            source.draw_index(3)

    def test_scripted_values_wrap(self):
        assert ScriptedRandomSource([7]).draw_index(7) == 0

    @pytest.mark.parametrize("source", [NumpyRandomSource(1), ScriptedRandomSource([0])])
    def test_upper_must_be_positive(self, source):
        with pytest.raises(ValueError):
            source.draw_index(0)

    def test_numpy_source_in_range(self):
        source = NumpyRandomSource(seed=123)
        draws = [source.draw_index(4) for _ in range(200)]
        assert set(draws) == {0, 1, 2, 3}
        assert all(isinstance(d, int) for d in draws)

    def test_draw_without_replacement_stops_when_empty(self):
        available = [3, 7]
        picked = draw_without_replacement(available, 5, ScriptedRandomSource([1, 0]))
        assert picked == [7, 3]
        assert available == []
