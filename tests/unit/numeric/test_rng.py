"""Tests for pseudorandom sampling helpers."""

from __future__ import annotations

import threading

import numpy as np
import pytest

from dspcore.config import RANDOM_SEED_ENV_VAR, DspSettings
from dspcore.numeric import rng as rng_module
from dspcore.numeric import RandomSource, default_random_source, random_double, random_int, seed


def test_random_int_stays_in_half_open_range() -> None:
    rng = RandomSource(11)
    draws = [random_int(-3, 4, rng=rng) for _ in range(2000)]

    assert min(draws) >= -3
    assert max(draws) < 4
    assert set(draws) == set(range(-3, 4))


def test_random_double_stays_in_unit_interval() -> None:
    draws = [random_double() for _ in range(2000)]

    assert all(0.0 <= value <= 1.0 for value in draws)


def test_random_int_rejects_empty_range() -> None:
    with pytest.raises(ValueError, match="high must be > low"):
        random_int(5, 5)
    with pytest.raises(ValueError, match="high must be > low"):
        random_int(5, 1)


def test_seeded_sources_are_reproducible() -> None:
    first = RandomSource(42)
    second = RandomSource.from_settings(DspSettings(random_seed=42))

    assert [first.uniform() for _ in range(5)] == [second.uniform() for _ in range(5)]


def test_seed_resets_default_generator() -> None:
    seed(123)
    first = [random_double() for _ in range(3)]
    seed(123)
    second = [random_double() for _ in range(3)]

    assert first == second
    assert default_random_source() is default_random_source()


def test_reseed_rejects_negative_seed() -> None:
    with pytest.raises(ValueError, match="seed must be >= 0"):
        RandomSource(-1)
    with pytest.raises(ValueError, match="seed must be >= 0"):
        RandomSource().reseed(-5)


def test_shared_source_is_usable_from_threads() -> None:
    rng = RandomSource(7)
    results: list[int] = []
    lock = threading.Lock()

    def worker() -> None:
        local = [rng.integer(0, 10) for _ in range(200)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 800
    assert all(0 <= value < 10 for value in results)


def test_uniform_array_draws_in_unit_interval() -> None:
    values = RandomSource(2).uniform_array(1000)

    assert values.shape == (1000,)
    assert np.all(values >= 0.0)
    assert np.all(values < 1.0)
    with pytest.raises(ValueError, match="size must be >= 0"):
        RandomSource().uniform_array(-1)


def test_default_source_ignores_malformed_seed_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(rng_module, "_default_source", None)
    monkeypatch.setenv(RANDOM_SEED_ENV_VAR, "abc")

    value = random_double()

    assert 0.0 <= value <= 1.0


def test_default_source_honours_seed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(rng_module, "_default_source", None)
    monkeypatch.setenv(RANDOM_SEED_ENV_VAR, "21")

    first = [random_double() for _ in range(3)]
    expected = RandomSource(21)

    assert first == [expected.uniform() for _ in range(3)]


def test_shared_default_source_is_usable_from_threads(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(rng_module, "_default_source", None)
    ints: list[int] = []
    doubles: list[float] = []
    sources: list[RandomSource] = []
    lock = threading.Lock()
    start = threading.Barrier(8)

    def worker() -> None:
        start.wait()
        local_source = default_random_source()
        local_ints = [random_int(0, 10) for _ in range(200)]
        local_doubles = [random_double() for _ in range(200)]
        with lock:
            sources.append(local_source)
            ints.extend(local_ints)
            doubles.extend(local_doubles)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(ints) == 1600
    assert len(doubles) == 1600
    assert all(0 <= value < 10 for value in ints)
    assert all(0.0 <= value <= 1.0 for value in doubles)
    assert all(source is sources[0] for source in sources)
