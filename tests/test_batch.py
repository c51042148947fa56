"""Tests for run-level detection and worker sizing."""

import logging

import pytest

from profilecentroid.core import MSRun
from profilecentroid.detection import ExactMassDetectorParameters, batch, detect_run
from profilecentroid.utils import ParallelMode, SystemResources, get_system_resources


def test_detect_run_ms1_in_scan_order(small_run):
    results = detect_run(small_run, ExactMassDetectorParameters())
    assert list(results) == [1, 3]
    assert [len(results[scan]) for scan in results] == [2, 2]
    assert all(results[scan].scan_number == scan for scan in results)


def test_detect_run_all_levels(small_run):
    results = detect_run(small_run, ExactMassDetectorParameters(), ms_level=None)
    assert list(results) == [1, 2, 3]
    assert len(results[2]) == 1


def test_detect_run_empty():
    assert detect_run(MSRun(), ExactMassDetectorParameters()) == {}


def test_progress_callback(small_run):
    calls = []
    detect_run(
        small_run,
        ExactMassDetectorParameters(),
        ms_level=None,
        progress_callback=lambda done, total, result: calls.append((done, total)),
    )
    assert calls == [(1, 3), (2, 3), (3, 3)]


@pytest.fixture
def two_cores(monkeypatch):
    monkeypatch.setattr(
        batch,
        "get_system_resources",
        lambda: SystemResources(cpu_count=2, cpu_count_physical=2),
    )


def test_parallel_matches_sequential(small_run, two_cores, caplog):
    params = ExactMassDetectorParameters(noise_level=5.0, clean_lateral=True)
    sequential = detect_run(small_run, params, ms_level=None)
    with caplog.at_level(logging.INFO, logger="profilecentroid"):
        parallel = detect_run(
            small_run, params, ms_level=None,
            parallel_mode=ParallelMode.CUSTOM, custom_workers=2,
        )
    assert any("with 2 workers" in record.getMessage() for record in caplog.records)
    assert list(parallel) == list(sequential)
    for scan in sequential:
        assert parallel[scan] == sequential[scan]


@pytest.mark.parametrize(
    "mode, workers",
    [(ParallelMode.NONE, None), (ParallelMode.CUSTOM, 2)],
)
def test_degraded_scans_logged_once(small_run, two_cores, caplog, mode, workers):
    params = ExactMassDetectorParameters(clean_lateral=True, peak_model="voigt")
    with caplog.at_level(logging.ERROR, logger="profilecentroid"):
        detect_run(small_run, params, parallel_mode=mode, custom_workers=workers)
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert len(messages) == 2
    assert messages[0].startswith("Lateral peak cleanup skipped for scan 1:")
    assert messages[1].startswith("Lateral peak cleanup skipped for scan 3:")


def test_custom_model_factory_is_used(small_run):
    def failing_factory(mz, intensity, resolution):
        raise ValueError("bad model")

    params = ExactMassDetectorParameters(clean_lateral=True)
    results = detect_run(small_run, params, model_factory=failing_factory)
    assert [result.error for result in results.values()] == ["ValueError: bad model"] * 2


def test_degraded_scans_are_reported(small_run):
    params = ExactMassDetectorParameters(clean_lateral=True, peak_model="voigt")
    results = detect_run(small_run, params)
    assert all(result.degraded for result in results.values())


@pytest.mark.parametrize(
    "mode, custom, expected",
    [
        (ParallelMode.NONE, None, 1),
        (ParallelMode.LIGHT, None, 2),
        (ParallelMode.HEAVY, None, 6),
        (ParallelMode.MAX, None, 8),
        (ParallelMode.CUSTOM, 3, 3),
        (ParallelMode.CUSTOM, 20, 8),
        (ParallelMode.CUSTOM, 0, 1),
    ],
)
def test_worker_counts(mode, custom, expected):
    resources = SystemResources(cpu_count=16, cpu_count_physical=8)
    assert resources.get_workers(mode, custom) == expected


def test_custom_mode_requires_worker_count():
    with pytest.raises(ValueError):
        SystemResources(cpu_count=4, cpu_count_physical=4).get_workers(ParallelMode.CUSTOM)


def test_system_resources_detected():
    resources = get_system_resources()
    assert resources.cpu_count >= 1
    assert resources.cpu_count_physical >= 1
