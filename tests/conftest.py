"""Pytest fixtures for profilecentroid tests."""

import numpy as np
import pytest

from profilecentroid.core import MSRun, MzPeak, ScanMetadata, Spectrum, SpectrumType


def make_spectrum(intensity, mz=None, scan_number=1, ms_level=1, **metadata) -> Spectrum:
    """Profile spectrum with unit m/z spacing starting at 100 unless mz is given."""
    intensity = np.asarray(intensity, dtype=np.float64)
    if mz is None:
        mz = 100.0 + np.arange(len(intensity), dtype=np.float64)
    return Spectrum(
        mz=np.asarray(mz, dtype=np.float64),
        intensity=intensity,
        metadata=ScanMetadata(
            scan_number=scan_number,
            ms_level=ms_level,
            spectrum_type=SpectrumType.PROFILE,
            **metadata,
        ),
    )


def make_peak(mz: float, intensity: float, start: int = 0) -> MzPeak:
    """Centroided peak with a single-sample support."""
    return MzPeak(
        mz=mz,
        intensity=intensity,
        start=start,
        stop=start + 1,
        support_mz=np.array([mz]),
        support_intensity=np.array([intensity]),
    )


def gaussian(x, center, sigma, amplitude):
    return amplitude * np.exp(-((x - center) ** 2) / (2 * sigma**2))


@pytest.fixture
def shoulder_spectrum():
    """A dominant peak at m/z 500.0 with a weak shoulder peak near 500.2."""
    mz = np.linspace(499.0, 501.0, 2001)
    intensity = gaussian(mz, 500.0, 0.05, 1e5) + gaussian(mz, 500.2, 0.01, 2000.0)
    return make_spectrum(intensity, mz=mz)


@pytest.fixture
def multi_peak_spectrum():
    """Separated and overlapping peaks of varied height on a zero baseline."""
    mz = np.linspace(200.0, 210.0, 1001)
    intensity = (
        gaussian(mz, 201.0, 0.05, 500.0)
        + gaussian(mz, 203.0, 0.05, 5000.0)
        + gaussian(mz, 203.3, 0.05, 1500.0)
        + gaussian(mz, 206.0, 0.05, 50000.0)
        + gaussian(mz, 208.5, 0.05, 120.0)
    )
    # zero baseline between peaks
    intensity[intensity < 1e-3] = 0.0
    return make_spectrum(intensity, mz=mz)


@pytest.fixture
def small_run():
    """Three scans (two MS1, one MS2) given out of scan order."""
    return MSRun([
        make_spectrum([0, 10, 40, 10, 0, 0, 25, 0], scan_number=3),
        make_spectrum([0, 30, 20, 40, 0], scan_number=1),
        make_spectrum([0, 0, 80, 0, 0], scan_number=2, ms_level=2),
    ])
