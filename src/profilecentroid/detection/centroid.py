"""
Exact mass (centroid) computation for one profile run.
"""

import numpy as np
from numpy.typing import NDArray

from ..core.peak import MzPeak
from .extrema import ProfileRun


def _support_bounds(run: ProfileRun) -> list[tuple[int, int, int]]:
    """
    Partition a run into one (apex, first, last) range per local maximum.

    Consecutive ranges share the minimum between them. A run without minima
    is a single range covering the whole run.
    """
    bounds = []
    for k, apex in enumerate(run.maxima):
        first = run.start if k == 0 else run.minima[k - 1]
        last = run.minima[k] if k < len(run.minima) else run.end - 1
        bounds.append((apex, first, last))
    return bounds


def centroid_run(
    mz: NDArray[np.float64],
    intensity: NDArray[np.float64],
    run: ProfileRun,
    noise_level: float,
) -> list[MzPeak]:
    """
    Centroid every local maximum of a run that rises above the noise level.

    The m/z of each peak is the intensity-weighted mean over its supporting
    samples; its intensity is the intensity at the maximum. Maxima at or
    below ``noise_level`` are dropped.

    Args:
        mz: m/z array of the whole spectrum.
        intensity: Intensity array of the whole spectrum.
        run: The run to centroid, as found by find_profile_runs.
        noise_level: Intensity a maximum must exceed to yield a peak.

    Returns:
        Peaks in ascending m/z order.
    """
    peaks: list[MzPeak] = []
    for apex, first, last in _support_bounds(run):
        apex_intensity = float(intensity[apex])
        if apex_intensity <= noise_level:
            continue

        stop = last + 1
        support_mz = mz[first:stop].copy()
        support_intensity = intensity[first:stop].copy()
        # weights are positive at the apex, so the sum is never zero
        exact_mz = float(np.average(support_mz, weights=support_intensity))

        peaks.append(MzPeak(
            mz=exact_mz,
            intensity=apex_intensity,
            start=first,
            stop=stop,
            support_mz=support_mz,
            support_intensity=support_intensity,
        ))
    return peaks
