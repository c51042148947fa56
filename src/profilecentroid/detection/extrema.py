"""
Segmentation of a profile intensity array into runs and local extrema.

A run is a maximal block of consecutive samples with positive intensity.
Within each run, strict local maxima and minima are located in a single
left-to-right pass, alternating between the two so that the recorded
extrema always read max, min, max, ...
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, slots=True)
class ProfileRun:
    """
    One contiguous run of positive intensity.

    Attributes:
        start: Index of the first sample of the run.
        end: One past the index of the last sample of the run.
        maxima: Indices of the local maxima, ascending.
        minima: Indices of the local minima, ascending; ``minima[k]`` lies
            between ``maxima[k]`` and ``maxima[k + 1]``.
    """
    start: int
    end: int
    maxima: tuple[int, ...] = ()
    minima: tuple[int, ...] = ()

    def __len__(self) -> int:
        return self.end - self.start


def find_profile_runs(intensity: NDArray[np.float64] | list[float]) -> list[ProfileRun]:
    """
    Split a profile into positive-intensity runs and find their extrema.

    Only indices 1..N-2 are tested, so the first and last samples of the
    array are never extrema. Equal neighbours never form an extremum.

    Args:
        intensity: Intensities in ascending m/z order.

    Returns:
        Runs in ascending index order.
    """
    values = np.asarray(intensity, dtype=np.float64).tolist()
    n = len(values)
    runs: list[ProfileRun] = []

    i = 0
    while i < n:
        while i < n and values[i] <= 0:
            i += 1
        if i >= n:
            break

        start = i
        maxima: list[int] = []
        minima: list[int] = []
        seeking_max = True
        while i < n and values[i] > 0:
            if 0 < i < n - 1:
                prev, current, following = values[i - 1], values[i], values[i + 1]
                if seeking_max:
                    if prev < current > following:
                        maxima.append(i)
                        seeking_max = False
                elif prev > current < following:
                    minima.append(i)
                    seeking_max = True
            i += 1

        runs.append(ProfileRun(start, i, tuple(maxima), tuple(minima)))

    return runs
