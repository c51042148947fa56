"""
Peak-level data types produced by mass detection.

- RawPoint: one (m/z, intensity) sample of a profile spectrum
- MzRange: closed m/z interval
- MzPeak: a centroided peak with the raw samples it was computed from
"""

from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray


class RawPoint(NamedTuple):
    """A single profile sample."""
    mz: float
    intensity: float


@dataclass(frozen=True, slots=True)
class MzRange:
    """Closed m/z interval [lower, upper]."""
    lower: float
    upper: float

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError(f"lower must be <= upper, got {self.lower} > {self.upper}")

    def contains(self, mz: float) -> bool:
        """Check if mz lies inside the interval (bounds included)."""
        return self.lower <= mz <= self.upper

    @property
    def width(self) -> float:
        return self.upper - self.lower


@dataclass(frozen=True, slots=True)
class MzPeak:
    """
    A centroided peak detected in a profile spectrum.

    Attributes:
        mz: Intensity-weighted centroid of the supporting samples.
        intensity: Intensity of the local maximum the peak was built
            around (not the summed intensity).
        start: Index of the first supporting sample in the spectrum.
        stop: One past the index of the last supporting sample.
        support_mz: m/z values of the supporting samples.
        support_intensity: Intensities of the supporting samples.
    """
    mz: float
    intensity: float
    start: int
    stop: int
    support_mz: NDArray[np.float64] = field(repr=False, compare=False)
    support_intensity: NDArray[np.float64] = field(repr=False, compare=False)

    @property
    def n_points(self) -> int:
        """Number of supporting samples."""
        return self.stop - self.start

    @property
    def support_points(self) -> tuple[RawPoint, ...]:
        """Supporting samples in ascending m/z order."""
        return tuple(
            RawPoint(float(mz), float(intensity))
            for mz, intensity in zip(self.support_mz, self.support_intensity)
        )
