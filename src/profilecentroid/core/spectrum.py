"""
Profile spectrum representation for profilecentroid.

This module defines the Spectrum class, the scan that mass detection works
on: ascending m/z samples with their raw intensities and the scan metadata.
"""

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from .peak import RawPoint
from .scan_metadata import ScanMetadata, SpectrumType


@dataclass(slots=True)
class Spectrum:
    """
    A single mass spectrum with associated metadata.

    For profile mode data the arrays sample the continuous signal, with
    zero-intensity samples separating the signal into runs. Detection only
    reads the arrays; callers must not modify them while a detection on
    this spectrum is in progress.

    Attributes:
        mz: Array of m/z values (sorted in ascending order).
        intensity: Array of intensity values corresponding to mz.
        metadata: Scan metadata.

    Example:
        >>> import numpy as np
        >>> spectrum = Spectrum(
        ...     mz=np.array([100.0, 101.0, 102.0]),
        ...     intensity=np.array([0.0, 50.0, 0.0]),
        ... )
        >>> spectrum.n_points
        3
        >>> spectrum.base_peak_intensity
        50.0
    """
    mz: NDArray[np.float64]
    intensity: NDArray[np.float64]
    metadata: ScanMetadata = field(default_factory=ScanMetadata)

    def __post_init__(self) -> None:
        """Validate spectrum data consistency."""
        self.mz = np.asarray(self.mz, dtype=np.float64)
        self.intensity = np.asarray(self.intensity, dtype=np.float64)
        if self.mz.ndim != 1:
            raise ValueError(f"mz must be 1-dimensional, got shape {self.mz.shape}")
        if self.intensity.ndim != 1:
            raise ValueError(f"intensity must be 1-dimensional, got shape {self.intensity.shape}")
        if len(self.mz) != len(self.intensity):
            raise ValueError(
                f"mz and intensity must have same length, "
                f"got {len(self.mz)} and {len(self.intensity)}"
            )

    @property
    def n_points(self) -> int:
        """Number of data points in the spectrum."""
        return len(self.mz)

    @property
    def is_empty(self) -> bool:
        """Check if spectrum has no data points."""
        return self.n_points == 0

    @property
    def mz_range(self) -> tuple[float, float]:
        """
        Return (min_mz, max_mz) tuple.

        Raises:
            ValueError: If spectrum is empty.
        """
        if self.is_empty:
            raise ValueError("Cannot get mz_range of empty spectrum")
        return float(self.mz[0]), float(self.mz[-1])

    @property
    def base_peak_intensity(self) -> float:
        """
        Intensity of the base peak.

        The value reported in the metadata wins when present; otherwise it
        is the maximum of the intensity array (0.0 for an empty spectrum).
        """
        if self.metadata.base_peak_intensity is not None:
            return float(self.metadata.base_peak_intensity)
        if self.is_empty:
            return 0.0
        return float(np.max(self.intensity))

    @property
    def is_profile(self) -> bool:
        """Check if this is profile mode data."""
        return self.metadata.spectrum_type == SpectrumType.PROFILE

    @property
    def ms_level(self) -> int:
        """MS level from metadata."""
        return self.metadata.ms_level

    @property
    def retention_time(self) -> float:
        """Retention time in seconds from metadata."""
        return self.metadata.retention_time

    @property
    def scan_number(self) -> int:
        """Scan number from metadata."""
        return self.metadata.scan_number

    def data_points(self, start: int = 0, stop: int | None = None) -> tuple[RawPoint, ...]:
        """Return the samples in [start, stop) as RawPoint tuples."""
        return tuple(
            RawPoint(float(mz), float(intensity))
            for mz, intensity in zip(self.mz[start:stop], self.intensity[start:stop])
        )

    def __len__(self) -> int:
        """Return number of data points."""
        return self.n_points

    def __repr__(self) -> str:
        """String representation."""
        if self.is_empty:
            mz_range_str = "empty"
        else:
            mz_min, mz_max = self.mz_range
            mz_range_str = f"m/z {mz_min:.2f}-{mz_max:.2f}"

        return (
            f"Spectrum(scan={self.scan_number}, "
            f"MS{self.ms_level}, "
            f"RT={self.retention_time:.2f}s, "
            f"{self.n_points} points, "
            f"{mz_range_str})"
        )
