"""
Scan metadata for profile-mode MS spectra.

This module defines the ScanMetadata dataclass that carries the acquisition
context of a single scan: where it sits in the run, whether it holds
profile or centroid data, and the precomputed base peak reported by the
instrument software.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class Polarity(Enum):
    """Ion polarity mode."""
    POSITIVE = auto()
    NEGATIVE = auto()
    UNKNOWN = auto()


class SpectrumType(Enum):
    """Spectrum data representation type."""
    PROFILE = auto()
    CENTROID = auto()
    UNKNOWN = auto()


@dataclass(frozen=True, slots=True)
class ScanMetadata:
    """
    Metadata for a single MS scan.

    Attributes:
        scan_number: Unique scan identifier (1-based, vendor-assigned).
        ms_level: MS level (1 for MS1, 2 for MS2, etc.).
        retention_time: Retention time in seconds.
        polarity: Ion polarity mode.
        spectrum_type: Profile or centroid mode.
        total_ion_current: Total ion current (TIC) for the scan.
        base_peak_mz: m/z of the base (most intense) point.
        base_peak_intensity: Intensity of the base point, as reported by
            the source. When None it is computed from the data.
        native_id: Native spectrum ID from source file.
        extras: Additional metadata not covered by standard fields.
    """
    scan_number: int = 1
    ms_level: int = 1
    retention_time: float = 0.0  # in seconds

    polarity: Polarity = Polarity.UNKNOWN
    spectrum_type: SpectrumType = SpectrumType.UNKNOWN

    total_ion_current: Optional[float] = None
    base_peak_mz: Optional[float] = None
    base_peak_intensity: Optional[float] = None

    native_id: Optional[str] = None
    extras: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        if self.scan_number < 1:
            raise ValueError(f"scan_number must be >= 1, got {self.scan_number}")
        if self.ms_level < 1:
            raise ValueError(f"ms_level must be >= 1, got {self.ms_level}")
        if self.retention_time < 0:
            raise ValueError(f"retention_time must be >= 0, got {self.retention_time}")

    @property
    def is_ms1(self) -> bool:
        """Check if this is an MS1 scan."""
        return self.ms_level == 1

    @property
    def retention_time_minutes(self) -> float:
        """Retention time in minutes."""
        return self.retention_time / 60.0
