"""
profilecentroid: exact mass detection for profile mass spectra.

Converts profile (uncentroided) scans into centroided peaks: one
intensity-weighted exact mass per local maximum, noise filtered, with
optional peak-shape based removal of lateral (shoulder) peaks.
"""

from .core import MSRun, MzPeak, MzRange, RawPoint, ScanMetadata, Spectrum
from .detection import (
    DetectionResult,
    ExactMassDetector,
    ExactMassDetectorParameters,
    detect_run,
)
from .exceptions import PeakModelError, ProfileCentroidError, UnknownPeakModelError
from .peakmodels import PeakModelType

__version__ = "0.1.0"

__all__ = [
    "Spectrum",
    "ScanMetadata",
    "MSRun",
    "RawPoint",
    "MzRange",
    "MzPeak",
    "ExactMassDetector",
    "ExactMassDetectorParameters",
    "DetectionResult",
    "detect_run",
    "PeakModelType",
    "ProfileCentroidError",
    "PeakModelError",
    "UnknownPeakModelError",
]
