"""
Mass detection for profile spectra.

Steps:
- find_profile_runs(): Split a profile into runs and local extrema
- centroid_run(): Centroid the local maxima of one run
- remove_lateral_peaks(): Model-based shoulder and noise cleanup

Detector:
- ExactMassDetector: Runs the steps on one spectrum
- ExactMassDetectorParameters: Detector configuration
- DetectionResult: Peaks of one spectrum plus cleanup status

Batch:
- detect_run(): Detection over all spectra of a run (optionally parallel)
"""

from .extrema import ProfileRun, find_profile_runs
from .centroid import centroid_run
from .lateral import LateralCleanupResult, remove_lateral_peaks
from .exact_mass import DetectionResult, ExactMassDetector, ExactMassDetectorParameters
from .batch import detect_run

__all__ = [
    # Steps
    "ProfileRun",
    "find_profile_runs",
    "centroid_run",
    "LateralCleanupResult",
    "remove_lateral_peaks",
    # Detector
    "ExactMassDetector",
    "ExactMassDetectorParameters",
    "DetectionResult",
    # Batch
    "detect_run",
]
