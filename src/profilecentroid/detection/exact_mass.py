"""
Exact mass detector: centroiding of profile spectra.

The detector turns one profile spectrum into a list of centroided peaks:

1. split the profile into positive-intensity runs and locate their local
   maxima and minima (find_profile_runs);
2. centroid one peak per local maximum above the noise level
   (centroid_run);
3. optionally drop shoulder peaks and baseline noise with a peak-shape
   model (remove_lateral_peaks).

Detection keeps no state between calls, so one detector can be shared
across threads or worker processes.
"""

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any, Optional, overload

from ..core.peak import MzPeak
from ..core.spectrum import Spectrum
from ..peakmodels import PeakModelFactory, PeakModelType, peak_model_factory
from .centroid import centroid_run
from .extrema import find_profile_runs
from .lateral import remove_lateral_peaks

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExactMassDetectorParameters:
    """
    Configuration of the exact mass detector.

    Attributes:
        noise_level: Intensity a local maximum must exceed to become a peak.
        resolution: Mass resolution handed to the peak-shape model.
        clean_lateral: Run lateral peak cleanup after centroiding.
        peak_model: Peak-shape model used by lateral cleanup. Unknown names
            are not rejected here; they abort the cleanup of each scan and
            are reported through the detector's error sink.
    """
    noise_level: float = 0.0
    resolution: int = 60000
    clean_lateral: bool = False
    peak_model: PeakModelType | str = PeakModelType.GAUSSIAN

    def __post_init__(self) -> None:
        """Validate parameter values."""
        if self.noise_level < 0:
            raise ValueError(f"noise_level must be >= 0, got {self.noise_level}")
        if self.resolution <= 0:
            raise ValueError(f"resolution must be > 0, got {self.resolution}")

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> 'ExactMassDetectorParameters':
        """
        Build parameters from a plain mapping (e.g. parsed JSON or CLI options).

        Raises:
            ValueError: If the mapping holds keys that are not parameters.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(
                f"Unknown detector parameters: {', '.join(unknown)}. "
                f"Expected: {', '.join(sorted(known))}"
            )
        return cls(**options)


class DetectionResult(Sequence[MzPeak]):
    """
    Peaks detected in one spectrum, in ascending m/z order.

    Attributes:
        scan_number: Scan the peaks were detected in.
        error: Lateral cleanup error message, None when detection ran fully.
            When set, the peaks are valid but not (fully) cleaned.
    """

    def __init__(
        self,
        peaks: list[MzPeak],
        scan_number: Optional[int] = None,
        error: Optional[str] = None,
    ):
        self._peaks = list(peaks)
        self.scan_number = scan_number
        self.error = error

    @overload
    def __getitem__(self, index: int) -> MzPeak: ...

    @overload
    def __getitem__(self, index: slice) -> list[MzPeak]: ...

    def __getitem__(self, index: int | slice) -> MzPeak | list[MzPeak]:
        return self._peaks[index]

    def __len__(self) -> int:
        return len(self._peaks)

    def __iter__(self) -> Iterator[MzPeak]:
        return iter(self._peaks)

    @property
    def peaks(self) -> list[MzPeak]:
        """Copy of the detected peaks."""
        return list(self._peaks)

    @property
    def degraded(self) -> bool:
        """True if lateral cleanup was requested but could not complete."""
        return self.error is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DetectionResult):
            return NotImplemented
        return (self._peaks, self.scan_number, self.error) == (
            other._peaks, other.scan_number, other.error
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        error = f", error={self.error!r}" if self.error else ""
        return f"DetectionResult(scan={self.scan_number}, {len(self)} peaks{error})"


def _log_error(message: str) -> None:
    logger.error(message)


def _cleanup_skipped(scan_number: Optional[int], error: str) -> str:
    return f"Lateral peak cleanup skipped for scan {scan_number}: {error}"


class ExactMassDetector:
    """
    Mass detector producing intensity-weighted exact masses.

    Example:
        >>> import numpy as np
        >>> from profilecentroid.core import Spectrum
        >>> detector = ExactMassDetector(ExactMassDetectorParameters(noise_level=10))
        >>> spectrum = Spectrum(
        ...     mz=np.array([100.0, 101.0, 102.0]),
        ...     intensity=np.array([0.0, 50.0, 0.0]),
        ... )
        >>> [(peak.mz, peak.intensity) for peak in detector.detect(spectrum)]
        [(101.0, 50.0)]
    """

    def __init__(
        self,
        parameters: Optional[ExactMassDetectorParameters] = None,
        error_sink: Optional[Callable[[str], None]] = None,
        model_factory: Optional[PeakModelFactory] = None,
    ):
        """
        Initialize the detector.

        Args:
            parameters: Detector configuration (defaults if omitted).
            error_sink: Receives a human-readable message whenever lateral
                cleanup cannot build its peak model. Defaults to logging
                the message at ERROR level.
            model_factory: Builds the peak model for lateral cleanup from
                (mz, intensity, resolution). Overrides
                ``parameters.peak_model``; when omitted the model is looked
                up in the peak model registry.
        """
        self.parameters = parameters or ExactMassDetectorParameters()
        self.error_sink = error_sink or _log_error
        self.model_factory = model_factory

    def detect(self, spectrum: Spectrum) -> DetectionResult:
        """
        Detect centroided peaks in a profile spectrum.

        Args:
            spectrum: Profile spectrum with ascending m/z values.

        Returns:
            DetectionResult with peaks in ascending m/z order.
        """
        params = self.parameters
        mz, intensity = spectrum.mz, spectrum.intensity

        peaks: list[MzPeak] = []
        for run in find_profile_runs(intensity):
            peaks.extend(centroid_run(mz, intensity, run, params.noise_level))

        error = None
        if params.clean_lateral and peaks:
            cleanup = remove_lateral_peaks(
                peaks,
                base_peak_intensity=spectrum.base_peak_intensity,
                noise_level=params.noise_level,
                resolution=params.resolution,
                model_factory=self.model_factory or peak_model_factory(params.peak_model),
            )
            peaks = cleanup.peaks
            if cleanup.error is not None:
                error = cleanup.error
                self.error_sink(_cleanup_skipped(spectrum.scan_number, error))

        logger.debug(
            f"Scan {spectrum.scan_number}: {len(peaks)} peaks from {spectrum.n_points} points"
        )
        return DetectionResult(peaks, scan_number=spectrum.scan_number, error=error)

    def __call__(self, spectrum: Spectrum) -> DetectionResult:
        return self.detect(spectrum)

    def __repr__(self) -> str:
        return f"ExactMassDetector({self.parameters})"
