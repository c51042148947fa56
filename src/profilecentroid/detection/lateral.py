"""
Lateral peak cleanup.

Profile data of a strong ion often centroids into the real peak plus a
few weak satellites on its flanks, and the baseline left of intense
signal leaves sub-noise clutter. This module removes both using a
peak-shape model: every significant peak predicts its own envelope, and
anything inside that envelope but below it is treated as a shoulder.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..core.peak import MzPeak
from ..exceptions import PeakModelError
from ..peakmodels.base import PeakModelFactory

logger = logging.getLogger(__name__)


def _describe_model_error(error: Exception) -> str:
    if isinstance(error, PeakModelError):
        return str(error)
    return f"{type(error).__name__}: {error}"


@dataclass(slots=True)
class LateralCleanupResult:
    """
    Outcome of a lateral cleanup pass.

    Attributes:
        peaks: Retained peaks, in input order.
        removed: Number of peaks removed.
        error: Message of the model factory error that aborted the pass, if
            any. The peaks are then those retained up to that point.
    """
    peaks: list[MzPeak] = field(default_factory=list)
    removed: int = 0
    error: Optional[str] = None

    @property
    def aborted(self) -> bool:
        return self.error is not None


def remove_lateral_peaks(
    peaks: list[MzPeak],
    base_peak_intensity: float,
    noise_level: float,
    resolution: int,
    model_factory: PeakModelFactory,
) -> LateralCleanupResult:
    """
    Remove shoulder peaks and left-side noise around significant peaks.

    Every input peak at or above ``noise_level`` acts as a candidate, in
    input order, including peaks an earlier candidate already removed. For
    each candidate C the remaining peaks are walked in ascending m/z:

    - a peak below the noise level, left of the base width a base-peak
      intensity peak at C's m/z would have, is removed;
    - a peak inside C's own base width whose intensity is below the
      intensity C's model predicts at its m/z is removed;
    - the walk ends at the first peak beyond C's base width.

    The input list is not modified.

    Args:
        peaks: Peaks of one spectrum in ascending m/z order.
        base_peak_intensity: Highest intensity of the spectrum.
        noise_level: Noise intensity threshold.
        resolution: Mass resolution passed to the peak models.
        model_factory: Callable building a model from (mz, intensity, resolution).

    Returns:
        LateralCleanupResult with the retained peaks. Any exception raised
        by the factory stops the pass and is reported in ``error``.
    """
    removed: set[int] = set()
    error = None

    for candidate in peaks:
        if candidate.intensity < noise_level:
            continue

        try:
            peak_model = model_factory(candidate.mz, candidate.intensity, resolution)
            noise_model = model_factory(candidate.mz, base_peak_intensity, resolution)
        except Exception as e:
            error = _describe_model_error(e)
            logger.debug(f"Lateral cleanup aborted at m/z {candidate.mz:.4f}: {error}")
            break

        peak_range = peak_model.base_peak_width()
        noise_range = noise_model.base_peak_width()

        for index, compared in enumerate(peaks):
            if index in removed:
                continue
            if compared.mz < noise_range.lower and compared.intensity < noise_level:
                removed.add(index)
            elif (peak_range.contains(compared.mz)
                    and compared.intensity < peak_model.intensity_at(compared.mz)):
                removed.add(index)
            if compared.mz > peak_range.upper:
                break

    kept = [peak for index, peak in enumerate(peaks) if index not in removed]
    return LateralCleanupResult(peaks=kept, removed=len(removed), error=error)
