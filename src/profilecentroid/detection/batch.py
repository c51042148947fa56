"""
Run-level mass detection.

Scans are independent, so detection over a run parallelizes across
processes without any synchronization; results are keyed by scan number
and returned in scan order regardless of completion order.
"""

import logging
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Optional

from ..core.run import MSRun
from ..core.spectrum import Spectrum
from ..peakmodels.base import PeakModelFactory
from ..utils.resources import ParallelMode, get_system_resources
from .exact_mass import (
    DetectionResult,
    ExactMassDetector,
    ExactMassDetectorParameters,
    _cleanup_skipped,
    _log_error,
)

logger = logging.getLogger(__name__)


def _ignore_error(message: str) -> None:
    pass


def _detect_spectrum(
    parameters: ExactMassDetectorParameters,
    model_factory: Optional[PeakModelFactory],
    spectrum: Spectrum,
) -> DetectionResult:
    # degraded scans are reported by the parent process
    detector = ExactMassDetector(parameters, error_sink=_ignore_error, model_factory=model_factory)
    return detector.detect(spectrum)


def detect_run(
    run: MSRun,
    parameters: ExactMassDetectorParameters,
    ms_level: Optional[int] = 1,
    parallel_mode: ParallelMode = ParallelMode.NONE,
    custom_workers: Optional[int] = None,
    progress_callback: Optional[Callable[[int, int, DetectionResult], None]] = None,
    model_factory: Optional[PeakModelFactory] = None,
) -> dict[int, DetectionResult]:
    """
    Detect peaks in every spectrum of a run.

    Args:
        run: Spectra to process.
        parameters: Detector configuration.
        ms_level: Only process spectra of this MS level (None for all).
        parallel_mode: Parallelization intensity (NONE runs in-process).
        custom_workers: Number of workers for CUSTOM mode.
        progress_callback: Callback function(completed, total, result) for progress.
        model_factory: Peak model factory for lateral cleanup, see
            ExactMassDetector. Must be picklable when running in parallel.

    Returns:
        Detection results keyed by scan number, in scan order.
    """
    spectra = list(run.iter_ms_level(ms_level))
    if not spectra:
        return {}

    n_workers = min(
        get_system_resources().get_workers(parallel_mode, custom_workers),
        len(spectra),
    )
    level = f"MS{ms_level}" if ms_level is not None else "all"
    logger.info(
        f"Detecting peaks in {len(spectra)} {level} spectra with {n_workers} workers "
        f"(mode: {parallel_mode.name})"
    )

    results: dict[int, DetectionResult] = {}

    if n_workers == 1:
        detector = ExactMassDetector(parameters, model_factory=model_factory)
        for i, spectrum in enumerate(spectra):
            result = detector.detect(spectrum)
            results[spectrum.scan_number] = result
            if progress_callback:
                progress_callback(i + 1, len(spectra), result)
    else:
        with ProcessPoolExecutor(max_workers=n_workers) as executor:
            futures = {
                executor.submit(
                    _detect_spectrum, parameters, model_factory, spectrum
                ): spectrum.scan_number
                for spectrum in spectra
            }

            completed = 0
            for future in as_completed(futures):
                result = future.result()
                results[futures[future]] = result
                completed += 1
                if progress_callback:
                    progress_callback(completed, len(spectra), result)

        for spectrum in spectra:
            result = results[spectrum.scan_number]
            if result.degraded:
                _log_error(_cleanup_skipped(spectrum.scan_number, result.error))

    ordered = {spectrum.scan_number: results[spectrum.scan_number] for spectrum in spectra}

    n_peaks = sum(len(result) for result in ordered.values())
    n_degraded = sum(1 for result in ordered.values() if result.degraded)
    logger.info(
        f"Detection complete: {n_peaks} peaks in {len(ordered)} spectra"
        + (f", lateral cleanup failed in {n_degraded}" if n_degraded else "")
    )
    return ordered
