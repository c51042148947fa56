"""
MSRun: the scans of a single acquisition.

Mass detection works scan by scan; MSRun is the container the scan source
fills and run-level detection iterates over.
"""

from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Optional, overload

from .scan_metadata import Polarity, SpectrumType
from .spectrum import Spectrum


class MSRun(Sequence[Spectrum]):
    """
    Spectra of one acquisition, kept sorted by scan number.

    Example:
        >>> import numpy as np
        >>> from profilecentroid.core import MSRun, ScanMetadata, Spectrum
        >>> run = MSRun([
        ...     Spectrum(np.array([100.0]), np.array([1000.0]), ScanMetadata(scan_number=2)),
        ...     Spectrum(np.array([200.0]), np.array([500.0]), ScanMetadata(scan_number=1)),
        ... ])
        >>> run.scan_numbers
        [1, 2]
    """

    def __init__(
        self,
        spectra: Optional[list[Spectrum]] = None,
        source_file: Optional[Path | str] = None,
    ):
        """
        Initialize an MSRun.

        Args:
            spectra: Spectrum objects (will be sorted by scan number).
            source_file: File the spectra were read from, if any.

        Raises:
            ValueError: If two spectra share a scan number.
        """
        self.source_file = Path(source_file) if source_file is not None else None
        self._spectra: list[Spectrum] = sorted(spectra or [], key=lambda s: s.scan_number)
        self._scan_index: dict[int, int] = {}
        for idx, spec in enumerate(self._spectra):
            if spec.scan_number in self._scan_index:
                raise ValueError(f"Scan number {spec.scan_number} appears more than once")
            self._scan_index[spec.scan_number] = idx

    @overload
    def __getitem__(self, index: int) -> Spectrum: ...

    @overload
    def __getitem__(self, index: slice) -> list[Spectrum]: ...

    def __getitem__(self, index: int | slice) -> Spectrum | list[Spectrum]:
        """Get spectrum by position (scan order)."""
        return self._spectra[index]

    def __len__(self) -> int:
        return len(self._spectra)

    def __iter__(self) -> Iterator[Spectrum]:
        return iter(self._spectra)

    def __contains__(self, item: object) -> bool:
        """Check if spectrum or scan number is in run."""
        if isinstance(item, int):
            return item in self._scan_index
        if isinstance(item, Spectrum):
            return item.scan_number in self._scan_index
        return False

    def get_by_scan(self, scan_number: int) -> Spectrum:
        """
        Get spectrum by scan number.

        Raises:
            KeyError: If scan number not found.
        """
        if scan_number not in self._scan_index:
            raise KeyError(f"Scan number {scan_number} not found in run")
        return self._spectra[self._scan_index[scan_number]]

    def iter_ms_level(self, ms_level: Optional[int]) -> Iterator[Spectrum]:
        """Iterate over spectra of one MS level, or all spectra for None."""
        for spectrum in self._spectra:
            if ms_level is None or spectrum.ms_level == ms_level:
                yield spectrum

    @property
    def scan_numbers(self) -> list[int]:
        """List of all scan numbers in order."""
        return [spec.scan_number for spec in self._spectra]

    def get_ms_level_counts(self) -> dict[int, int]:
        """Return count of spectra per MS level."""
        counts: dict[int, int] = {}
        for spectrum in self._spectra:
            counts[spectrum.ms_level] = counts.get(spectrum.ms_level, 0) + 1
        return counts

    def summary(self) -> dict:
        """
        Generate a summary of the run.

        Returns:
            Dictionary with run statistics.
        """
        summary = {
            'n_spectra': len(self),
            'ms_level_counts': self.get_ms_level_counts(),
            'scan_range': (self.scan_numbers[0], self.scan_numbers[-1]) if self._spectra else None,
            'rt_range_seconds': None,
            'n_profile': sum(1 for s in self._spectra if s.is_profile),
        }
        if self._spectra:
            times = [s.retention_time for s in self._spectra]
            summary['rt_range_seconds'] = (min(times), max(times))
        if self.source_file:
            summary['source_file'] = str(self.source_file)
        return summary

    def filter(
        self,
        ms_level: Optional[int] = None,
        rt_range: Optional[tuple[float, float]] = None,
        polarity: Optional[Polarity] = None,
        spectrum_type: Optional[SpectrumType] = None,
    ) -> 'MSRun':
        """
        Create a new MSRun with filtered spectra.

        Args:
            ms_level: Keep only spectra with this MS level.
            rt_range: Keep spectra within (rt_min, rt_max) in seconds, inclusive.
            polarity: Keep only spectra with this polarity.
            spectrum_type: Keep only spectra with this type (profile/centroid).

        Returns:
            New MSRun sharing the spectra and source file of this one.
        """
        filtered = self._spectra

        if ms_level is not None:
            filtered = [s for s in filtered if s.ms_level == ms_level]

        if rt_range is not None:
            rt_min, rt_max = rt_range
            filtered = [s for s in filtered if rt_min <= s.retention_time <= rt_max]

        if polarity is not None:
            filtered = [s for s in filtered if s.metadata.polarity == polarity]

        if spectrum_type is not None:
            filtered = [s for s in filtered if s.metadata.spectrum_type == spectrum_type]

        return MSRun(spectra=filtered, source_file=self.source_file)

    def __repr__(self) -> str:
        ms_counts = self.get_ms_level_counts()
        ms_str = ", ".join(f"MS{k}:{v}" for k, v in sorted(ms_counts.items()))
        source = f", source={self.source_file.name}" if self.source_file else ""
        return f"MSRun({len(self)} spectra, {ms_str}{source})"
