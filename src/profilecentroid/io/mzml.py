"""
mzML file reader using pyteomics.

This module provides the MzMLReader class that supplies profile spectra
from mzML and mzXML files, the open interchange formats for mass
spectrometry data.
"""

import re
from collections.abc import Iterator
from pathlib import Path
from typing import ClassVar, Optional

import numpy as np

from ..core import MSRun, Polarity, ScanMetadata, Spectrum, SpectrumType


def _parse_polarity(spectrum_data: dict) -> Polarity:
    """Parse polarity from mzML spectrum dictionary."""
    if spectrum_data.get('positive scan'):
        return Polarity.POSITIVE
    if spectrum_data.get('negative scan'):
        return Polarity.NEGATIVE
    polarity = spectrum_data.get('polarity')  # mzXML attribute
    if polarity == '+':
        return Polarity.POSITIVE
    if polarity == '-':
        return Polarity.NEGATIVE
    return Polarity.UNKNOWN


def _parse_spectrum_type(spectrum_data: dict, mz_array: Optional[np.ndarray] = None) -> SpectrumType:
    """
    Parse spectrum type (profile/centroid) from a spectrum dictionary.

    If the file does not say, profile data is recognised by many closely
    and evenly spaced m/z values.
    """
    if spectrum_data.get('profile spectrum'):
        return SpectrumType.PROFILE
    if spectrum_data.get('centroid spectrum'):
        return SpectrumType.CENTROID
    centroided = spectrum_data.get('centroided')  # mzXML attribute
    if centroided is not None:
        return SpectrumType.CENTROID if int(centroided) else SpectrumType.PROFILE

    if mz_array is not None and len(mz_array) > 100:
        diffs = np.diff(mz_array[:100])
        median_diff = np.median(diffs)
        std_diff = np.std(diffs)
        if median_diff < 0.1 and std_diff / (median_diff + 1e-10) < 0.5:
            return SpectrumType.PROFILE
        if len(mz_array) > 1000:
            return SpectrumType.PROFILE

    return SpectrumType.UNKNOWN


def _extract_scan_number(native_id: str, index: int) -> int:
    """
    Extract scan number from native ID string.

    Handles "controllerType=0 controllerNumber=1 scan=123", "scan=123",
    "spectrum=123", "index=123" and plain numbers; falls back to index + 1.
    """
    if not native_id:
        return index + 1

    for pattern in (r'scan=(\d+)', r'spectrum=(\d+)', r'index=(\d+)', r'^(\d+)$'):
        match = re.search(pattern, str(native_id))
        if match:
            return int(match.group(1))

    return index + 1


def _seconds(rt, default_unit: str) -> float:
    unit = getattr(rt, 'unit_info', None) or default_unit
    return float(rt) * 60.0 if unit == 'minute' else float(rt)


def _parse_retention_time(spectrum_data: dict) -> float:
    """
    Retention time in seconds.

    pyteomics reports mzML scan start times with their unit, and decodes the
    mzXML retentionTime duration to minutes.
    """
    scans = spectrum_data.get('scanList', {}).get('scan', [])
    if scans:
        scan_info = scans[0] if isinstance(scans, list) else scans
        rt = scan_info.get('scan start time')
        if rt is not None:
            return _seconds(rt, 'minute')

    rt = spectrum_data.get('retentionTime')
    if rt is None:
        return 0.0
    if isinstance(rt, str):
        # undecoded ISO 8601 duration
        match = re.match(r'PT([\d.]+)([SM])', rt)
        if match:
            value = float(match.group(1))
            return value * 60.0 if match.group(2) == 'M' else value
        return 0.0
    # a bare number is the raw attribute value, in seconds
    return _seconds(rt, 'second')


def _optional_float(value) -> Optional[float]:
    return float(value) if value is not None else None


class MzMLReader:
    """
    Reader for mzML and mzXML files using pyteomics.

    Example:
        >>> with MzMLReader("sample.mzML") as reader:
        ...     for spectrum in reader:
        ...         print(spectrum.scan_number, spectrum.is_profile)
    """

    supported_extensions: ClassVar[list[str]] = ['.mzml', '.mzxml']

    def __init__(self, path: Path | str):
        """
        Initialize the reader.

        Args:
            path: Path to mzML or mzXML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the extension is not supported.
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"File not found: {self.path}")
        suffix = self.path.suffix.lower()
        if suffix not in self.supported_extensions:
            raise ValueError(
                f"Unsupported extension {suffix}. Expected: {self.supported_extensions}"
            )
        self._is_mzxml = suffix == '.mzxml'
        self._reader = None

    def __enter__(self) -> 'MzMLReader':
        """Open the file for reading."""
        if self._is_mzxml:
            from pyteomics import mzxml
            self._reader = mzxml.MzXML(str(self.path))
        else:
            from pyteomics import mzml
            self._reader = mzml.MzML(str(self.path))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close the file."""
        if self._reader is not None:
            self._reader.close()
            self._reader = None

    def __iter__(self) -> Iterator[Spectrum]:
        """Iterate over all spectra in the file."""
        if self._reader is None:
            raise RuntimeError("Reader not opened. Use 'with' context manager.")

        self._reader.reset()
        for idx, spectrum_data in enumerate(self._reader):
            yield self.parse_spectrum(spectrum_data, idx)

    def parse_spectrum(self, spectrum_data: dict, index: int) -> Spectrum:
        """
        Parse a pyteomics spectrum dictionary into a Spectrum object.

        Args:
            spectrum_data: Dictionary from pyteomics.
            index: Position in file (0-based).
        """
        native_id = str(spectrum_data.get('id') or spectrum_data.get('num') or '')
        mz = np.asarray(spectrum_data.get('m/z array', []), dtype=np.float64)
        intensity = np.asarray(spectrum_data.get('intensity array', []), dtype=np.float64)

        ms_level = spectrum_data.get('ms level', spectrum_data.get('msLevel', 1))

        metadata = ScanMetadata(
            scan_number=_extract_scan_number(native_id, index),
            ms_level=int(ms_level),
            retention_time=_parse_retention_time(spectrum_data),
            polarity=_parse_polarity(spectrum_data),
            spectrum_type=_parse_spectrum_type(spectrum_data, mz),
            total_ion_current=_optional_float(
                spectrum_data.get('total ion current', spectrum_data.get('totIonCurrent'))
            ),
            base_peak_mz=_optional_float(
                spectrum_data.get('base peak m/z', spectrum_data.get('basePeakMz'))
            ),
            base_peak_intensity=_optional_float(
                spectrum_data.get('base peak intensity', spectrum_data.get('basePeakIntensity'))
            ),
            native_id=native_id or None,
        )
        return Spectrum(mz=mz, intensity=intensity, metadata=metadata)

    def to_run(self) -> MSRun:
        """
        Load the entire file into an MSRun object.

        This loads all spectra into memory. For large files,
        consider iterating directly instead.
        """
        return MSRun(spectra=list(self), source_file=self.path)


def read_mzml(path: Path | str) -> MSRun:
    """
    Convenience function to read an mzML file into an MSRun.

    Example:
        >>> run = read_mzml("sample.mzML")
        >>> print(f"Loaded {len(run)} spectra")
    """
    with MzMLReader(path) as reader:
        return reader.to_run()
