"""
Core data structures for profilecentroid.

- Spectrum: a profile scan with m/z-intensity data
- ScanMetadata: acquisition context of a scan
- MSRun: the scans of one acquisition
- RawPoint: one m/z-intensity sample
- MzRange: closed m/z interval
- MzPeak: a centroided peak and its supporting samples

Enums for categorical metadata:
- Polarity: Ion polarity (positive/negative)
- SpectrumType: Data mode (profile/centroid)
"""

from .peak import MzPeak, MzRange, RawPoint
from .scan_metadata import Polarity, ScanMetadata, SpectrumType
from .spectrum import Spectrum
from .run import MSRun

__all__ = [
    # Main classes
    "Spectrum",
    "ScanMetadata",
    "MSRun",
    "RawPoint",
    "MzRange",
    "MzPeak",
    # Enums
    "Polarity",
    "SpectrumType",
]
