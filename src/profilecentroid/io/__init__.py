"""
I/O module for reading profile mass spectrometry data.

Readers:
- MzMLReader: Read mzML/mzXML files (pyteomics)

Convenience functions:
- read_mzml(): Load mzML to MSRun
"""

from .mzml import MzMLReader, read_mzml

__all__ = [
    "MzMLReader",
    "read_mzml",
]
