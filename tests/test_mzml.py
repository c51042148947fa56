"""Tests for the mzML and mzXML scan source."""

import base64

import numpy as np
import pytest
from pyteomics.auxiliary import unitfloat

from profilecentroid.core import Polarity, SpectrumType
from profilecentroid.detection import ExactMassDetectorParameters, detect_run
from profilecentroid.io import MzMLReader, read_mzml
from profilecentroid.io.mzml import (
    _extract_scan_number,
    _parse_polarity,
    _parse_retention_time,
    _parse_spectrum_type,
)


@pytest.mark.parametrize(
    "native_id, index, expected",
    [
        ("controllerType=0 controllerNumber=1 scan=123", 0, 123),
        ("scan=7", 0, 7),
        ("spectrum=9", 0, 9),
        ("index=4", 0, 4),
        ("15", 0, 15),
        ("", 4, 5),
        ("unparseable", 9, 10),
    ],
)
def test_extract_scan_number(native_id, index, expected):
    assert _extract_scan_number(native_id, index) == expected


def test_spectrum_type_from_cv_terms():
    assert _parse_spectrum_type({"profile spectrum": True}) is SpectrumType.PROFILE
    assert _parse_spectrum_type({"centroid spectrum": True}) is SpectrumType.CENTROID
    assert _parse_spectrum_type({"centroided": "1"}) is SpectrumType.CENTROID
    assert _parse_spectrum_type({"centroided": "0"}) is SpectrumType.PROFILE


def test_spectrum_type_inferred_from_spacing():
    dense = np.linspace(400.0, 401.0, 500)
    sparse = np.array([100.0, 250.0, 400.0])
    assert _parse_spectrum_type({}, dense) is SpectrumType.PROFILE
    assert _parse_spectrum_type({}, sparse) is SpectrumType.UNKNOWN


def test_polarity():
    assert _parse_polarity({"positive scan": True}) is Polarity.POSITIVE
    assert _parse_polarity({"negative scan": True}) is Polarity.NEGATIVE
    assert _parse_polarity({"polarity": "+"}) is Polarity.POSITIVE
    assert _parse_polarity({}) is Polarity.UNKNOWN


def test_retention_time_in_seconds():
    mzml = {"scanList": {"scan": [{"scan start time": 1.5}]}}
    assert _parse_retention_time(mzml) == pytest.approx(90.0)
    in_seconds = {"scanList": {"scan": [{"scan start time": unitfloat(42.0, "second")}]}}
    assert _parse_retention_time(in_seconds) == pytest.approx(42.0)
    assert _parse_retention_time({}) == 0.0


def test_mzxml_retention_time_in_seconds():
    # pyteomics decodes the mzXML duration attribute to minutes
    assert _parse_retention_time({"retentionTime": unitfloat(1.5, "minute")}) == pytest.approx(90.0)
    assert _parse_retention_time({"retentionTime": "PT2M"}) == pytest.approx(120.0)
    assert _parse_retention_time({"retentionTime": "PT30.5S"}) == pytest.approx(30.5)
    assert _parse_retention_time({"retentionTime": 12.0}) == pytest.approx(12.0)


def test_parse_spectrum(tmp_path):
    path = tmp_path / "sample.mzML"
    path.write_text("")
    reader = MzMLReader(path)

    spectrum = reader.parse_spectrum(
        {
            "id": "controllerType=0 controllerNumber=1 scan=12",
            "ms level": 1,
            "positive scan": True,
            "profile spectrum": True,
            "base peak intensity": 80.0,
            "m/z array": [100.0, 100.01, 100.02],
            "intensity array": [0.0, 80.0, 0.0],
            "scanList": {"scan": [{"scan start time": 0.5}]},
        },
        index=11,
    )

    assert spectrum.scan_number == 12
    assert spectrum.ms_level == 1
    assert spectrum.retention_time == pytest.approx(30.0)
    assert spectrum.is_profile
    assert spectrum.metadata.polarity is Polarity.POSITIVE
    assert spectrum.base_peak_intensity == 80.0
    np.testing.assert_allclose(spectrum.intensity, [0.0, 80.0, 0.0])


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        MzMLReader(tmp_path / "missing.mzML")


def test_unsupported_extension(tmp_path):
    path = tmp_path / "sample.raw"
    path.write_text("")
    with pytest.raises(ValueError, match="Unsupported extension"):
        MzMLReader(path)


def test_iteration_requires_context_manager(tmp_path):
    path = tmp_path / "sample.mzML"
    path.write_text("")
    with pytest.raises(RuntimeError):
        next(iter(MzMLReader(path)))


MZXML_TEMPLATE = """<?xml version="1.0" encoding="ISO-8859-1"?>
<mzXML xmlns="http://sashimi.sourceforge.net/schema_revision/mzXML_3.2">
  <msRun scanCount="1">
    <scan num="7" msLevel="1" peaksCount="5" polarity="+" centroided="0"
          retentionTime="PT90S" basePeakIntensity="40">
      <peaks precision="32" byteOrder="network" contentType="m/z-int"
             compressionType="none" compressedLen="0">{peaks}</peaks>
    </scan>
  </msRun>
</mzXML>
"""


@pytest.fixture
def mzxml_file(tmp_path):
    mz = [100.0, 100.5, 101.0, 101.5, 102.0]
    intensity = [0.0, 30.0, 20.0, 40.0, 0.0]
    pairs = np.column_stack([mz, intensity]).astype(">f4").tobytes()
    path = tmp_path / "sample.mzXML"
    path.write_text(MZXML_TEMPLATE.format(peaks=base64.b64encode(pairs).decode("ascii")))
    return path


def test_read_mzxml(mzxml_file):
    run = read_mzml(mzxml_file)

    assert len(run) == 1
    spectrum = run[0]
    assert spectrum.scan_number == 7
    assert spectrum.ms_level == 1
    assert spectrum.retention_time == pytest.approx(90.0)
    assert spectrum.metadata.polarity is Polarity.POSITIVE
    assert spectrum.is_profile
    np.testing.assert_allclose(spectrum.mz, [100.0, 100.5, 101.0, 101.5, 102.0])
    np.testing.assert_allclose(spectrum.intensity, [0.0, 30.0, 20.0, 40.0, 0.0])


def test_detect_peaks_in_mzxml(mzxml_file):
    results = detect_run(read_mzml(mzxml_file), ExactMassDetectorParameters(noise_level=10))
    assert [peak.intensity for peak in results[7]] == [30.0, 40.0]
    assert results[7][0].mz == pytest.approx((100.5 * 30 + 101.0 * 20) / 50)
