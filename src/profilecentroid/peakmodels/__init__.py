"""
Peak-shape models used by lateral peak cleanup.

Models:
- GaussianPeakModel: Gaussian profile, base at intensity 1
- TrianglePeakModel: linear decay over one FWHM either side
- LorentzianPeakModel: Lorentzian profile, base at intensity 1

Registry:
- PeakModelType: Enum of the available model names
- register_peak_model(): Decorator registering a model class
- get_peak_model(): Look up a model class by name
- peak_model_factory(): Factory callable used by the detector
"""

from .base import PeakModel, PeakModelFactory
from .registry import (
    PeakModelType,
    get_peak_model,
    list_peak_models,
    peak_model_factory,
    register_peak_model,
    resolve_peak_model_type,
)
from .gaussian import GaussianPeakModel
from .triangle import TrianglePeakModel
from .lorentzian import LorentzianPeakModel

__all__ = [
    # Base
    "PeakModel",
    "PeakModelFactory",
    # Models
    "GaussianPeakModel",
    "TrianglePeakModel",
    "LorentzianPeakModel",
    # Registry
    "PeakModelType",
    "register_peak_model",
    "resolve_peak_model_type",
    "get_peak_model",
    "list_peak_models",
    "peak_model_factory",
]
