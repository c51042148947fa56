import math

from ..core.peak import MzRange
from .base import PeakModel
from .registry import PeakModelType, register_peak_model


@register_peak_model(PeakModelType.LORENTZIAN)
class LorentzianPeakModel(PeakModel):
    """
    Lorentzian (Cauchy) peak shape with half width gamma = FWHM / 2.

    Like the Gaussian model, the base ends where the curve falls to an
    intensity of 1. The tails are heavy, so the base of an intense peak is
    much wider than its FWHM.
    """

    def __init__(self, mz: float, intensity: float, resolution: int):
        super().__init__(mz, intensity, resolution)
        self._gamma_sq = (self.fwhm / 2.0) ** 2
        if self.intensity > 1.0:
            self._half_width = math.sqrt(self._gamma_sq * (self.intensity - 1.0))
        else:
            self._half_width = 0.0

    def base_peak_width(self) -> MzRange:
        return MzRange(self.mz - self._half_width, self.mz + self._half_width)

    def intensity_at(self, mz: float) -> float:
        diff = mz - self.mz
        return self.intensity * self._gamma_sq / (diff * diff + self._gamma_sq)
