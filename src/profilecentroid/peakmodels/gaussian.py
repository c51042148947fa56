import math

from ..core.peak import MzRange
from .base import PeakModel
from .registry import PeakModelType, register_peak_model

# FWHM = 2 * sqrt(2 * ln 2) * sigma
FWHM_TO_SIGMA = 2.354820045


@register_peak_model(PeakModelType.GAUSSIAN)
class GaussianPeakModel(PeakModel):
    """
    Gaussian peak shape.

    The base of the peak is where the curve falls to an intensity of 1;
    peaks of intensity <= 1 have a zero-width base at their center.
    """

    def __init__(self, mz: float, intensity: float, resolution: int):
        super().__init__(mz, intensity, resolution)
        sigma = self.fwhm / FWHM_TO_SIGMA
        self._two_sigma_sq = 2.0 * sigma * sigma
        if self.intensity > 1.0:
            self._half_width = math.sqrt(self._two_sigma_sq * math.log(self.intensity))
        else:
            self._half_width = 0.0

    def base_peak_width(self) -> MzRange:
        return MzRange(self.mz - self._half_width, self.mz + self._half_width)

    def intensity_at(self, mz: float) -> float:
        diff = mz - self.mz
        return self.intensity * math.exp(-(diff * diff) / self._two_sigma_sq)
