from ..core.peak import MzRange
from .base import PeakModel
from .registry import PeakModelType, register_peak_model


@register_peak_model(PeakModelType.TRIANGLE)
class TrianglePeakModel(PeakModel):
    """Isosceles triangle: linear decay to zero at one FWHM either side."""

    def base_peak_width(self) -> MzRange:
        return MzRange(self.mz - self.fwhm, self.mz + self.fwhm)

    def intensity_at(self, mz: float) -> float:
        distance = abs(mz - self.mz)
        if distance >= self.fwhm:
            return 0.0
        return self.intensity * (1.0 - distance / self.fwhm)
