from abc import ABC, abstractmethod
from collections.abc import Callable

from ..core.peak import MzRange


class PeakModel(ABC):
    """
    Abstract base class for peak-shape models.

    A model describes the profile a peak of a given centroid m/z and apex
    intensity is expected to have at a given mass resolution. Instances are
    immutable evaluators; all concrete models derive their full width at
    half maximum as ``mz / resolution``.
    """

    name: str = ""

    def __init__(self, mz: float, intensity: float, resolution: int):
        if resolution <= 0:
            raise ValueError(f"resolution must be > 0, got {resolution}")
        if intensity < 0:
            raise ValueError(f"intensity must be >= 0, got {intensity}")
        self.mz = float(mz)
        self.intensity = float(intensity)
        self.resolution = resolution
        self.fwhm = self.mz / resolution

    @abstractmethod
    def base_peak_width(self) -> MzRange:
        """
        m/z interval covered by the base of the peak.

        The interval always contains the center m/z.
        """
        ...

    @abstractmethod
    def intensity_at(self, mz: float) -> float:
        """Expected intensity at mz; non-increasing away from the center."""
        ...

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(mz={self.mz:.4f}, "
            f"intensity={self.intensity:.1f}, resolution={self.resolution})"
        )


# (mz, intensity, resolution) -> model
PeakModelFactory = Callable[[float, float, int], PeakModel]
