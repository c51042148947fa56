"""
Exception hierarchy for profilecentroid.

Configuration problems with peak-shape models are the only errors raised
inside detection, and the detector recovers from them. Invalid parameter
values and malformed spectra raise ValueError at construction time.
"""


class ProfileCentroidError(Exception):
    """Base class for all profilecentroid-specific exceptions."""


class PeakModelError(ProfileCentroidError):
    """A peak-shape model could not be constructed."""


class UnknownPeakModelError(PeakModelError, KeyError):
    """The configured peak-shape model name is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


__all__ = [
    "ProfileCentroidError",
    "PeakModelError",
    "UnknownPeakModelError",
]
