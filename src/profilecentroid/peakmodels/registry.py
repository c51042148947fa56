from enum import Enum
from typing import TYPE_CHECKING

from ..exceptions import PeakModelError, UnknownPeakModelError

if TYPE_CHECKING:
    from .base import PeakModel, PeakModelFactory


class PeakModelType(str, Enum):
    GAUSSIAN = "gaussian"
    TRIANGLE = "triangle"
    LORENTZIAN = "lorentzian"


_PEAK_MODELS: dict[PeakModelType, type['PeakModel']] = {}


def register_peak_model(kind: PeakModelType):
    """Decorator to register a peak model class for a model type."""
    def decorator(model_class: type['PeakModel']) -> type['PeakModel']:
        _PEAK_MODELS[kind] = model_class
        model_class.name = kind.value
        return model_class
    return decorator


def resolve_peak_model_type(name: 'PeakModelType | str') -> PeakModelType:
    """
    Map a model name to its PeakModelType (case-insensitive).

    Raises:
        UnknownPeakModelError: If the name is not a known model type.
    """
    if isinstance(name, PeakModelType):
        return name
    try:
        return PeakModelType(str(name).strip().lower())
    except ValueError:
        raise UnknownPeakModelError(
            f"Unknown peak model '{name}'. Expected one of: {', '.join(list_peak_models())}"
        ) from None


def get_peak_model(name: 'PeakModelType | str') -> type['PeakModel']:
    """
    Get a registered peak model class by type or name.

    Raises:
        UnknownPeakModelError: If no model is registered under that name.
    """
    kind = resolve_peak_model_type(name)
    if kind not in _PEAK_MODELS:
        raise UnknownPeakModelError(f"No peak model registered for '{kind.value}'")
    return _PEAK_MODELS[kind]


def list_peak_models() -> list[str]:
    """Names of all registered peak models."""
    return [kind.value for kind in _PEAK_MODELS]


def peak_model_factory(name: 'PeakModelType | str') -> 'PeakModelFactory':
    """
    Build a factory creating models of the named type.

    The name is resolved each time the factory is called, so an unknown name
    surfaces as a PeakModelError from the first call rather than here.
    Construction failures of the model itself are re-raised as
    PeakModelError with the original exception chained.
    """
    def factory(mz: float, intensity: float, resolution: int) -> 'PeakModel':
        model_class = get_peak_model(name)
        try:
            return model_class(mz, intensity, resolution)
        except (ValueError, ArithmeticError) as e:
            raise PeakModelError(
                f"Error trying to make an instance of peak model {model_class.name}: {e}"
            ) from e

    return factory
