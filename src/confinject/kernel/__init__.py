"""confinject Kernel — foundation layer with zero external dependencies."""

from confinject.kernel.exceptions import (
    ConfigurationNotFoundError,
    ConfinjectException,
    NameUnavailableError,
    ResolutionError,
)

__all__ = [
    "ConfigurationNotFoundError",
    "ConfinjectException",
    "NameUnavailableError",
    "ResolutionError",
]
