"""Unified exception hierarchy for confinject.

All library exceptions inherit from ConfinjectException, so a host can catch
one type to handle every configuration-wiring failure.

Categories:
- ResolutionError: a call site could not be turned into a lookup key
- ConfigurationNotFoundError: the backing store had no value for any name
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence


# =============================================================================
# Base Exception
# =============================================================================


class ConfinjectException(Exception):
    """Base exception for all confinject errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "RESOLUTION_NAME_UNAVAILABLE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Resolution Exceptions
# =============================================================================


class ResolutionError(ConfinjectException):
    """A call-site descriptor is malformed or cannot yield a lookup key."""

    def __init__(
        self,
        message: str,
        code: str | None = "RESOLUTION_FAILED",
        context: dict | None = None,
    ) -> None:
        super().__init__(message, code=code, context=context)


class NameUnavailableError(ResolutionError):
    """No configuration name was declared and the identifier is not introspectable.

    This is a build or packaging mistake rather than a transient condition:
    either restore the parameter names or pass an explicit name to
    ``ConfigurationValue``.
    """

    def __init__(self, *, callable_name: str, position: int | None) -> None:
        self.callable_name = callable_name
        self.position = position
        where = f"parameter at index {position}" if position is not None else "member"
        message = (
            f"The {where} in {callable_name or '<unknown>'} has no name available "
            "via introspection. Make sure its signature can be inspected, or supply "
            "an explicit name to ConfigurationValue."
        )
        super().__init__(
            message,
            code="RESOLUTION_NAME_UNAVAILABLE",
            context={"callable": callable_name, "position": position},
        )


# =============================================================================
# Store Exceptions
# =============================================================================


class ConfigurationNotFoundError(ConfinjectException):
    """None of the candidate names has a value and no default was supplied."""

    def __init__(self, names: Sequence[str], coordinates: Mapping[str, str]) -> None:
        self.names = tuple(names)
        self.coordinates = dict(coordinates)
        message = f"No configuration value found for any of {list(self.names)} in coordinates {self.coordinates}"
        super().__init__(
            message,
            code="CONFIGURATION_NOT_FOUND",
            context={"names": list(self.names), "coordinates": self.coordinates},
        )
