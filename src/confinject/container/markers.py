# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Markers requesting configuration injection: values, coordinates and namespaces."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from confinject.resolution.descriptor import UNSET

T = TypeVar("T")

NAMESPACE_ATTR = "__confinject_namespace__"


class ConfigurationValue:
    """Marks a field or parameter as wanting a configuration value.

    Usage::

        class JavaSettings:
            home: str = ConfigurationValue("java.home")
            vendor: str = ConfigurationValue(default="unknown")

            def __init__(self, version: Annotated[str, ConfigurationValue()]) -> None:
                ...

    With no names the field or parameter name is used. ``default`` is handed
    to the store as-is; ``""`` is a real empty default.

    Args:
        *names: Candidate property names, most preferred first.
        default: Raw default value, or ``UNSET`` for none.
    """

    __slots__ = ("names", "default")

    def __init__(self, *names: str, default: str | None = UNSET) -> None:
        self.names = names
        self.default = default

    def __repr__(self) -> str:
        parts = [repr(n) for n in self.names]
        if self.default is not None and self.default != UNSET:
            parts.append(f"default={self.default!r}")
        return f"ConfigurationValue({', '.join(parts)})"


class ConfigurationCoordinate:
    """One coordinate declared on a call site, used as ``Annotated`` metadata.

    Usage::

        def start(self, home: Annotated[
            str,
            ConfigurationValue("java.home"),
            ConfigurationCoordinate("region", "us"),
        ]) -> None: ...
    """

    __slots__ = ("name", "value")

    def __init__(self, name: str, value: str = "") -> None:
        self.name = name
        self.value = value

    def __repr__(self) -> str:
        return f"ConfigurationCoordinate({self.name!r}, {self.value!r})"


class ConfigurationCoordinates:
    """A group of coordinates declared together."""

    __slots__ = ("coordinates",)

    def __init__(self, *coordinates: ConfigurationCoordinate) -> None:
        self.coordinates = coordinates

    def __repr__(self) -> str:
        return f"ConfigurationCoordinates({', '.join(repr(c) for c in self.coordinates)})"


@overload
def configuration(target: str = "") -> Callable[[T], T]: ...


@overload
def configuration(target: T) -> T: ...


def configuration(target: Any = "") -> Any:
    """Declare the namespace fragment for configuration names inside a class or callable.

    Usage::

        @configuration("java")
        class JavaSettings:
            home: str = ConfigurationValue()   # looks up "java.home"

    Bare ``@configuration`` declares an empty namespace, which stops outer
    namespaces from applying.
    """

    if target is not None and not isinstance(target, str):
        setattr(target, NAMESPACE_ATTR, "")
        return target

    namespace = target or ""

    def decorator(obj: T) -> T:
        setattr(obj, NAMESPACE_ATTR, namespace)
        return obj

    return decorator
