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
"""Building call-site descriptors from classes, callables and their annotations."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Annotated, Any, get_args, get_origin

from confinject.container.markers import (
    NAMESPACE_ATTR,
    ConfigurationCoordinate,
    ConfigurationCoordinates,
    ConfigurationValue,
)
from confinject.resolution.descriptor import CallSiteDescriptor, ScopeElement, ScopeKind


def split_annotated(hint: Any) -> tuple[Any, tuple[Any, ...]]:
    """Return ``(base_type, metadata)`` for ``Annotated[T, ...]``, else ``(hint, ())``."""
    if get_origin(hint) is Annotated:
        args = get_args(hint)
        return args[0], tuple(args[1:])
    return hint, ()


def find_marker(metadata: tuple[Any, ...]) -> ConfigurationValue | None:
    for item in metadata:
        if isinstance(item, ConfigurationValue):
            return item
    return None


def declared_coordinates(metadata: tuple[Any, ...]) -> tuple[tuple[str, str], ...] | None:
    """Coordinate pairs declared in ``Annotated`` metadata, or ``None`` if there are none."""
    pairs: list[tuple[str, str]] = []
    found = False
    for item in metadata:
        if isinstance(item, ConfigurationCoordinate):
            pairs.append((item.name, item.value))
            found = True
        elif isinstance(item, ConfigurationCoordinates):
            pairs.extend((c.name, c.value) for c in item.coordinates)
            found = True
    return tuple(pairs) if found else None


def namespace_of(obj: Any) -> str | None:
    """The namespace declared directly on *obj*; inherited declarations do not count."""
    try:
        return vars(obj).get(NAMESPACE_ATTR)
    except TypeError:
        return None


def enclosing_types(module_name: str, qualname: str) -> list[type]:
    """Classes lexically enclosing the object named *qualname*, outermost first.

    Objects defined inside a function (``<locals>`` in the qualname) are not
    reachable from their module, so the walk yields nothing for them.
    """
    parts = qualname.split(".")[:-1]
    if "<locals>" in parts:
        return []

    current: Any = sys.modules.get(module_name)
    chain: list[type] = []
    for part in parts:
        current = getattr(current, part, None)
        if not isinstance(current, type):
            return []
        chain.append(current)
    return chain


def _type_scope(cls: type) -> ScopeElement:
    return ScopeElement(ScopeKind.TYPE, identifier=cls.__name__, namespace=namespace_of(cls))


def declaring_class(cls: type, attr_name: str) -> type:
    for klass in cls.__mro__:
        if attr_name in vars(klass):
            return klass
    return cls


def describe_field(owner: type, attr_name: str, hint: Any, marker: ConfigurationValue) -> CallSiteDescriptor:
    """Descriptor for a class attribute whose default is a ``ConfigurationValue``."""
    owner = declaring_class(owner, attr_name)
    _, metadata = split_annotated(hint)
    scopes = [_type_scope(t) for t in enclosing_types(owner.__module__, owner.__qualname__)]
    scopes.append(_type_scope(owner))
    scopes.append(
        ScopeElement(
            ScopeKind.FIELD,
            identifier=attr_name,
            coordinates=declared_coordinates(metadata),
            names=tuple(marker.names),
            default=marker.default,
        )
    )
    return CallSiteDescriptor(tuple(scopes))


def describe_parameter(
    func: Callable[..., Any],
    name: str | None,
    position: int,
    hint: Any,
    marker: ConfigurationValue,
    owner: type | None = None,
) -> CallSiteDescriptor:
    """Descriptor for a callable parameter annotated with ``ConfigurationValue``.

    *name* is ``None`` when the host could not introspect the parameter name.
    *owner* is the class declaring *func* when the host already knows it.
    """
    func = getattr(func, "__func__", func)
    _, metadata = split_annotated(hint)
    module_name = getattr(func, "__module__", "") or ""
    qualname = getattr(func, "__qualname__", getattr(func, "__name__", ""))

    if owner is not None:
        scopes = [_type_scope(t) for t in enclosing_types(owner.__module__, owner.__qualname__)]
        scopes.append(_type_scope(owner))
    else:
        scopes = [_type_scope(t) for t in enclosing_types(module_name, qualname)]
    scopes.append(
        ScopeElement(
            ScopeKind.CALLABLE,
            identifier=getattr(func, "__name__", None),
            namespace=namespace_of(func),
        )
    )
    scopes.append(
        ScopeElement(
            ScopeKind.PARAMETER,
            identifier=name,
            coordinates=declared_coordinates(metadata),
            names=tuple(marker.names),
            default=marker.default,
            position=position,
        )
    )
    return CallSiteDescriptor(tuple(scopes))
