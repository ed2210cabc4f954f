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
"""KeyResolver — turns a call-site descriptor into a ResolvedKey."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from confinject.resolution.coordinates import CoordinateMerger
from confinject.resolution.defaults import DefaultValueDecoder
from confinject.resolution.descriptor import CallSiteDescriptor
from confinject.resolution.names import NameResolver
from confinject.resolution.prefix import PrefixComposer


@dataclass(frozen=True)
class ResolvedKey:
    """Everything the backing store needs to look up one configuration value.

    Attributes:
        names: Candidate property names, most preferred first.
        coordinates: Read-only coordinate context for the lookup.
        default_value: ``None`` when no default was supplied; ``""`` is a
            real empty-string default.
    """

    names: tuple[str, ...]
    coordinates: Mapping[str, str] = field(default_factory=dict, hash=False)
    default_value: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", MappingProxyType(dict(self.coordinates)))


class KeyResolver:
    """Orchestrates name, prefix, coordinate and default resolution.

    ``resolve`` is a pure function of its arguments: it holds no mutable
    state, performs no I/O and may be called concurrently. The first failing
    step aborts the whole resolution.
    """

    def __init__(
        self,
        names: NameResolver | None = None,
        prefixes: PrefixComposer | None = None,
        coordinates: CoordinateMerger | None = None,
        defaults: DefaultValueDecoder | None = None,
    ) -> None:
        self._names = names or NameResolver()
        self._prefixes = prefixes or PrefixComposer()
        self._coordinates = coordinates or CoordinateMerger()
        self._defaults = defaults or DefaultValueDecoder()

    def resolve(
        self,
        descriptor: CallSiteDescriptor,
        coordinates: Mapping[str, str] | None = None,
    ) -> ResolvedKey:
        """Resolve *descriptor* against the ambient *coordinates*.

        Raises:
            NameUnavailableError: no declared names and no introspectable identifier.
            ResolutionError: the descriptor is malformed.
        """
        descriptor.validate()
        innermost = descriptor.innermost

        names = self._names.resolve(descriptor)
        names = self._prefixes.compose(descriptor, names)
        merged = self._coordinates.merge(coordinates, innermost.coordinates)
        default_value = self._defaults.decode(innermost.default)

        return ResolvedKey(names=tuple(names), coordinates=merged, default_value=default_value)
