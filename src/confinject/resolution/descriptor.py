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
"""Call-site descriptors — immutable snapshots of an injection target and its enclosing scopes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Final

from confinject.kernel.exceptions import ResolutionError

UNSET: Final[str] = "\x00confinject.unset\x00"
"""Reserved marker standing in for "no value supplied"."""


class ScopeKind(Enum):
    """Kind of element a scope in the chain represents."""

    TYPE = auto()
    CALLABLE = auto()
    FIELD = auto()
    PARAMETER = auto()


@dataclass(frozen=True)
class ScopeElement:
    """One link in a call-site chain.

    ``namespace`` is ``None`` when the element carries no namespace annotation
    and ``""`` when it carries an empty one. ``names`` and ``default`` are only
    meaningful on the innermost element.
    """

    kind: ScopeKind
    identifier: str | None = None
    namespace: str | None = None
    coordinates: tuple[tuple[str, str], ...] | None = None
    names: tuple[str, ...] = ()
    default: str | None = UNSET
    position: int | None = None

    @property
    def declares_names(self) -> bool:
        return bool(self.names)

    @property
    def declares_default(self) -> bool:
        return self.default is not None and self.default != UNSET


@dataclass(frozen=True)
class CallSiteDescriptor:
    """Ordered chain of scopes, outermost first, ending at the injection target.

    Usage::

        CallSiteDescriptor.of(
            ScopeElement(ScopeKind.TYPE, "Service", namespace="java"),
            ScopeElement(ScopeKind.FIELD, "javaHome"),
        )
    """

    scopes: tuple[ScopeElement, ...]

    @classmethod
    def of(cls, *scopes: ScopeElement) -> CallSiteDescriptor:
        return cls(tuple(scopes))

    @property
    def innermost(self) -> ScopeElement:
        if not self.scopes:
            raise ResolutionError("Call-site descriptor has an empty scope chain", code="RESOLUTION_EMPTY_CHAIN")
        return self.scopes[-1]

    def ancestors(self) -> Iterator[ScopeElement]:
        """Yield enclosing scopes from the immediate parent outward to the root."""
        return reversed(self.scopes[:-1])

    def owner_name(self) -> str:
        """Dotted identifiers of the enclosing scopes, for diagnostics."""
        return ".".join(s.identifier or "?" for s in self.scopes[:-1])

    def validate(self) -> None:
        """Raise ResolutionError if the chain violates its structural invariants."""
        if not self.scopes:
            raise ResolutionError("Call-site descriptor has an empty scope chain", code="RESOLUTION_EMPTY_CHAIN")
        for scope in self.scopes[:-1]:
            if scope.declares_names or scope.declares_default:
                raise ResolutionError(
                    f"Only the innermost scope may declare names or a default; "
                    f"found them on {scope.kind.name.lower()} '{scope.identifier}'",
                    context={"scope": scope.identifier},
                )
