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
"""Candidate property names for a call site."""

from __future__ import annotations

from confinject.kernel.exceptions import NameUnavailableError, ResolutionError
from confinject.resolution.descriptor import UNSET, CallSiteDescriptor


class NameResolver:
    """Computes the ordered list of candidate names for the innermost scope.

    Declared names win, in declaration order, with empty and ``UNSET`` entries
    dropped. With nothing declared the syntactic identifier of the call site
    is used; if that is not introspectable, ``NameUnavailableError`` is raised.
    """

    def resolve(self, descriptor: CallSiteDescriptor) -> list[str]:
        innermost = descriptor.innermost

        if innermost.declares_names:
            names: list[str] = []
            for name in innermost.names:
                if name and name != UNSET and name not in names:
                    names.append(name)
            if not names:
                raise ResolutionError(
                    f"Every name declared on '{innermost.identifier}' is empty",
                    code="RESOLUTION_NO_NAMES",
                    context={"declared": list(innermost.names)},
                )
            return names

        if not innermost.identifier:
            raise NameUnavailableError(
                callable_name=descriptor.owner_name(),
                position=innermost.position,
            )
        return [innermost.identifier]
