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
"""Merging of ambient and call-site coordinates."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from confinject.kernel.exceptions import ResolutionError


class CoordinateMerger:
    """Overlays declared coordinates on the ambient context without overriding it.

    The ambient map is the base. A declared pair is added only when its name
    is not already present, so a call site can introduce new dimensions but
    never redefine deployment-wide ones such as ``env`` or ``region``.
    """

    def merge(
        self,
        ambient: Mapping[str, str] | None,
        declared: Iterable[tuple[str, str]] | None,
    ) -> dict[str, str]:
        merged: dict[str, str] = dict(ambient or {})
        if declared is None:
            return merged

        seen: set[str] = set()
        for name, value in declared:
            if name in seen:
                raise ResolutionError(
                    f"Duplicate coordinate '{name}' in declared coordinate set",
                    code="RESOLUTION_DUPLICATE_COORDINATE",
                    context={"coordinate": name},
                )
            seen.add(name)
            merged.setdefault(name, value)
        return merged
