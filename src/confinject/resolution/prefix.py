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
"""Namespace prefix composition over the enclosing-scope chain."""

from __future__ import annotations

from collections.abc import Sequence

from confinject.resolution.descriptor import CallSiteDescriptor


class PrefixComposer:
    """Prepends the nearest ancestor's namespace fragment to each name.

    Only one fragment is ever applied: the walk from the immediate parent
    outward stops at the first scope carrying a namespace annotation, even
    when that annotation is empty.
    """

    def find_namespace(self, descriptor: CallSiteDescriptor) -> str:
        for scope in descriptor.ancestors():
            if scope.namespace is not None:
                return scope.namespace
        return ""

    def compose(self, descriptor: CallSiteDescriptor, names: Sequence[str]) -> list[str]:
        fragment = self.find_namespace(descriptor)
        if not fragment:
            return list(names)
        return [f"{fragment}.{name}" for name in names]
