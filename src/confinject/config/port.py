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
"""Configurations — the port a backing configuration store implements."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Configurations(Protocol):
    """Port for the store that holds and converts configuration values.

    ``converters`` advertises the types the store can produce; the container
    registers one configuration-value producer per advertised type.
    """

    @property
    def coordinates(self) -> Mapping[str, str]: ...

    @property
    def converters(self) -> Mapping[type, Callable[[str], Any]]: ...

    def lookup(
        self,
        coordinates: Mapping[str, str],
        names: Sequence[str],
        target_type: type,
        default_value: str | None = None,
    ) -> Any: ...
