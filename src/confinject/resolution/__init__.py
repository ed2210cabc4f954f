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
"""confinject Resolution — call-site descriptors to configuration lookup keys."""

from confinject.resolution.coordinates import CoordinateMerger
from confinject.resolution.defaults import DefaultValueDecoder
from confinject.resolution.descriptor import UNSET, CallSiteDescriptor, ScopeElement, ScopeKind
from confinject.resolution.names import NameResolver
from confinject.resolution.prefix import PrefixComposer
from confinject.resolution.resolver import KeyResolver, ResolvedKey

__all__ = [
    "CallSiteDescriptor",
    "CoordinateMerger",
    "DefaultValueDecoder",
    "KeyResolver",
    "NameResolver",
    "PrefixComposer",
    "ResolvedKey",
    "ScopeElement",
    "ScopeKind",
    "UNSET",
]
