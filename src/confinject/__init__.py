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
"""confinject — configuration value injection for a lightweight DI container."""

from confinject.bootstrap import bootstrap
from confinject.config import Config, Configurations, ConfigStore
from confinject.container import (
    ConfigurationCoordinate,
    ConfigurationCoordinates,
    ConfigurationValue,
    Container,
    Scope,
    configuration,
)
from confinject.kernel import (
    ConfigurationNotFoundError,
    ConfinjectException,
    NameUnavailableError,
    ResolutionError,
)
from confinject.resolution import UNSET, CallSiteDescriptor, KeyResolver, ResolvedKey, ScopeElement, ScopeKind

__version__ = "0.1.0"

__all__ = [
    "CallSiteDescriptor",
    "Config",
    "ConfigStore",
    "ConfigurationCoordinate",
    "ConfigurationCoordinates",
    "ConfigurationNotFoundError",
    "ConfigurationValue",
    "Configurations",
    "ConfinjectException",
    "Container",
    "KeyResolver",
    "NameUnavailableError",
    "ResolutionError",
    "ResolvedKey",
    "Scope",
    "ScopeElement",
    "ScopeKind",
    "UNSET",
    "bootstrap",
    "configuration",
]
