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
"""confinject DI Container — constructor injection plus configuration values."""

from confinject.container.container import Container
from confinject.container.exceptions import (
    BeanCreationException,
    BeanCurrentlyInCreationError,
    NoSuchBeanError,
)
from confinject.container.markers import (
    ConfigurationCoordinate,
    ConfigurationCoordinates,
    ConfigurationValue,
    configuration,
)
from confinject.container.producer import ConfigurationValueProducer
from confinject.container.types import Scope

__all__ = [
    "BeanCreationException",
    "BeanCurrentlyInCreationError",
    "ConfigurationCoordinate",
    "ConfigurationCoordinates",
    "ConfigurationValue",
    "ConfigurationValueProducer",
    "Container",
    "NoSuchBeanError",
    "Scope",
    "configuration",
]
