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
"""ConfigurationValueProducer — resolves an injection site and asks the store for its value."""

from __future__ import annotations

from typing import Any

import structlog

from confinject.config.port import Configurations
from confinject.kernel.exceptions import ResolutionError
from confinject.resolution.descriptor import CallSiteDescriptor
from confinject.resolution.resolver import KeyResolver

logger = structlog.get_logger("confinject.container.producer")


class ConfigurationValueProducer:
    """Produces configuration values for injection sites.

    The ResolvedKey is recomputed on every production against the store's
    current ambient coordinates; only the store decides what value comes back.
    """

    def __init__(self, configurations: Configurations, resolver: KeyResolver | None = None) -> None:
        self._configurations = configurations
        self._resolver = resolver or KeyResolver()

    def produce(self, descriptor: CallSiteDescriptor, target_type: type) -> Any:
        try:
            key = self._resolver.resolve(descriptor, self._configurations.coordinates)
        except ResolutionError as exc:
            logger.debug("configuration_resolution_failed", site=descriptor.owner_name(), code=exc.code)
            raise

        return self._configurations.lookup(key.coordinates, key.names, target_type, key.default_value)
