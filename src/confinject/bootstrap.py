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
"""Wires Config, logging, the backing store and the container together."""

from __future__ import annotations

from pathlib import Path

import structlog

from confinject.config.config import ENV_PREFIX, Config
from confinject.config.store import ConfigStore
from confinject.container.container import Container
from confinject.logging.port import LoggingPort
from confinject.logging.structlog_adapter import StructlogAdapter

logger = structlog.get_logger("confinject.bootstrap")


def bootstrap(
    *config_files: str | Path,
    config: Config | None = None,
    logging_adapter: LoggingPort | None = None,
    env_prefix: str = ENV_PREFIX,
) -> Container:
    """Build a Container whose configuration values come from *config_files*.

    Usage::

        container = bootstrap("application.yaml")
        container.register(JavaSettings)
        settings = container.resolve(JavaSettings)
    """
    if config is None:
        config = Config.from_file(*config_files, env_prefix=env_prefix)

    adapter = logging_adapter or StructlogAdapter()
    adapter.configure(config)

    store = ConfigStore(config)
    adapter.bind_coordinates(store.coordinates)

    container = Container()
    container.register_configurations(store)
    container.register_instance(Config, config)
    container.register_instance(ConfigStore, store)

    logger.info("confinject_started", sources=config.loaded_sources, coordinates=dict(store.coordinates))
    return container
