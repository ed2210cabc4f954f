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
"""ConfigStore — Config-backed implementation of the Configurations port."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import structlog

from confinject.config.config import Config
from confinject.kernel.exceptions import ConfigurationNotFoundError

logger = structlog.get_logger("confinject.config.store")

COORDINATES_ENV_VAR = "CONFIGURATION_COORDINATES"
COORDINATES_SECTION = "confinject.coordinates"


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in ("true", "1", "yes", "on")


DEFAULT_CONVERTERS: dict[type, Callable[[str], Any]] = {
    str: str,
    int: int,
    float: float,
    bool: _to_bool,
}


def parse_coordinates(raw: str) -> dict[str, str]:
    """Parse ``{env=prod, region=us}`` or ``env=prod,region=us`` into a dict."""
    text = raw.strip()
    if text.startswith("{") and text.endswith("}"):
        text = text[1:-1]

    result: dict[str, str] = {}
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        if "=" not in item:
            raise ValueError(f"Malformed coordinate '{item}' in '{raw}': expected name=value")
        name, value = item.split("=", 1)
        result[name.strip()] = value.strip()
    return result


class ConfigStore:
    """Backing store layering coordinate-specific overlays over a base Config.

    An overlay applies to a lookup when every one of its coordinates is
    present with the same value in the lookup coordinates. Names are tried in
    order; for each name the most specific applicable overlay is consulted
    first and the base config last. Environment variable overrides apply to
    the base config only, so they never shadow a matching overlay.
    """

    def __init__(
        self,
        config: Config | None = None,
        coordinates: Mapping[str, str] | None = None,
        converters: Mapping[type, Callable[[str], Any]] | None = None,
    ) -> None:
        self._config = config or Config()
        self._overlays: list[tuple[dict[str, str], Config]] = []
        self._converters = dict(converters if converters is not None else DEFAULT_CONVERTERS)
        self._coordinates = dict(coordinates) if coordinates is not None else self._ambient_coordinates()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def coordinates(self) -> Mapping[str, str]:
        return dict(self._coordinates)

    @property
    def converters(self) -> Mapping[type, Callable[[str], Any]]:
        return dict(self._converters)

    def _ambient_coordinates(self) -> dict[str, str]:
        coordinates = {str(k): str(v) for k, v in self._config.get_section(COORDINATES_SECTION).items()}
        env_val = os.environ.get(COORDINATES_ENV_VAR)
        if env_val:
            coordinates.update(parse_coordinates(env_val))
        return coordinates

    def add_overlay(self, coordinates: Mapping[str, str], config: Config) -> None:
        """Register *config* as the source for lookups matching *coordinates*."""
        self._overlays.append((dict(coordinates), config))

    def _sources_for(self, coordinates: Mapping[str, str]) -> list[tuple[Config, bool]]:
        applicable = [
            (overlay_coords, config)
            for overlay_coords, config in self._overlays
            if all(coordinates.get(name) == value for name, value in overlay_coords.items())
        ]
        applicable.sort(key=lambda entry: len(entry[0]), reverse=True)
        return [(config, False) for _, config in applicable] + [(self._config, True)]

    def lookup(
        self,
        coordinates: Mapping[str, str],
        names: Sequence[str],
        target_type: type,
        default_value: str | None = None,
    ) -> Any:
        """Return the first value found for *names*, converted to *target_type*.

        Raises:
            ConfigurationNotFoundError: no name has a value and no default was given.
            ValueError: the store has no converter for *target_type*.
        """
        sources = self._sources_for(coordinates)
        for name in names:
            for source, use_env in sources:
                value = source.get(name, use_env=use_env)
                if value is not None:
                    return self._convert(value, target_type)

        if default_value is not None:
            logger.debug("configuration_default_used", names=list(names), coordinates=dict(coordinates))
            return self._convert(default_value, target_type)

        logger.debug("configuration_not_found", names=list(names), coordinates=dict(coordinates))
        raise ConfigurationNotFoundError(names, coordinates)

    def _convert(self, value: Any, target_type: type) -> Any:
        converter = self._converters.get(target_type)
        if converter is None:
            raise ValueError(f"No converter registered for type '{getattr(target_type, '__name__', target_type)}'")
        if isinstance(value, target_type):
            return value
        return converter(str(value))
