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
"""StructlogAdapter — LoggingPort implementation that tags events with the ambient coordinates."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping, MutableMapping
from typing import Any

import structlog

from confinject.config.config import Config

LOGGING_SECTION = "confinject.logging"

_FALSE_VALUES = ("false", "0", "no", "off")


class StructlogAdapter:
    """Logging adapter backed by structlog.

    Settings under ``confinject.logging``:

    - ``level.root`` and ``level.<logger name>``: stdlib levels.
    - ``format``: ``console`` (default) or ``json``.
    - ``coordinates``: stamp the bound ambient coordinates on every event
      (default ``true``).

    Coordinates live on the adapter rather than in context variables, so
    events logged from worker threads carry them too.
    """

    def __init__(self) -> None:
        self._levels: dict[str, int] = {}
        self._json = False
        self._stamp = True
        self._coordinates: dict[str, str] = {}

    @property
    def coordinates(self) -> Mapping[str, str]:
        return dict(self._coordinates)

    def configure(self, config: Config) -> None:
        levels = {str(name): str(level) for name, level in config.get_section(f"{LOGGING_SECTION}.level").items()}
        root = levels.pop("root", "INFO")
        self._json = str(config.get(f"{LOGGING_SECTION}.format", "console")).lower() == "json"
        self._stamp = str(config.get(f"{LOGGING_SECTION}.coordinates", "true")).strip().lower() not in _FALSE_VALUES

        structlog.configure(
            processors=self._processors(),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", stream=sys.stdout, level=_level(root), force=True)

        self._levels = {}
        for name, level in levels.items():
            self.set_level(name, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        self._levels[name] = _level(level)
        logging.getLogger(name).setLevel(self._levels[name])

    def bind_coordinates(self, coordinates: Mapping[str, str]) -> None:
        self._coordinates = dict(coordinates)

    def stamp_coordinates(self, _logger: Any, _method: str, event_dict: MutableMapping[str, Any]) -> Any:
        """structlog processor adding ``coordinates`` unless the event already names its own."""
        if self._stamp and self._coordinates:
            event_dict.setdefault("coordinates", dict(self._coordinates))
        return event_dict

    def _processors(self) -> list[structlog.types.Processor]:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer() if self._json else structlog.dev.ConsoleRenderer()
        )
        return [
            structlog.contextvars.merge_contextvars,
            self.stamp_coordinates,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ]


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)
