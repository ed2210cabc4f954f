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
"""Hierarchical configuration with YAML/TOML files and env var overrides."""

from __future__ import annotations

import os
import re
import tomllib
from pathlib import Path
from typing import Any, cast

import yaml  # type: ignore[import-untyped]

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")

ENV_PREFIX = "CONFINJECT_"


class Config:
    """Hierarchical configuration with dot-notation access and env var overrides.

    Keys may be stored nested (``{"java": {"home": ...}}``) or flat
    (``{"java.home": ...}``); both are reachable as ``java.home``.

    Priority (highest wins):
    1. Environment variables (``java.home`` -> ``CONFINJECT_JAVA_HOME``)
    2. Configuration dict / file values

    A leading ``confinject.`` is not repeated in the variable name, so
    ``confinject.logging.format`` maps to ``CONFINJECT_LOGGING_FORMAT``.
    """

    def __init__(self, data: dict[str, Any] | None = None, env_prefix: str = ENV_PREFIX) -> None:
        self._data: dict[str, Any] = data or {}
        self._env_prefix = env_prefix
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """List of config file paths that were loaded, in merge order."""
        return list(self._loaded_sources)

    @classmethod
    def from_file(cls, *paths: str | Path, env_prefix: str = ENV_PREFIX) -> Config:
        """Load and deep-merge YAML or TOML files; later files win, missing files are skipped."""
        data: dict[str, Any] = {}
        sources: list[str] = []
        for path in paths:
            path = Path(path)
            if path.is_file():
                data = cls._deep_merge(data, cls._load_config_data(path))
                sources.append(str(path))

        instance = cls(data, env_prefix=env_prefix)
        instance._loaded_sources = sources
        return instance

    @staticmethod
    def _load_config_data(path: Path) -> dict[str, Any]:
        """Load config data from a YAML or TOML file."""
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f) or {}
        with open(path) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge override into base, with override values winning."""
        merged = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def env_key(self, key: str) -> str:
        """Environment variable consulted for *key*: ``java.home`` -> ``CONFINJECT_JAVA_HOME``."""
        env_base = key.removeprefix("confinject.")
        return self._env_prefix + env_base.upper().replace(".", "_").replace("-", "_")

    def get(self, key: str, default: Any = None, *, use_env: bool = True) -> Any:
        """Get a value by dot-notation key, checking env vars first unless *use_env* is false.

        String values containing ``${...}`` placeholders are resolved:
        - ``${ENV_VAR}`` — resolved from environment variables
        - ``${config.key}`` — resolved from other config values
        - ``${key:default}`` — uses default if key/env not found
        """
        if use_env:
            env_val = os.environ.get(self.env_key(key))
            if env_val is not None:
                return env_val

        current = self._lookup_raw(key)
        if current is None:
            return default

        if isinstance(current, str) and "${" in current:
            return self._resolve_placeholders(current)

        return current

    def _lookup_raw(self, key: str) -> Any:
        if key in self._data:
            return self._data[key]

        current: Any = self._data
        for part in key.split("."):
            if isinstance(current, dict):
                current = current.get(part)
                if current is None:
                    return None
            else:
                return None
        return current

    def _resolve_placeholders(self, value: str, _depth: int = 0) -> str:
        """Resolve ``${...}`` placeholders in a string value.

        Guards against circular references with a max recursion depth.
        """
        if _depth > 10:
            raise ValueError(
                f"Max recursion depth exceeded resolving placeholders in '{value}'. Check for circular references."
            )

        def _replace(match: re.Match[str]) -> str:
            inner = match.group(1)

            if ":" in inner:
                ref_key, default_val = inner.split(":", 1)
            else:
                ref_key, default_val = inner, None

            env_val = os.environ.get(ref_key)
            if env_val is not None:
                return env_val

            current = self._lookup_raw(ref_key)
            if current is not None:
                resolved = str(current)
                if "${" in resolved:
                    resolved = self._resolve_placeholders(resolved, _depth + 1)
                return resolved

            if default_val is not None:
                return cast(str, default_val)

            raise ValueError(f"Cannot resolve placeholder '${{{inner}}}': not found in environment or config")

        return _PLACEHOLDER_RE.sub(_replace, value)

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get all values under a prefix as a dict."""
        current = self._lookup_raw(prefix)
        return current if isinstance(current, dict) else {}
