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
"""Tests for Config — file loading, dotted access and env overrides."""

import pytest

from confinject.config import Config


class TestConfigGet:
    def test_nested_key(self):
        config = Config({"java": {"home": "/opt/java"}})
        assert config.get("java.home") == "/opt/java"

    def test_flat_key(self):
        config = Config({"java.home": "/opt/java"})
        assert config.get("java.home") == "/opt/java"

    def test_missing_key_returns_default(self):
        assert Config({}).get("missing.key", "fallback") == "fallback"

    def test_walk_through_scalar_returns_default(self):
        assert Config({"java": "x"}).get("java.home") is None

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("CONFINJECT_JAVA_HOME", "/env/java")
        assert Config({"java": {"home": "/opt/java"}}).get("java.home") == "/env/java"

    def test_unprefixed_env_var_ignored(self, monkeypatch):
        monkeypatch.setenv("JAVA_HOME", "/env/java")
        monkeypatch.delenv("CONFINJECT_JAVA_HOME", raising=False)
        assert Config({"java": {"home": "/opt/java"}}).get("java.home") == "/opt/java"

    def test_env_lookup_can_be_skipped(self, monkeypatch):
        monkeypatch.setenv("CONFINJECT_JAVA_HOME", "/env/java")
        assert Config({"java": {"home": "/opt/java"}}).get("java.home", use_env=False) == "/opt/java"

    def test_env_var_with_prefix(self, monkeypatch):
        monkeypatch.setenv("APP_SERVER_PORT", "9090")
        config = Config({}, env_prefix="APP_")
        assert config.env_key("server.port") == "APP_SERVER_PORT"
        assert config.get("server.port") == "9090"

    def test_env_key_normalizes_dashes(self):
        assert Config({}).env_key("http.read-timeout") == "CONFINJECT_HTTP_READ_TIMEOUT"

    def test_env_key_drops_own_namespace(self):
        assert Config({}).env_key("confinject.logging.format") == "CONFINJECT_LOGGING_FORMAT"


class TestPlaceholders:
    def test_config_reference(self):
        config = Config({"base": "/opt", "java": {"home": "${base}/java"}}, env_prefix="CONFINJECT_TEST_")
        assert config.get("java.home") == "/opt/java"

    def test_placeholder_default(self):
        config = Config({"java": {"home": "${CONFINJECT_TEST_UNSET_VAR:/usr/lib/jvm}"}}, env_prefix="CONFINJECT_TEST_")
        assert config.get("java.home") == "/usr/lib/jvm"

    def test_unresolvable_placeholder_raises(self):
        config = Config({"java": {"home": "${CONFINJECT_TEST_NOPE}"}}, env_prefix="CONFINJECT_TEST_")
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("java.home")

    def test_circular_reference_raises(self):
        config = Config({"a": "${b}", "b": "${a}"}, env_prefix="CONFINJECT_TEST_")
        with pytest.raises(ValueError, match="Max recursion depth"):
            config.get("a")


class TestFromFile:
    def test_yaml_file(self, tmp_path):
        path = tmp_path / "application.yaml"
        path.write_text("java:\n  home: /opt/java\n")
        config = Config.from_file(path)
        assert config.get("java.home") == "/opt/java"
        assert config.loaded_sources == [str(path)]

    def test_toml_file(self, tmp_path):
        path = tmp_path / "application.toml"
        path.write_text('[server]\nport = 8080\n')
        assert Config.from_file(path).get("server.port") == 8080

    def test_later_files_win(self, tmp_path):
        base = tmp_path / "base.yaml"
        base.write_text("server:\n  port: 8080\n  host: localhost\n")
        override = tmp_path / "override.yaml"
        override.write_text("server:\n  port: 9090\n")
        config = Config.from_file(base, override, env_prefix="CONFINJECT_TEST_")
        assert config.get("server.port") == 9090
        assert config.get("server.host") == "localhost"

    def test_missing_file_skipped(self, tmp_path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("missing.key") is None
        assert config.loaded_sources == []

    def test_get_section(self):
        config = Config({"confinject": {"coordinates": {"env": "prod"}}})
        assert config.get_section("confinject.coordinates") == {"env": "prod"}
        assert config.get_section("confinject.missing") == {}
