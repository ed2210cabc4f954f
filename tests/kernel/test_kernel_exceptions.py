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
"""Tests for the confinject exception hierarchy."""

from confinject.kernel.exceptions import (
    ConfigurationNotFoundError,
    ConfinjectException,
    NameUnavailableError,
    ResolutionError,
)


class TestConfinjectException:
    def test_basic_creation(self):
        exc = ConfinjectException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = ConfinjectException("bad", code="X_001", context={"site": "a.b"})
        assert exc.code == "X_001"
        assert exc.context["site"] == "a.b"

    def test_context_not_shared_between_instances(self):
        a = ConfinjectException("a")
        b = ConfinjectException("b")
        a.context["k"] = "v"
        assert b.context == {}


class TestResolutionErrors:
    def test_resolution_error_default_code(self):
        exc = ResolutionError("malformed")
        assert exc.code == "RESOLUTION_FAILED"
        assert isinstance(exc, ConfinjectException)

    def test_name_unavailable_is_resolution_error(self):
        exc = NameUnavailableError(callable_name="Service.__init__", position=2)
        assert isinstance(exc, ResolutionError)
        assert exc.code == "RESOLUTION_NAME_UNAVAILABLE"

    def test_name_unavailable_identifies_callable_and_position(self):
        exc = NameUnavailableError(callable_name="Service.__init__", position=2)
        message = str(exc)
        assert "index 2" in message
        assert "Service.__init__" in message
        assert "ConfigurationValue" in message
        assert exc.context == {"callable": "Service.__init__", "position": 2}


class TestConfigurationNotFoundError:
    def test_carries_names_and_coordinates(self):
        exc = ConfigurationNotFoundError(["java.home", "home"], {"env": "prod"})
        assert exc.names == ("java.home", "home")
        assert exc.coordinates == {"env": "prod"}
        assert exc.code == "CONFIGURATION_NOT_FOUND"
        assert "java.home" in str(exc)
