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
"""Tests for NameResolver — candidate names for a call site."""

import pytest

from confinject.kernel.exceptions import NameUnavailableError, ResolutionError
from confinject.resolution.descriptor import UNSET, CallSiteDescriptor, ScopeElement, ScopeKind
from confinject.resolution.names import NameResolver


def _field(identifier="home", names=()):
    return CallSiteDescriptor.of(
        ScopeElement(ScopeKind.TYPE, "Service"),
        ScopeElement(ScopeKind.FIELD, identifier, names=names),
    )


def _parameter(identifier, names=(), position=1):
    return CallSiteDescriptor.of(
        ScopeElement(ScopeKind.TYPE, "Service"),
        ScopeElement(ScopeKind.CALLABLE, "__init__"),
        ScopeElement(ScopeKind.PARAMETER, identifier, names=names, position=position),
    )


class TestDeclaredNames:
    def test_declared_names_used_in_order(self):
        names = NameResolver().resolve(_field(names=("java.home", "JAVA_HOME", "home")))
        assert names == ["java.home", "JAVA_HOME", "home"]

    def test_sentinel_and_empty_entries_dropped(self):
        names = NameResolver().resolve(_field(names=("", "a", UNSET, "b")))
        assert names == ["a", "b"]

    def test_dropped_entries_do_not_fall_back_to_identifier(self):
        names = NameResolver().resolve(_field(identifier="home", names=(UNSET, "a")))
        assert "home" not in names

    def test_duplicates_collapse_to_first_occurrence(self):
        names = NameResolver().resolve(_field(names=("a", "b", "a")))
        assert names == ["a", "b"]

    def test_only_empty_entries_fails(self):
        with pytest.raises(ResolutionError, match="empty"):
            NameResolver().resolve(_field(names=("", UNSET)))


class TestIdentifierFallback:
    def test_field_identifier(self):
        assert NameResolver().resolve(_field(identifier="javaHome")) == ["javaHome"]

    def test_parameter_identifier(self):
        assert NameResolver().resolve(_parameter("timeout")) == ["timeout"]

    def test_parameter_without_name_raises(self):
        with pytest.raises(NameUnavailableError) as exc_info:
            NameResolver().resolve(_parameter(None, position=3))
        assert exc_info.value.position == 3
        assert exc_info.value.callable_name == "Service.__init__"

    def test_parameter_without_name_but_declared_names_resolves(self):
        assert NameResolver().resolve(_parameter(None, names=("timeout",))) == ["timeout"]
