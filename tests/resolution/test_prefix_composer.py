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
"""Tests for PrefixComposer — nearest-ancestor namespace prefixing."""

from confinject.resolution.descriptor import CallSiteDescriptor, ScopeElement, ScopeKind
from confinject.resolution.prefix import PrefixComposer


def _descriptor(*ancestors: ScopeElement, innermost_namespace=None) -> CallSiteDescriptor:
    return CallSiteDescriptor.of(*ancestors, ScopeElement(ScopeKind.FIELD, "home", namespace=innermost_namespace))


class TestPrefixComposer:
    def test_no_namespace_is_noop(self):
        descriptor = _descriptor(ScopeElement(ScopeKind.TYPE, "Service"))
        assert PrefixComposer().compose(descriptor, ["home", "dir"]) == ["home", "dir"]

    def test_root_only_chain_is_noop(self):
        descriptor = CallSiteDescriptor.of(ScopeElement(ScopeKind.FIELD, "home"))
        assert PrefixComposer().compose(descriptor, ["home"]) == ["home"]

    def test_immediate_parent_namespace_applied(self):
        descriptor = _descriptor(ScopeElement(ScopeKind.TYPE, "Service", namespace="java"))
        assert PrefixComposer().compose(descriptor, ["home", "vendor"]) == ["java.home", "java.vendor"]

    def test_nearest_ancestor_wins_without_concatenation(self):
        descriptor = _descriptor(
            ScopeElement(ScopeKind.TYPE, "Outer", namespace="outer"),
            ScopeElement(ScopeKind.TYPE, "Inner", namespace="inner"),
            ScopeElement(ScopeKind.CALLABLE, "__init__"),
        )
        assert PrefixComposer().compose(descriptor, ["home"]) == ["inner.home"]

    def test_walk_skips_unannotated_scopes(self):
        descriptor = _descriptor(
            ScopeElement(ScopeKind.TYPE, "Outer", namespace="outer"),
            ScopeElement(ScopeKind.TYPE, "Inner"),
            ScopeElement(ScopeKind.CALLABLE, "__init__"),
        )
        assert PrefixComposer().compose(descriptor, ["home"]) == ["outer.home"]

    def test_empty_namespace_stops_walk(self):
        descriptor = _descriptor(
            ScopeElement(ScopeKind.TYPE, "Outer", namespace="outer"),
            ScopeElement(ScopeKind.TYPE, "Inner", namespace=""),
        )
        assert PrefixComposer().compose(descriptor, ["home"]) == ["home"]

    def test_innermost_namespace_ignored(self):
        descriptor = _descriptor(ScopeElement(ScopeKind.TYPE, "Service"), innermost_namespace="own")
        assert PrefixComposer().compose(descriptor, ["home"]) == ["home"]

    def test_find_namespace(self):
        descriptor = _descriptor(ScopeElement(ScopeKind.CALLABLE, "start", namespace="jvm"))
        assert PrefixComposer().find_namespace(descriptor) == "jvm"
