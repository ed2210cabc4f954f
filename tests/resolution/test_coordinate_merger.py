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
"""Tests for CoordinateMerger — ambient coordinates win, declared ones only add."""

import pytest

from confinject.kernel.exceptions import ResolutionError
from confinject.resolution.coordinates import CoordinateMerger


class TestCoordinateMerger:
    def test_ambient_wins_and_declared_adds(self):
        merged = CoordinateMerger().merge({"env": "prod"}, [("env", "dev"), ("region", "us")])
        assert merged == {"env": "prod", "region": "us"}

    def test_no_declared_set_returns_ambient_copy(self):
        ambient = {"env": "prod"}
        merged = CoordinateMerger().merge(ambient, None)
        assert merged == ambient
        assert merged is not ambient

    def test_no_ambient(self):
        assert CoordinateMerger().merge(None, [("a", "b"), ("c", "d")]) == {"a": "b", "c": "d"}

    def test_declared_order_preserved_after_ambient(self):
        merged = CoordinateMerger().merge({"env": "prod"}, [("z", "1"), ("a", "2")])
        assert list(merged) == ["env", "z", "a"]

    def test_ambient_not_mutated(self):
        ambient = {"env": "prod"}
        CoordinateMerger().merge(ambient, [("region", "us")])
        assert ambient == {"env": "prod"}

    def test_duplicate_declared_names_rejected(self):
        with pytest.raises(ResolutionError, match="Duplicate coordinate 'a'"):
            CoordinateMerger().merge({}, [("a", "1"), ("a", "2")])

    def test_empty_declared_set(self):
        assert CoordinateMerger().merge({"env": "prod"}, []) == {"env": "prod"}
